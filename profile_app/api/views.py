from rest_framework import generics, permissions, status
from rest_framework.response import Response

from profile_app.models import Profile, Sitter
from .serializers import PetOwnerProfileSerializer, SitterSerializer


class RatingDetailView(generics.RetrieveAPIView):
    """
    Base view returning the rating record of a single user.

    The record is looked up by the associated User's primary key from the URL, not by the
    record's own primary key, and returned inside the `{status, data}` envelope.
    """
    permission_classes = [permissions.IsAuthenticated]

    # Find the record whose related 'user' has the primary key given in the URL.
    lookup_field = 'user__pk'
    lookup_url_kwarg = 'user_id'

    def retrieve(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_object())
        return Response({'status': True, 'data': serializer.data}, status=status.HTTP_200_OK)


class PetOwnerProfileDetailView(RatingDetailView):
    """
    GET /api/v1/pet-owners/{user_id}/

    Returns the user's profile with the average rating and review count they received from
    sitters.
    """
    # .select_related('user') fetches the User in the same query, since the serializer
    # reads the username.
    queryset = Profile.objects.select_related('user').all()
    serializer_class = PetOwnerProfileSerializer


class SitterDetailView(RatingDetailView):
    """
    GET /api/v1/sitters/{user_id}/

    Returns the sitter record with the average rating and review count they received from
    pet owners.
    """
    queryset = Sitter.objects.select_related('user').all()
    serializer_class = SitterSerializer
