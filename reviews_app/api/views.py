from rest_framework import generics, status
from rest_framework.filters import OrderingFilter
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from django_filters.rest_framework import DjangoFilterBackend

from ..services import (
    amend_review,
    get_review_for_task,
    list_reviews_for_pet_owner,
    list_reviews_for_sitter,
    submit_review,
)
from .filters import ReviewFilter
from .permissions import IsActingUser
from .serializers import ReviewReadSerializer, ReviewRequestSerializer


class TaskReviewView(APIView):
    """
    The review of a single task.

    Endpoints:
        GET   /api/v1/tasks/{task_id}/review: Returns the review of the task.
        POST  /api/v1/tasks/{task_id}/review: Submits the caller's half of the review.
        PATCH /api/v1/tasks/{task_id}/review: Amends the caller's half of the review.

    All three require a bearer token. For POST and PATCH the `user_id` in the body must be the
    authenticated user and a party of the task. Success and error responses use the
    `{status, message, data}` envelope.
    """
    permission_classes = [IsAuthenticated, IsActingUser]

    def get(self, request, task_id, format=None):
        """Returns the task's review, or 404 if the task or its review does not exist."""
        review = get_review_for_task(task_id)
        return Response(
            {'status': True, 'data': ReviewReadSerializer(review).data},
            status=status.HTTP_200_OK
        )

    def post(self, request, task_id, format=None):
        """
        Submits a review for the task.

        The service classifies the caller as pet owner or sitter, writes that half of the
        review and recomputes the other party's rating. The response is only sent once the
        transaction has committed.
        """
        serializer = ReviewRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        review = submit_review(task_id, data['user_id'].pk, data['rating'], data['content'])

        return Response(
            {
                'status': True,
                'message': 'Create Successfully!',
                'data': ReviewReadSerializer(review).data,
            },
            status=status.HTTP_201_CREATED
        )

    def patch(self, request, task_id, format=None):
        """Amends the caller's rating and comment. Rating aggregates are not recomputed."""
        serializer = ReviewRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        review = amend_review(task_id, data['user_id'].pk, data['rating'], data['content'])

        return Response(
            {
                'status': True,
                'message': 'Update Successfully!',
                'data': ReviewReadSerializer(review).data,
            },
            status=status.HTTP_200_OK
        )


class UserReviewListView(generics.ListAPIView):
    """
    Base view for the review lists of one user.

    Subclasses decide which side of the reviews the user is on by overriding `get_queryset`.
    An unknown user gives a 404, a known user without reviews an empty list.
    """
    serializer_class = ReviewReadSerializer

    # Pagination is disabled; all reviews of the user are returned in one response.
    pagination_class = None

    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = ReviewFilter
    ordering_fields = ['updated_at', 'pet_owner_rating', 'sitter_rating']

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return Response({'status': True, 'data': serializer.data}, status=status.HTTP_200_OK)


class PetOwnerReviewListView(UserReviewListView):
    """
    GET /api/v1/pet-owners/{user_id}/reviews

    Reviews of all tasks the user booked as a pet owner. Public.
    """
    permission_classes = [AllowAny]

    def get_queryset(self):
        return list_reviews_for_pet_owner(self.kwargs['user_id'])


class SitterReviewListView(UserReviewListView):
    """
    GET /api/v1/sitters/{user_id}/reviews

    Reviews of all tasks the user looked after as a sitter. Requires a bearer token.
    """
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return list_reviews_for_sitter(self.kwargs['user_id'])
