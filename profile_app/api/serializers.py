from rest_framework import serializers
from profile_app.models import Profile, Sitter


class PetOwnerProfileSerializer(serializers.ModelSerializer):
    """
    Serializes a user's Profile together with their rating as a pet owner.

    All fields are read-only: the rating values are maintained by the review service and the
    profile type is fixed at registration.
    """
    # The user's unique ID, exposed as 'user' instead of the profile's own primary key.
    user = serializers.IntegerField(source='user.id', read_only=True)
    username = serializers.CharField(source='user.username', read_only=True)

    # ISO 8601 without milliseconds or timezone information (e.g., "2023-01-01T12:00:00").
    created_at = serializers.DateTimeField(format="%Y-%m-%dT%H:%M:%S", read_only=True)

    class Meta:
        model = Profile
        fields = [
            'user',
            'username',
            'type',
            'average_rating',
            'total_reviews',
            'created_at'
        ]
        read_only_fields = ['type', 'average_rating', 'total_reviews']


class SitterSerializer(serializers.ModelSerializer):
    """Serializes a Sitter record with its rating as a sitter."""
    user = serializers.IntegerField(source='user.id', read_only=True)
    username = serializers.CharField(source='user.username', read_only=True)
    created_at = serializers.DateTimeField(format="%Y-%m-%dT%H:%M:%S", read_only=True)

    class Meta:
        model = Sitter
        fields = [
            'user',
            'username',
            'average_rating',
            'total_reviews',
            'created_at'
        ]
        read_only_fields = ['average_rating', 'total_reviews']
