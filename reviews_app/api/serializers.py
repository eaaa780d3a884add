from django.contrib.auth.models import User
from rest_framework import serializers
from ..models import Review


class ReviewReadSerializer(serializers.ModelSerializer):
    """
    Serializer for the `Review` model, intended for read-only operations.

    Used for every review payload the API returns: the single review of a task as well as the
    review lists of a pet owner or sitter. The task and both users are represented by their
    primary keys under `*_id` names.
    """
    task_id = serializers.UUIDField(read_only=True)
    pet_owner_user_id = serializers.IntegerField(read_only=True)
    sitter_user_id = serializers.IntegerField(read_only=True)

    class Meta:
        """Meta class to configure the serializer's behavior."""

        model = Review
        fields = [
            'id',
            'task_id',
            'pet_owner_user_id',
            'pet_owner_rating',
            'pet_owner_content',
            'sitter_user_id',
            'sitter_rating',
            'sitter_content',
            'sitter_user_created_at',
            'created_at',
            'updated_at'
        ]


class ReviewRequestSerializer(serializers.Serializer):
    """
    Validates the body of a review submission or amendment.

    The same payload is used for both: the reviewing user, the rating and the comment. Which
    half of the review gets written is decided later from the task, not from the payload.

    Input Fields:
        - user_id (int): The reviewing user. Must exist.
        - rating (int): A rating from 1 to 5.
        - content (str): The comment. May be empty.
    """
    # Resolves the id to a User instance and rejects unknown ids with a 400.
    user_id = serializers.PrimaryKeyRelatedField(queryset=User.objects.all())
    rating = serializers.IntegerField(min_value=1, max_value=5)
    content = serializers.CharField(allow_blank=True)
