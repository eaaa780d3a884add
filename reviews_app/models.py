from django.db import models
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator

RATING_VALIDATORS = [MinValueValidator(1), MaxValueValidator(5)]


# Create your models here.
class Review(models.Model):
    """
    The review of a single task, written from both sides.

    Each task has at most one review row, enforced by the one-to-one link to the task. The row
    holds two independent halves: the pet owner's rating of the sitter and the sitter's rating
    of the pet owner. Either half may be written first and each party only ever writes its own
    half, so the two never overwrite each other.

    Attributes:
        task (OneToOneField): The task being reviewed. Unique per review.
        pet_owner_user (ForeignKey): The pet owner of the task. Reviews are grouped by this
            user when the owner's aggregate rating is computed.
        pet_owner_rating (PositiveSmallIntegerField): The owner's rating of the sitter, 1 to 5.
        pet_owner_content (TextField): The owner's comment.
        sitter_user (ForeignKey): The sitter of the task. Reviews are grouped by this user when
            the sitter's aggregate rating is computed.
        sitter_rating (PositiveSmallIntegerField): The sitter's rating of the owner, 1 to 5.
        sitter_content (TextField): The sitter's comment.
        sitter_user_created_at (DateTimeField): When the sitter submitted their half.
        created_at (DateTimeField): When the row was created.
        updated_at (DateTimeField): When the row was last saved.
    """
    # Deleting a task removes its review as well.
    task = models.OneToOneField(
        'tasks_app.Task',
        related_name='review_entry',
        on_delete=models.CASCADE,
        help_text="The task this review belongs to."
    )

    # --- Pet owner's half ---
    pet_owner_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name='reviews_as_pet_owner',
        on_delete=models.CASCADE,
        help_text="The pet owner of the reviewed task."
    )
    pet_owner_rating = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=RATING_VALIDATORS,
        help_text="The pet owner's rating of the sitter, from 1 to 5."
    )
    pet_owner_content = models.TextField(
        blank=True,
        default='',
        help_text="The pet owner's comment."
    )

    # --- Sitter's half ---
    sitter_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name='reviews_as_sitter',
        on_delete=models.CASCADE,
        help_text="The sitter of the reviewed task."
    )
    sitter_rating = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=RATING_VALIDATORS,
        help_text="The sitter's rating of the pet owner, from 1 to 5."
    )
    sitter_content = models.TextField(
        blank=True,
        default='',
        help_text="The sitter's comment."
    )
    sitter_user_created_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the sitter submitted their half of the review."
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Metadata options for the Review model."""

        # Newest reviews first.
        ordering = ['-updated_at']
        verbose_name = "Review"
        verbose_name_plural = "Reviews"

    def __str__(self):
        return f"Review for task {self.task_id}"
