from django.db import models
from django.contrib.auth.models import User

# Create your models here.


# --- Models ---
class Profile(models.Model):
    """
    Extends the built-in Django User model with marketplace-specific information.

    Every user gets exactly one profile, created by a `post_save` signal (see `signals.py`).
    Besides the user's role, the profile carries the user's rating as a pet owner: the
    average of all ratings sitters gave them and the number of those ratings. Both values are
    denormalized and only written by the review service when a sitter submits a review.
    """
    # related_name='profile': Allows easy reverse access from a User instance (e.g., `user.profile`).
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='profile')

    class UserType(models.TextChoices):
        """The role a user signed up with."""
        PET_OWNER = 'pet_owner', 'Pet owner'
        SITTER = 'sitter', 'Sitter'

    type = models.CharField(max_length=10, choices=UserType.choices,
                            default=UserType.PET_OWNER, verbose_name="User type")

    # --- Pet owner aggregate ---
    average_rating = models.FloatField(default=0, verbose_name="Average rating")
    total_reviews = models.PositiveIntegerField(default=0, verbose_name="Total reviews")

    created_at = models.DateTimeField(auto_now_add=True)

    # --- Methods ---
    def __str__(self):
        return f"Profile of {self.user.username}"


class Sitter(models.Model):
    """
    The sitter-side record of a user, holding their rating as a sitter.

    `average_rating` is the mean of every pet owner rating on reviews where this user was the
    sitter, `total_reviews` the number of those ratings. The review service recomputes both
    when a pet owner submits a review.
    """
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='sitter')
    average_rating = models.FloatField(default=0, verbose_name="Average rating")
    total_reviews = models.PositiveIntegerField(default=0, verbose_name="Total reviews")
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"Sitter {self.user.username}"
