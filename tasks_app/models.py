import uuid

from django.db import models
from django.conf import settings

# Create your models here.


class TaskParty(models.TextChoices):
    """The two sides of a task. Each side writes its own half of the task's review."""
    PET_OWNER = 'pet_owner', 'Pet owner'
    SITTER = 'sitter', 'Sitter'


class Task(models.Model):
    """
    A pet-sitting engagement between one pet owner and one sitter.

    Tasks are created and driven through their lifecycle by the booking side of the
    marketplace. The review subsystem only reads the two parties of a task (to find out who
    is reviewing whom) and writes the `review` pointer once a review row exists.

    Attributes:
        id (UUIDField): The task identifier used in all review URLs.
        pet_owner_user (ForeignKey): The user who booked the sitting.
        sitter_user (ForeignKey): The user who looks after the pet.
        review (OneToOneField): The review written for this task, if any.
        title (CharField): A short description of the task.
        status (CharField): The current state of the task.
        created_at (DateTimeField): Timestamp of when the task was created.
        updated_at (DateTimeField): Timestamp of the last update.
    """
    # --- Enumerations ---
    class TaskStatus(models.TextChoices):
        """The lifecycle states a task can be in."""
        PENDING = 'pending', 'Pending'
        IN_PROGRESS = 'in_progress', 'In Progress'
        COMPLETED = 'completed', 'Completed'
        CANCELLED = 'cancelled', 'Cancelled'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # --- Relationships ---
    pet_owner_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        # e.g., `user.owner_tasks.all()` returns every task the user booked as a pet owner.
        related_name='owner_tasks',
        on_delete=models.CASCADE,
        help_text="The user who owns the pet and booked the task."
    )
    sitter_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        # e.g., `user.sitter_tasks.all()` returns every task the user took on as a sitter.
        related_name='sitter_tasks',
        on_delete=models.CASCADE,
        help_text="The user who performs the sitting."
    )
    # Denormalized pointer to the review row. The row itself is keyed by task, so the
    # reverse accessor is disabled to keep `task.review` unambiguous.
    review = models.OneToOneField(
        'reviews_app.Review',
        related_name='+',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        help_text="The review written for this task, set when the first review is submitted."
    )

    # --- Task Details ---
    title = models.CharField(
        max_length=255,
        blank=True,
        default='',
        help_text="A short description of the task."
    )
    status = models.CharField(
        max_length=50,
        choices=TaskStatus.choices,
        default=TaskStatus.PENDING,
        help_text="The current status of the task."
    )

    # --- Timestamps ---
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp for when the record was first created."
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp for when the record was last updated."
    )

    class Meta:
        """Inner class to configure model-level options."""
        ordering = ['-created_at']
        verbose_name = "Task"
        verbose_name_plural = "Tasks"

    def __str__(self):
        return f"Task {self.id}: {self.title}"

    def party_of(self, user_id):
        """
        Returns which side of the task a user is on.

        Args:
            user_id (int): The primary key of the user to classify.

        Returns:
            TaskParty: The side of the task, or None if the user takes no part in it.
        """
        if self.pet_owner_user_id == user_id:
            return TaskParty.PET_OWNER
        if self.sitter_user_id == user_id:
            return TaskParty.SITTER
        return None
