"""
Review service: the write and read operations behind the review endpoints.

A task's review row has two halves, one per party. Whenever a party submits its half, the
rating aggregate of the *other* party is recomputed in the same transaction:

- a pet owner's rating feeds the sitter's `Sitter.average_rating` / `total_reviews`,
- a sitter's rating feeds the pet owner's `Profile.average_rating` / `total_reviews`.

Amending a review only rewrites the acting party's half and leaves the aggregates alone.
"""
import logging

from django.contrib.auth.models import User
from django.db import transaction
from django.db.models import Avg, Count
from django.utils import timezone

from profile_app.models import Profile, Sitter
from tasks_app.models import Task, TaskParty
from .exceptions import NotTaskParty, ReviewNotFound, TaskNotFound, UserNotFound
from .models import Review

logger = logging.getLogger(__name__)

# The review columns each party owns.
PARTY_FIELDS = {
    TaskParty.PET_OWNER: ('pet_owner_rating', 'pet_owner_content'),
    TaskParty.SITTER: ('sitter_rating', 'sitter_content'),
}


def _get_task(task_id, lock=False):
    queryset = Task.objects.select_for_update() if lock else Task.objects.all()
    try:
        return queryset.get(pk=task_id)
    except Task.DoesNotExist:
        raise TaskNotFound()


def _resolve_party(task, user_id):
    party = task.party_of(user_id)
    if party is None:
        logger.warning("User %s is not a party of task %s", user_id, task.pk)
        raise NotTaskParty()
    return party


def _rating_stats(reviews, rating_field):
    """
    Returns `(average, count)` of the non-empty values of `rating_field` in `reviews`.

    The average is 0 when there is nothing to average.
    """
    stats = reviews.filter(**{f'{rating_field}__isnull': False}).aggregate(
        average=Avg(rating_field),
        total=Count('id'),
    )
    return stats['average'] or 0.0, stats['total']


@transaction.atomic
def recalculate_sitter_rating(sitter_user_id):
    """
    Recomputes and stores a sitter's rating from the pet owner ratings they received.

    The sitter row is created if it does not exist yet and is locked for the rest of the
    transaction, so concurrent submissions for the same sitter are applied one after another.

    Args:
        sitter_user_id (int): The primary key of the sitter's user.

    Returns:
        Sitter: The updated aggregate record.
    """
    sitter, _ = Sitter.objects.select_for_update().get_or_create(user_id=sitter_user_id)
    sitter.average_rating, sitter.total_reviews = _rating_stats(
        Review.objects.filter(sitter_user_id=sitter_user_id), 'pet_owner_rating'
    )
    sitter.save(update_fields=['average_rating', 'total_reviews'])
    return sitter


@transaction.atomic
def recalculate_pet_owner_rating(pet_owner_user_id):
    """
    Recomputes and stores a pet owner's rating from the sitter ratings they received.

    Mirrors `recalculate_sitter_rating`, writing to the owner's `Profile`.

    Args:
        pet_owner_user_id (int): The primary key of the pet owner's user.

    Returns:
        Profile: The updated aggregate record.
    """
    profile, _ = Profile.objects.select_for_update().get_or_create(user_id=pet_owner_user_id)
    profile.average_rating, profile.total_reviews = _rating_stats(
        Review.objects.filter(pet_owner_user_id=pet_owner_user_id), 'sitter_rating'
    )
    profile.save(update_fields=['average_rating', 'total_reviews'])
    return profile


def submit_review(task_id, user_id, rating, content):
    """
    Writes the acting party's half of a task's review and refreshes the other party's rating.

    Runs as one transaction. The review row is created on the first submission by either
    party and updated on later ones, the task's `review` pointer is set, and the rating
    aggregate of the reviewed party is recomputed. If any step fails nothing is stored and
    the error propagates to the caller.

    Args:
        task_id: The primary key of the task.
        user_id (int): The primary key of the reviewing user.
        rating (int): The rating, 1 to 5.
        content (str): The comment.

    Returns:
        Review: The review row after the write.

    Raises:
        TaskNotFound: No task with `task_id` exists.
        NotTaskParty: The user is neither the pet owner nor the sitter of the task.
    """
    with transaction.atomic():
        task = _get_task(task_id, lock=True)
        party = _resolve_party(task, user_id)
        rating_field, content_field = PARTY_FIELDS[party]

        defaults = {
            'pet_owner_user_id': task.pet_owner_user_id,
            'sitter_user_id': task.sitter_user_id,
            rating_field: rating,
            content_field: content,
        }
        if party == TaskParty.SITTER:
            defaults['sitter_user_created_at'] = timezone.now()
        review, created = Review.objects.update_or_create(task=task, defaults=defaults)

        if task.review_id != review.pk:
            task.review = review
            task.save(update_fields=['review', 'updated_at'])

        if party == TaskParty.PET_OWNER:
            recalculate_sitter_rating(task.sitter_user_id)
        else:
            recalculate_pet_owner_rating(task.pet_owner_user_id)

        transaction.on_commit(lambda: logger.info(
            "%s review %s for task %s by %s %s",
            'Created' if created else 'Updated', review.pk, task.pk, party.label, user_id,
        ))
    return review


def amend_review(task_id, user_id, rating, content):
    """
    Rewrites the acting party's rating and comment on an existing review.

    This is a single UPDATE on the review row. The other party's half and both rating
    aggregates stay as they are.

    Raises:
        TaskNotFound: No task with `task_id` exists.
        NotTaskParty: The user is neither the pet owner nor the sitter of the task.
        ReviewNotFound: The task has not been reviewed yet.
    """
    task = _get_task(task_id)
    party = _resolve_party(task, user_id)
    rating_field, content_field = PARTY_FIELDS[party]

    updated = Review.objects.filter(task=task).update(**{
        rating_field: rating,
        content_field: content,
        # `update()` bypasses `auto_now`.
        'updated_at': timezone.now(),
    })
    if not updated:
        raise ReviewNotFound()

    logger.info("Amended review for task %s by %s %s", task.pk, party.label, user_id)
    return Review.objects.get(task=task)


def get_review_for_task(task_id):
    """Returns the review of a task, raising `TaskNotFound` or `ReviewNotFound`."""
    task = _get_task(task_id)
    try:
        return Review.objects.get(task=task)
    except Review.DoesNotExist:
        raise ReviewNotFound()


def _ensure_user_exists(user_id):
    if not User.objects.filter(pk=user_id).exists():
        raise UserNotFound()


def list_reviews_for_pet_owner(user_id):
    """All reviews of tasks where the user was the pet owner, newest first."""
    _ensure_user_exists(user_id)
    return Review.objects.filter(pet_owner_user_id=user_id)


def list_reviews_for_sitter(user_id):
    """All reviews of tasks where the user was the sitter, newest first."""
    _ensure_user_exists(user_id)
    return Review.objects.filter(sitter_user_id=user_id)
