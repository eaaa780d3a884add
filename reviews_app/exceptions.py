"""
Domain exceptions raised by the review service.

They subclass DRF's API exceptions, so a view can let them propagate and DRF (through the
envelope exception handler) turns them into the matching 403/404 response.
"""
from rest_framework.exceptions import NotFound, PermissionDenied


class TaskNotFound(NotFound):
    default_detail = 'Task is not found!'
    default_code = 'task_not_found'


class ReviewNotFound(NotFound):
    default_detail = 'Review is not found!'
    default_code = 'review_not_found'


class UserNotFound(NotFound):
    default_detail = 'User is not found!'
    default_code = 'user_not_found'


class NotTaskParty(PermissionDenied):
    """The acting user is neither the pet owner nor the sitter of the task."""
    default_detail = 'Only the pet owner or the sitter of this task can review it.'
    default_code = 'not_task_party'
