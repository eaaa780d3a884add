import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


def envelope_exception_handler(exc, context):
    """
    Renders every API error in the `{status, message, data}` envelope.

    DRF's default handler is asked first. It knows how to turn `APIException`
    subclasses (NotFound, PermissionDenied, ValidationError, ...) and Django's
    `Http404`/`PermissionDenied` into responses. Its payload is then reshaped:

    - `{"detail": "..."}` becomes `{"status": false, "message": "..."}`.
    - Field errors from a serializer become
      `{"status": false, "message": "Invalid request data.", "data": {...}}`.

    Anything DRF does not recognize (for example a database error raised inside
    a transaction) is logged with its traceback and answered with an opaque 500
    envelope, so the client never sees internals.

    Args:
        exc: The exception raised while handling the request.
        context: A dict with the `view`, `args`, `kwargs` and `request`.

    Returns:
        Response: The envelope response.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.error(
            "Unhandled error in %s",
            view.__class__.__name__ if view else 'unknown view',
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        set_rollback()
        return Response(
            {'status': False, 'message': 'Internal server error.'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    data = response.data
    if isinstance(data, dict) and set(data.keys()) == {'detail'}:
        response.data = {'status': False, 'message': str(data['detail'])}
    else:
        response.data = {'status': False, 'message': 'Invalid request data.', 'data': data}
    return response
