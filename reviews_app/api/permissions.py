from rest_framework import permissions


class IsActingUser(permissions.BasePermission):
    """
    Only allows users to submit or amend reviews in their own name.

    Review bodies carry the id of the reviewing user (`user_id`). For write requests this
    permission checks that the id belongs to the authenticated user, so nobody can write the
    other party's half of a review by sending their id. Read requests are not affected.
    """
    message = "You can only write reviews as yourself."

    def has_permission(self, request, view):
        """
        Compares the `user_id` of the request body with the authenticated user.

        A body without a `user_id` passes here and is rejected by the serializer instead, so
        the client gets a 400 naming the missing field rather than a 403.

        Returns:
            bool: True if the request may proceed, False otherwise.
        """
        if request.method in permissions.SAFE_METHODS:
            return True

        if not request.user or not request.user.is_authenticated:
            return False

        data = request.data
        if not isinstance(data, dict) or data.get('user_id') is None:
            return True

        return str(data['user_id']) == str(request.user.pk)
