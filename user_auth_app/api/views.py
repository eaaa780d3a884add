import logging

from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.authtoken.models import Token

from .serializers import RegistrationSerializer, CustomAuthTokenSerializer

logger = logging.getLogger(__name__)


def token_payload(user, token):
    """The account data returned after registration and login."""
    return {
        'token': token.key,
        'username': user.username,
        'email': user.email,
        'user_id': user.id,
        'type': user.profile.type,
    }


class RegistrationView(APIView):
    """
    Handles new user registration.

    Endpoint:
        POST /api/v1/registration/

    Request Body:
        - username (str): The desired username.
        - email (str): The user's email address.
        - password (str): The user's password.
        - repeated_password (str): The password for confirmation.
        - type (str): 'pet_owner' or 'sitter'.

    Responses:
        - 201 Created: `{"status": true, "data": {"token", "username", "email", "user_id",
          "type"}}`. The token is sent as `Authorization: Bearer <token>`.
        - 400 Bad Request: The provided data was invalid. The field errors are in `data`.
    """
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        saved_account = serializer.save()

        token, created = Token.objects.get_or_create(user=saved_account)
        logger.info("Registered user %s as %s", saved_account.id, saved_account.profile.type)

        return Response(
            {'status': True, 'data': token_payload(saved_account, token)},
            status=status.HTTP_201_CREATED
        )


class CustomLoginView(APIView):
    """
    Handles user authentication and token generation.

    Endpoint:
        POST /api/v1/login/

    Request Body:
        - username (str): The user's username.
        - password (str): The user's password.

    Responses:
        - 200 OK: `{"status": true, "data": {...}}` with the same fields as registration.
        - 400 Bad Request: Authentication failed or fields are missing.
    """
    permission_classes = [AllowAny]
    serializer_class = CustomAuthTokenSerializer

    def post(self, request):
        serializer = self.serializer_class(
            data=request.data,
            context={'request': request}
        )
        serializer.is_valid(raise_exception=True)

        user = serializer.validated_data['user']
        token, created = Token.objects.get_or_create(user=user)
        return Response(
            {'status': True, 'data': token_payload(user, token)},
            status=status.HTTP_200_OK
        )
