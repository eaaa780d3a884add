from django.contrib.auth import authenticate
from django.contrib.auth.models import User
from django.db import transaction
from rest_framework import serializers

from profile_app.models import Profile, Sitter


class RegistrationSerializer(serializers.ModelSerializer):
    """
    Handles the registration of a new user.

    This serializer validates user input, confirms passwords, and creates a new `User`. The
    user's `Profile` is created by the `post_save` signal; this serializer only sets its type.
    Users registering as sitters additionally get their `Sitter` record, which holds their
    rating as a sitter.

    Input Fields:
        - username (str): The desired username. Must be unique.
        - email (str): The user's email address. Must be unique.
        - password (str): The user's password.
        - repeated_password (str): The password for confirmation. Must match 'password'.
        - type (str): Either 'pet_owner' or 'sitter'.

    Output:
        - On successful validation and save, returns the newly created `User` instance.
    """
    repeated_password = serializers.CharField(
        style={'input_type': 'password'},
        write_only=True
    )
    type = serializers.ChoiceField(choices=Profile.UserType.choices, write_only=True)

    class Meta:
        model = User
        fields = ['username', 'email', 'password', 'repeated_password', 'type']
        extra_kwargs = {
            'password': {'write_only': True}
        }

    def validate(self, data):
        """
        Checks that the passwords match and that the email address is not taken yet.
        """
        if data['password'] != data['repeated_password']:
            raise serializers.ValidationError({'password': 'Passwords must match.'})

        if User.objects.filter(email=data['email']).exists():
            raise serializers.ValidationError({'email': 'This email address already exists.'})

        return data

    @transaction.atomic
    def create(self, validated_data):
        """
        Creates the User, sets the type of its Profile and, for sitters, creates the Sitter row.

        Django's `create_user` helper is used so that the password is hashed.
        """
        user = User.objects.create_user(
            username=validated_data['username'],
            email=validated_data['email'],
            password=validated_data['password']
        )

        user.profile.type = validated_data['type']
        user.profile.save(update_fields=['type'])

        if validated_data['type'] == Profile.UserType.SITTER:
            Sitter.objects.create(user=user)

        return user


class CustomAuthTokenSerializer(serializers.Serializer):
    """
    Authenticates a user based on username and password.

    Used by the login endpoint. On success the authenticated user is attached to the
    validated data so the view can issue a token for it.
    """
    username = serializers.CharField()
    password = serializers.CharField(
        label="Password",
        style={'input_type': 'password'},
        trim_whitespace=False
    )

    def validate(self, attrs):
        """
        Validate the provided username and password using Django's auth system.
        """
        username = attrs.get('username')
        password = attrs.get('password')

        if not (username and password):
            msg = 'Must include "username" and "password".'
            raise serializers.ValidationError(msg, code='authorization')

        user = authenticate(
            request=self.context.get('request'),
            username=username,
            password=password
        )

        if not user:
            # The user might be non-existent, inactive, or the credentials might be wrong.
            msg = 'Unable to log in with provided credentials.'
            raise serializers.ValidationError(msg, code='authorization')

        attrs['user'] = user
        return attrs
