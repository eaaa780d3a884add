from django.apps import AppConfig


class ProfileAppConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'profile_app'
    verbose_name = 'Profiles'

    def ready(self):
        # Connects the signal handlers that create a Profile for every new User.
        from . import signals  # noqa: F401
