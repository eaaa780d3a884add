from django.contrib.auth.models import User
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import Profile


@receiver(post_save, sender=User)
def create_user_profile(sender, instance, created, **kwargs):
    """
    Creates the Profile of a freshly saved User.

    Every user needs a profile because it carries their pet owner rating. `get_or_create`
    keeps the handler safe when a profile was already created explicitly, e.g. in a fixture.
    """
    if created:
        Profile.objects.get_or_create(user=instance)
