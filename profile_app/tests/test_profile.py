from django.contrib.auth.models import User
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase
from profile_app.models import Profile, Sitter

# Helper functions to dynamically generate the URLs of the rating detail views.


def PET_OWNER_DETAIL_URL(user_id): return reverse('pet-owner-detail', kwargs={'user_id': user_id})


def SITTER_DETAIL_URL(user_id): return reverse('sitter-detail', kwargs={'user_id': user_id})


class ProfileAPITests(APITestCase):
    """
    Test suite for the rating detail endpoints
    (`/api/v1/pet-owners/{user_id}/` and `/api/v1/sitters/{user_id}/`).
    """

    def setUp(self):
        """
        Sets up a pet owner with an existing rating and a sitter with their Sitter record.
        """
        self.owner = User.objects.create_user(username='owner', password='password123')
        self.sitter_user = User.objects.create_user(username='sitter', password='password123')

        self.owner.profile.average_rating = 4.5
        self.owner.profile.total_reviews = 2
        self.owner.profile.save()

        self.sitter_user.profile.type = Profile.UserType.SITTER
        self.sitter_user.profile.save()
        self.sitter = Sitter.objects.create(user=self.sitter_user, average_rating=3.0, total_reviews=1)

    # === Test of core functionality and logic ===
    def test_signal_creates_profile(self):
        """
        Tests that the post_save signal handler automatically creates a linked Profile object
        with an empty rating whenever a new User is created.
        """
        profile_count = Profile.objects.count()

        new_user = User.objects.create_user(username='signaltestuser', password='password')

        self.assertEqual(Profile.objects.count(), profile_count + 1)
        self.assertEqual(new_user.profile.user, new_user)
        self.assertEqual(new_user.profile.type, Profile.UserType.PET_OWNER)
        self.assertEqual(new_user.profile.average_rating, 0)
        self.assertEqual(new_user.profile.total_reviews, 0)

    # === Tests for the pet owner endpoint ===
    def test_get_pet_owner_unauthenticated(self):
        """An unauthenticated request is rejected with a 401 Unauthorized status."""
        response = self.client.get(PET_OWNER_DETAIL_URL(self.owner.pk))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_get_pet_owner_rating(self):
        """An authenticated user can read any pet owner's rating."""
        self.client.force_authenticate(user=self.sitter_user)
        response = self.client.get(PET_OWNER_DETAIL_URL(self.owner.pk))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['status'])
        data = response.data['data']
        self.assertEqual(data['user'], self.owner.pk)
        self.assertEqual(data['username'], 'owner')
        self.assertEqual(data['type'], Profile.UserType.PET_OWNER)
        self.assertEqual(data['average_rating'], 4.5)
        self.assertEqual(data['total_reviews'], 2)

        # Verify the custom datetime format (e.g., '2023-01-01T12:00:00').
        self.assertNotIn('Z', data['created_at'])
        self.assertIn('T', data['created_at'])

    def test_get_pet_owner_for_non_existent_user(self):
        """Requesting a user id that does not exist results in a 404 envelope."""
        self.client.force_authenticate(user=self.owner)
        response = self.client.get(PET_OWNER_DETAIL_URL(999))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(response.data['status'])

    # === Tests for the sitter endpoint ===
    def test_get_sitter_rating(self):
        self.client.force_authenticate(user=self.owner)
        response = self.client.get(SITTER_DETAIL_URL(self.sitter_user.pk))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data['data']
        self.assertEqual(data['user'], self.sitter_user.pk)
        self.assertEqual(data['average_rating'], 3.0)
        self.assertEqual(data['total_reviews'], 1)

    def test_get_sitter_for_user_without_sitter_record(self):
        """A user who never worked as a sitter has no sitter rating."""
        self.client.force_authenticate(user=self.owner)
        response = self.client.get(SITTER_DETAIL_URL(self.owner.pk))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_rating_endpoints_are_read_only(self):
        """Ratings are maintained by the review service and cannot be written through the API."""
        self.client.force_authenticate(user=self.owner)
        response = self.client.patch(PET_OWNER_DETAIL_URL(self.owner.pk), {'average_rating': 5})

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.owner.profile.refresh_from_db()
        self.assertEqual(self.owner.profile.average_rating, 4.5)
