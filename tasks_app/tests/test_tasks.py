from django.contrib.auth.models import User
from django.test import TestCase

from ..models import Task, TaskParty


class TaskPartyTests(TestCase):
    """Tests for classifying users as pet owner or sitter of a task."""

    def setUp(self):
        self.owner = User.objects.create_user(username='owner')
        self.sitter = User.objects.create_user(username='sitter')
        self.task = Task.objects.create(pet_owner_user=self.owner, sitter_user=self.sitter)

    def test_new_task_has_no_review(self):
        self.assertIsNone(self.task.review)
        self.assertEqual(self.task.status, Task.TaskStatus.PENDING)

    def test_party_of_owner_and_sitter(self):
        self.assertEqual(self.task.party_of(self.owner.id), TaskParty.PET_OWNER)
        self.assertEqual(self.task.party_of(self.sitter.id), TaskParty.SITTER)

    def test_party_of_outsider(self):
        outsider = User.objects.create_user(username='outsider')
        self.assertIsNone(self.task.party_of(outsider.id))
