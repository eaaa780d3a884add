from django.urls import path
from .views import (
    TaskReviewView,
    PetOwnerReviewListView,
    SitterReviewListView,
)

urlpatterns = [
    path('tasks/<uuid:task_id>/review', TaskReviewView.as_view(), name='task-review'),
    path('pet-owners/<int:user_id>/reviews', PetOwnerReviewListView.as_view(), name='pet-owner-reviews'),
    path('sitters/<int:user_id>/reviews', SitterReviewListView.as_view(), name='sitter-reviews'),
]
