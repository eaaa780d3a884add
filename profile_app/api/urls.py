from django.urls import path
from .views import PetOwnerProfileDetailView, SitterDetailView

urlpatterns = [
    path('pet-owners/<int:user_id>/', PetOwnerProfileDetailView.as_view(), name='pet-owner-detail'),
    path('sitters/<int:user_id>/', SitterDetailView.as_view(), name='sitter-detail'),
]
