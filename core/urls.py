"""
URL configuration for the pet-sitting review backend.

All API routes live under the versioned `/api/v1/` prefix.
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/', include('user_auth_app.api.urls')),
    path('api/v1/', include('profile_app.api.urls')),
    path('api/v1/', include('reviews_app.api.urls')),
]
