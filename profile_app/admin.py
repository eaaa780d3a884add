from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.models import User
from .models import Profile, Sitter

# Register your models here.


class ProfileInline(admin.StackedInline):
    model = Profile
    can_delete = False
    verbose_name_plural = 'Profile'
    fk_name = 'user'
    readonly_fields = ('average_rating', 'total_reviews')


class CustomUserAdmin(BaseUserAdmin):
    inlines = (ProfileInline,)

    def get_profile_type(self, instance):
        return instance.profile.type
    get_profile_type.short_description = 'Type'

    def get_owner_rating(self, instance):
        return instance.profile.average_rating
    get_owner_rating.short_description = 'Rating as pet owner'

    list_display = ('username', 'email', 'first_name', 'last_name',
                    'is_staff', 'get_profile_type', 'get_owner_rating')


class SitterAdmin(admin.ModelAdmin):
    list_display = ('user', 'average_rating', 'total_reviews', 'created_at')
    readonly_fields = ('average_rating', 'total_reviews')


admin.site.unregister(User)
admin.site.register(User, CustomUserAdmin)
admin.site.register(Sitter, SitterAdmin)
