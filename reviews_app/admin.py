from django.contrib import admin
from .models import Review

class ReviewAdmin(admin.ModelAdmin):
    list_display = ('id', 'task', 'pet_owner_user', 'pet_owner_rating',
                    'sitter_user', 'sitter_rating', 'updated_at')


# Register your models here.
admin.site.register(Review, ReviewAdmin)
