from django.contrib import admin
from .models import Task

class TaskAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'pet_owner_user', 'sitter_user', 'status', 'review', 'created_at')
    list_filter = ('status',)
    

# Register your models here.
admin.site.register(Task, TaskAdmin)
