import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Task',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(blank=True, default='', help_text='A short description of the task.', max_length=255)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('in_progress', 'In Progress'), ('completed', 'Completed'), ('cancelled', 'Cancelled')], default='pending', help_text='The current status of the task.', max_length=50)),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp for when the record was first created.')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp for when the record was last updated.')),
                ('pet_owner_user', models.ForeignKey(help_text='The user who owns the pet and booked the task.', on_delete=django.db.models.deletion.CASCADE, related_name='owner_tasks', to=settings.AUTH_USER_MODEL)),
                ('sitter_user', models.ForeignKey(help_text='The user who performs the sitting.', on_delete=django.db.models.deletion.CASCADE, related_name='sitter_tasks', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Task',
                'verbose_name_plural': 'Tasks',
                'ordering': ['-created_at'],
            },
        ),
    ]
