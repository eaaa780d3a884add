import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('tasks_app', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Review',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('pet_owner_rating', models.PositiveSmallIntegerField(blank=True, help_text="The pet owner's rating of the sitter, from 1 to 5.", null=True, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ('pet_owner_content', models.TextField(blank=True, default='', help_text="The pet owner's comment.")),
                ('sitter_rating', models.PositiveSmallIntegerField(blank=True, help_text="The sitter's rating of the pet owner, from 1 to 5.", null=True, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ('sitter_content', models.TextField(blank=True, default='', help_text="The sitter's comment.")),
                ('sitter_user_created_at', models.DateTimeField(blank=True, help_text='When the sitter submitted their half of the review.', null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('pet_owner_user', models.ForeignKey(help_text='The pet owner of the reviewed task.', on_delete=django.db.models.deletion.CASCADE, related_name='reviews_as_pet_owner', to=settings.AUTH_USER_MODEL)),
                ('sitter_user', models.ForeignKey(help_text='The sitter of the reviewed task.', on_delete=django.db.models.deletion.CASCADE, related_name='reviews_as_sitter', to=settings.AUTH_USER_MODEL)),
                ('task', models.OneToOneField(help_text='The task this review belongs to.', on_delete=django.db.models.deletion.CASCADE, related_name='review_entry', to='tasks_app.task')),
            ],
            options={
                'verbose_name': 'Review',
                'verbose_name_plural': 'Reviews',
                'ordering': ['-updated_at'],
            },
        ),
    ]
