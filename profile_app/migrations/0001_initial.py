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
            name='Profile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(choices=[('pet_owner', 'Pet owner'), ('sitter', 'Sitter')], default='pet_owner', max_length=10, verbose_name='User type')),
                ('average_rating', models.FloatField(default=0, verbose_name='Average rating')),
                ('total_reviews', models.PositiveIntegerField(default=0, verbose_name='Total reviews')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='profile', to=settings.AUTH_USER_MODEL)),
            ],
        ),
        migrations.CreateModel(
            name='Sitter',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('average_rating', models.FloatField(default=0, verbose_name='Average rating')),
                ('total_reviews', models.PositiveIntegerField(default=0, verbose_name='Total reviews')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='sitter', to=settings.AUTH_USER_MODEL)),
            ],
        ),
    ]
