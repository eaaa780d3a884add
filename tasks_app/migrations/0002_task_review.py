import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('reviews_app', '0001_initial'),
        ('tasks_app', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='task',
            name='review',
            field=models.OneToOneField(blank=True, help_text='The review written for this task, set when the first review is submitted.', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='reviews_app.review'),
        ),
    ]
