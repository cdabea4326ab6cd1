import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models

import scheduler.data.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Folder",
            fields=[
                ("id", models.CharField(default=scheduler.data.models.new_id, max_length=64, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=200)),
                ("shuffle", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="ReviewLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("card_id", models.CharField(max_length=64)),
                ("folder_id", models.CharField(max_length=64)),
                ("rating", models.CharField(max_length=8)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("interval", models.FloatField()),
                ("repetition", models.PositiveIntegerField()),
                ("ease_factor", models.FloatField()),
                ("next_review_time", models.BigIntegerField()),
            ],
            options={
                "indexes": [models.Index(fields=["card_id", "created_at"], name="reviewlog_card_created_idx")],
            },
        ),
        migrations.CreateModel(
            name="Card",
            fields=[
                ("id", models.CharField(default=scheduler.data.models.new_id, max_length=64, primary_key=True, serialize=False)),
                ("front_type", models.CharField(choices=[("text", "Text"), ("image", "Image")], default="text", max_length=8)),
                ("front_content", models.TextField(blank=True, default="")),
                ("back_type", models.CharField(choices=[("text", "Text"), ("image", "Image")], default="text", max_length=8)),
                ("back_content", models.TextField(blank=True, default="")),
                ("phonetic", models.CharField(blank=True, default="", max_length=200)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("next_review_time", models.BigIntegerField(default=0)),
                ("interval", models.FloatField(default=0)),
                ("repetition", models.PositiveIntegerField(default=0)),
                ("ease_factor", models.FloatField(default=2.5)),
                ("folder", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="cards", to="scheduler.folder")),
            ],
            options={
                "indexes": [models.Index(fields=["folder", "next_review_time"], name="card_folder_due_idx")],
            },
        ),
    ]
