import uuid

from django.db import models
from django.utils import timezone

from ..config import DEFAULT_EASE_FACTOR


def new_id():
    return uuid.uuid4().hex


class Folder(models.Model):
    id = models.CharField(primary_key=True, max_length=64, default=new_id)
    name = models.CharField(max_length=200)
    # Review queue order is randomised instead of oldest-due first
    shuffle = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        app_label = "scheduler"
        ordering = ["created_at"]


class Card(models.Model):
    TEXT = "text"
    IMAGE = "image"
    CONTENT_TYPES = [(TEXT, "Text"), (IMAGE, "Image")]

    id = models.CharField(primary_key=True, max_length=64, default=new_id)
    folder = models.ForeignKey(Folder, on_delete=models.CASCADE, related_name="cards")
    front_type = models.CharField(max_length=8, choices=CONTENT_TYPES, default=TEXT)
    front_content = models.TextField(blank=True, default="")
    back_type = models.CharField(max_length=8, choices=CONTENT_TYPES, default=TEXT)
    back_content = models.TextField(blank=True, default="")
    phonetic = models.CharField(max_length=200, blank=True, default="")
    tags = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    # Scheduling state
    next_review_time = models.BigIntegerField(default=0)  # epoch ms
    interval = models.FloatField(default=0)               # minutes
    repetition = models.PositiveIntegerField(default=0)
    ease_factor = models.FloatField(default=DEFAULT_EASE_FACTOR)

    class Meta:
        app_label = "scheduler"
        indexes = [
            models.Index(fields=["folder", "next_review_time"], name="card_folder_due_idx"),
        ]


class ReviewLog(models.Model):
    card_id = models.CharField(max_length=64)
    folder_id = models.CharField(max_length=64)
    rating = models.CharField(max_length=8)
    created_at = models.DateTimeField(default=timezone.now)
    interval = models.FloatField()
    repetition = models.PositiveIntegerField()
    ease_factor = models.FloatField()
    next_review_time = models.BigIntegerField()

    class Meta:
        app_label = "scheduler"
        indexes = [
            models.Index(fields=["card_id", "created_at"], name="reviewlog_card_created_idx"),
        ]
