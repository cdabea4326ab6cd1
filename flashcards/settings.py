import os
from pathlib import Path

from .log_config import configure_logging

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("FLASHCARDS_SECRET_KEY", "dev-only-insecure-key")
DEBUG = os.environ.get("FLASHCARDS_DEBUG", "1") == "1"
ALLOWED_HOSTS = ["*"] if DEBUG else os.environ.get("FLASHCARDS_ALLOWED_HOSTS", "").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "scheduler",
    "flashcards",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "flashcards.urls"
WSGI_APPLICATION = "flashcards.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("FLASHCARDS_DB_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "scheduler.api.exceptions.scheduler_exception_handler",
}

LOG_LEVEL = os.environ.get("FLASHCARDS_LOG_LEVEL", "INFO")
LOGGING = configure_logging(LOG_LEVEL, json_logs=not DEBUG)
