"""Django settings for the spaced-repetition scheduler service.

Every deploy-specific value comes from an ``SRS_*`` environment variable.
"""
import os
from pathlib import Path

from .log_config import configure_logging

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    return os.environ.get(name, str(default)).lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.environ.get("SRS_SECRET_KEY", "dev-only-insecure-key")
DEBUG = env_bool("SRS_DEBUG", False)
ALLOWED_HOSTS = os.environ.get("SRS_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "spaced_repetition.apps.SpacedRepetitionConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "srs_service.middleware.IdentityHeaderMiddleware",
]

ROOT_URLCONF = "srs_service.urls"
WSGI_APPLICATION = "srs_service.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("SRS_DB_PATH", str(BASE_DIR / "db.sqlite3")),
        "OPTIONS": {"timeout": 5},
    },
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True
TIME_ZONE = os.environ.get("SRS_TIME_ZONE", "UTC")

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    # Identity comes from IdentityHeaderMiddleware, not DRF authentication
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "spaced_repetition.api.exceptions.scheduler_exception_handler",
}

# Dotted path to a callable (card_id, deck_id) -> bool backed by the content
# service. Unset means ids are trusted as validated upstream.
SCHEDULER_CONTENT_VALIDATOR = os.environ.get("SRS_CONTENT_VALIDATOR") or None

# Alias used by due-card and summary reads; may name a lagging replica.
SCHEDULER_READ_DATABASE = os.environ.get("SRS_READ_DATABASE", "default")

configure_logging(
    level=os.environ.get("SRS_LOG_LEVEL", "INFO"),
    json_logs=env_bool("SRS_LOG_JSON", not DEBUG),
)
