"""Django settings for the managing_events project.

Only the pieces the registry uses are configured: no database, no URLs.
Values can be overridden from the environment.
"""

import os

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "managing-events-insecure-dev-key")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "managing_events",
]

DATABASES = {}

USE_TZ = True
TIME_ZONE = "UTC"

REST_FRAMEWORK = {
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "COERCE_DECIMAL_TO_STRING": True,
}

# Reference pricing policy. See managing_events.conf for the defaults.
MANAGING_EVENTS = {
    "BULK_DISCOUNT_THRESHOLD": 5,
    "BULK_DISCOUNT_FACTOR": "0.9",
    "SPEAKER_PREMIUM_THRESHOLD": 3,
    "SPEAKER_PREMIUM_FACTOR": "1.2",
}

LOG_LEVEL = os.environ.get("MANAGING_EVENTS_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "managing_events": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": True,
        },
    },
}
