# project/settings/dev.py
from .base import *  # noqa: F403
from .base import env  # noqa: F401

# ------------------------------------------------------------------------------
# Core dev toggles
# ------------------------------------------------------------------------------
DEBUG = True
SECRET_KEY = env("SECRET_KEY", default=SECRET_KEY)  # noqa: F405

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["127.0.0.1", "localhost"])

# ------------------------------------------------------------------------------
# Security (relaxed for local dev)
# ------------------------------------------------------------------------------
SECURE_SSL_REDIRECT = False
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False

CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS", default=[])

# ------------------------------------------------------------------------------
# Static files (no manifest needed while runserver serves them)
# ------------------------------------------------------------------------------
STORAGES["staticfiles"] = {  # noqa: F405
    "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
}

# ------------------------------------------------------------------------------
# Logging: show SQL when asked
# ------------------------------------------------------------------------------
if env.bool("LOG_SQL", default=False):
    LOGGING["loggers"] = {  # noqa: F405
        "django.db.backends": {"handlers": ["console"], "level": "DEBUG", "propagate": False},
    }
