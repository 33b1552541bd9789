"""
Django test settings for the product request intake service.
"""

from .base import *  # noqa: F403
from .base import BASE_DIR

DEBUG = False

SECRET_KEY = "django-insecure-test-key-only"  # noqa: S105

ALLOWED_HOSTS = ["*"]

# Use in-memory email backend
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

# Tests never pick up relay credentials from the environment
GMAIL_USER = ""
GMAIL_PASS = ""
NOTIFY_TO = ""

# Overridden per test with tmp_path
SUBMISSIONS_FILE = BASE_DIR.parent / "data" / "test-submissions.json"
UPLOADS_ROOT = BASE_DIR.parent / "test-uploads"

# Use simple static files storage in tests
STORAGES = {
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}
