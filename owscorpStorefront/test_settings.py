import os

# Mock SECRET_KEY for tests BEFORE importing settings to bypass validation
os.environ.setdefault("SECRET_KEY", "django-insecure-test-key-for-unit-tests-only")

from .settings import *  # noqa: F403

DEBUG = False
SESSION_COOKIE_SECURE = False

# Disable external services
INFRASTRUCTURE["AUTH_BACKEND"] = "mock"  # noqa: F405
INFRASTRUCTURE["DATA_BACKEND"] = "mock"  # noqa: F405
INFRASTRUCTURE["STORAGE_BACKEND"] = "mock"  # noqa: F405
INFRASTRUCTURE["CHAT_BACKEND"] = "mock"  # noqa: F405

SUPABASE_URL = "https://project.supabase.test"
SUPABASE_ANON_KEY = "anon-test-key"
GEMINI_API_KEY = "gemini-test-key"

SERVICES_PER_PAGE = 3
REVIEWS_PER_PAGE = 2
CHAT_HISTORY_LIMIT = 6
