# conftest.py - global pytest and Hypothesis configuration
import os

import pytest
from hypothesis import settings as hypothesis_settings, Verbosity

# Hypothesis profiles
hypothesis_settings.register_profile("ci", max_examples=1000)
hypothesis_settings.register_profile("dev", max_examples=100)
hypothesis_settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# pick the profile from the environment
profile_name = os.getenv("HYPOTHESIS_PROFILE", "dev")
hypothesis_settings.load_profile(profile_name)


@pytest.fixture
def api_client():
    """Django REST framework test client"""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture(autouse=True)
def override_settings(settings):
    """Run against a local-memory cache and broker instead of Redis"""
    settings.CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        }
    }
    settings.CELERY_BROKER_URL = 'memory://'
    settings.CELERY_RESULT_BACKEND = 'cache+memory://'
    settings.EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'


@pytest.fixture(autouse=True)
def clear_cache(override_settings):
    """Locks and throttle counters must not leak between tests"""
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()
