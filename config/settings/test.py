"""
Test settings.
"""
from .base import *  # noqa: F401,F403

DEBUG = False
SECRET_KEY = 'test-secret-key'
ALLOWED_HOSTS = ['*']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

# Keep test output quiet; caplog still sees records through propagation
LOGGING['handlers']['console']['level'] = 'CRITICAL'  # noqa: F405
LOGGING['loggers']['apps']['propagate'] = True  # noqa: F405
LOGGING['loggers']['shared']['propagate'] = True  # noqa: F405
