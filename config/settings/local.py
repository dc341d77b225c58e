"""
Local development settings.
"""
from .base import *  # noqa: F401,F403

DEBUG = True
ALLOWED_HOSTS = ['*']

LOGGING['loggers']['apps']['level'] = 'DEBUG'  # noqa: F405
