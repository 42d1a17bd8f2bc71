"""
Django settings for the BBC News App project.

Everything deployment-specific comes from the environment (a ``.env`` file
next to ``manage.py`` or at the repository root is loaded when present):

    PORT                  listening port for ``manage.py serve`` (3000)
    ALLOWED_ORIGINS       comma-separated CORS origins (http://localhost:3000)
    DJANGO_SECRET_KEY     secret key (development default)
    DJANGO_DEBUG          "1"/"true" to enable debug mode
    DJANGO_ALLOWED_HOSTS  comma-separated host names (*)
    LOG_LEVEL             level for the ``news`` logger (INFO)
    NEWS_PUBLIC_DIR       directory served as static front-end (news/public)
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
REPO_DIR = BASE_DIR.parent

load_dotenv(BASE_DIR / '.env')
load_dotenv(REPO_DIR / '.env')


def _env_list(name: str, default: str) -> list[str]:
    return [item.strip() for item in os.environ.get(name, default).split(',') if item.strip()]


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-bbc-news-app-development-key')

DEBUG = _env_bool('DJANGO_DEBUG')

ALLOWED_HOSTS = _env_list('DJANGO_ALLOWED_HOSTS', '*')

INSTALLED_APPS = [
    'corsheaders',
    'news.apps.NewsConfig',
]

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'news.middleware.JsonErrorMiddleware',
]

ROOT_URLCONF = 'config.urls'

WSGI_APPLICATION = 'config.wsgi.application'

# No persistence: the article catalog lives in memory.
DATABASES = {}

APPEND_SLASH = False

USE_TZ = True
TIME_ZONE = 'UTC'

# --------------------------------------------------------------------------
# News app
# --------------------------------------------------------------------------

PORT = int(os.environ.get('PORT', '3000'))

NEWS_PUBLIC_DIR = Path(os.environ.get('NEWS_PUBLIC_DIR', BASE_DIR / 'news' / 'public'))

# --------------------------------------------------------------------------
# CORS (django-cors-headers)
# --------------------------------------------------------------------------

CORS_ALLOWED_ORIGINS = _env_list('ALLOWED_ORIGINS', 'http://localhost:3000')
CORS_ALLOW_CREDENTIALS = True

# --------------------------------------------------------------------------
# Logging
# --------------------------------------------------------------------------

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} [{levelname}] {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'news': {
            'handlers': ['console'],
            'level': os.environ.get('LOG_LEVEL', 'INFO').upper(),
            'propagate': False,
        },
    },
}
