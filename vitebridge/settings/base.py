import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Загружаем переменные окружения из .env файла
load_dotenv(BASE_DIR / '.env')

# Core
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-insecure-key")
DEBUG = bool(int(os.getenv("DJANGO_DEBUG", "1")))
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1,0.0.0.0").split(",")]

# Internationalization
LANGUAGE_CODE = "ru"
TIME_ZONE = "Europe/Moscow"
USE_I18N = True
USE_TZ = True

# Applications
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    # Third party
    "rest_framework",
    # Project apps
    "apps.core",  # Общие утилиты и template tags
    "apps.vite",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "vitebridge.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "vitebridge.wsgi.application"

# Ассеты не требуют БД
DATABASES = {}

# Static
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Django REST Framework
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'UNAUTHENTICATED_USER': None,
}

# Vite
# mode: development -> dev server, production -> manifest.json из STATIC_ROOT/<build_path>/
VITE = {
    "default": "default",
    "mode": os.getenv("VITE_MODE") or ("development" if DEBUG else "production"),
    "app_url": os.getenv("APP_URL", STATIC_URL),
    "asset_host": os.getenv("ASSET_URL", ""),
    "public_path": STATIC_ROOT,
    "root": BASE_DIR,
    "configs": {
        "default": {
            "entrypoints": {
                "paths": os.getenv("VITE_ENTRYPOINTS", "frontend/src/entrypoints"),
                "ssr": "frontend/src/ssr.ts",
                "ignore": r"\.(d\.ts|json)$",
            },
            "build_path": os.getenv("VITE_BUILD_PATH", "build"),
            "dev_server": {
                "url": os.getenv("DEV_SERVER_URL", "http://localhost:3000"),
                "key": os.getenv("DEV_SERVER_KEY", ""),
                "cert": os.getenv("DEV_SERVER_CERT", ""),
            },
            "public_directory": "frontend/static",
        },
    },
    "aliases": {
        "@": "frontend/src",
    },
    "commands": {
        "manage": [],
        "shell": [],
    },
}

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "apps.vite": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
    },
}
