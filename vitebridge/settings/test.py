from .base import *  # noqa

DEBUG = False
SECRET_KEY = "test-secret-key"
ALLOWED_HOSTS = ["testserver", "localhost"]

LOGGING["loggers"]["apps.vite"]["level"] = "WARNING"

VITE = {
    "default": "default",
    "mode": "production",
    "app_url": "http://localhost",
    "asset_host": "",
    "public_path": BASE_DIR / "apps" / "vite" / "tests" / "fixtures" / "builds" / "public",
    "root": BASE_DIR / "apps" / "vite" / "tests" / "fixtures",
    "configs": {
        "default": {
            "entrypoints": {"paths": "entrypoints/multiple"},
            "build_path": "with-css",
            "dev_server": {"url": "http://localhost:3000"},
        },
    },
    "aliases": {"@": "frontend/src"},
    "commands": {},
}

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}
