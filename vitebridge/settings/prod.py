from .base import *  # noqa

DEBUG = False
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True
# Разрешить управлять редиректом на HTTPS через переменную окружения
SECURE_SSL_REDIRECT = os.getenv("DJANGO_SECURE_SSL_REDIRECT", "true").lower() in {"1", "true", "yes"}

# Hosts
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "*").split(",") if h.strip()]

# В production ассеты всегда из manifest.json
VITE["mode"] = "production"

# CDN для ассетов (CSV не нужен: один хост, например https://cdn.example.com/bucket)
_asset_url = os.getenv("ASSET_URL", "").strip()
if _asset_url:
    VITE["asset_host"] = _asset_url
