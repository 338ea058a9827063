from pathlib import Path

FIXTURES = Path(__file__).resolve().parent / "fixtures"
PUBLIC = FIXTURES / "builds" / "public"


def vite_settings(config=None, **top):
    """settings.VITE для тестов: production, app_url http://localhost, фикстуры сборок."""
    default = {
        "entrypoints": {"paths": "entrypoints/multiple"},
        "build_path": "with-css",
        "dev_server": {"url": "http://localhost:3000"},
    }
    default.update(config or {})
    data = {
        "default": "default",
        "mode": "production",
        "app_url": "http://localhost",
        "asset_host": "",
        "public_path": PUBLIC,
        "root": FIXTURES,
        "configs": {"default": default},
        "aliases": {"@": "frontend/src"},
        "commands": {"manage": ["collectstatic --noinput"]},
    }
    data.update(top)
    return data
