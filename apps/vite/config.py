"""
Конфигурации Vite из settings.VITE.

Верхнеуровневые ключи (кроме default/configs/aliases/commands) — общие
значения по умолчанию, которые именованная конфигурация может переопределить.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from django.conf import settings

from apps.vite.exceptions import ConfigurationNotFound

DEVELOPMENT = "development"
PRODUCTION = "production"
MODES = (DEVELOPMENT, PRODUCTION)

DEFAULT_DEV_SERVER_URL = "http://localhost:3000"
DEFAULT_IGNORE = r"\.(d\.ts|json)$"
RESERVED_KEYS = ("default", "configs", "aliases", "commands")


@dataclass(frozen=True)
class DevServer:
    url: str = DEFAULT_DEV_SERVER_URL
    key: str = ""
    cert: str = ""

    @property
    def uses_https(self) -> bool:
        return bool(self.key and self.cert) and self.url.startswith("https://")


@dataclass(frozen=True)
class ViteConfig:
    name: str
    mode: str = PRODUCTION
    build_path: str = "build"
    app_url: str = ""
    asset_host: Optional[str] = None
    public_path: Path = Path("public")
    root: Path = Path(".")
    entrypoints: Any = None
    ssr_entrypoints: Any = None
    ignore: str = DEFAULT_IGNORE
    dev_server: DevServer = field(default_factory=DevServer)
    public_directory: str = "resources/static"
    tag_generator: Optional[str] = None

    @property
    def is_development(self) -> bool:
        return self.mode == DEVELOPMENT

    @property
    def build_directory(self) -> Path:
        return self.public_path / self.build_path.strip("/\\")

    def as_server_config(self) -> Dict[str, Any]:
        """Формат, который читает плагин сборки (аналог vite:config)."""
        return {
            "entrypoints": {
                "paths": _serializable(self.entrypoints),
                "ssr": _serializable(self.ssr_entrypoints),
                "ignore": self.ignore,
            },
            "build_path": self.build_path,
            "dev_server": {
                "url": self.dev_server.url,
                "key": self.dev_server.key,
                "cert": self.dev_server.cert,
            },
            "public_directory": self.public_directory,
        }


def _serializable(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, Mapping):
        return {k: str(v) for k, v in value.items()}
    if isinstance(value, (str, Path)):
        return str(value)
    return [str(v) for v in value]


def _vite_settings() -> Dict[str, Any]:
    return dict(getattr(settings, "VITE", {}) or {})


def _default_mode() -> str:
    return DEVELOPMENT if settings.DEBUG else PRODUCTION


def default_name() -> str:
    return _vite_settings().get("default", "default")


def config_names() -> List[str]:
    return list((_vite_settings().get("configs") or {}).keys())


def get_config(name: Optional[str] = None) -> ViteConfig:
    """Возвращает именованную конфигурацию или бросает ConfigurationNotFound."""
    raw = _vite_settings()
    name = name or raw.get("default", "default")
    configs = raw.get("configs") or {}
    if name not in configs:
        raise ConfigurationNotFound(name)

    values = {k: v for k, v in raw.items() if k not in RESERVED_KEYS}
    values.update(configs[name] or {})

    mode = values.get("mode") or _default_mode()
    if mode not in MODES:
        raise ValueError(f"Unknown Vite mode '{mode}' in configuration '{name}', expected one of {MODES}")

    entrypoints = values.get("entrypoints") or {}
    dev_server = values.get("dev_server") or {}
    asset_host = values.get("asset_host", os.getenv("ASSET_URL", ""))

    return ViteConfig(
        name=name,
        mode=mode,
        build_path=str(values.get("build_path", "build") or ""),
        app_url=values.get("app_url", settings.STATIC_URL or ""),
        asset_host=asset_host or None,
        public_path=Path(values.get("public_path") or settings.STATIC_ROOT or "public"),
        root=Path(values.get("root") or settings.BASE_DIR),
        entrypoints=entrypoints.get("paths"),
        ssr_entrypoints=entrypoints.get("ssr"),
        ignore=entrypoints.get("ignore", DEFAULT_IGNORE),
        dev_server=DevServer(
            url=dev_server.get("url") or DEFAULT_DEV_SERVER_URL,
            key=dev_server.get("key", ""),
            cert=dev_server.get("cert", ""),
        ),
        public_directory=values.get("public_directory", "resources/static"),
        tag_generator=values.get("tag_generator"),
    )


def get_aliases() -> Dict[str, str]:
    return dict(_vite_settings().get("aliases") or {})


def get_commands() -> Dict[str, Any]:
    return dict(_vite_settings().get("commands") or {})
