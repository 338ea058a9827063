"""
Нормализация базовых путей и построение URL ассетов.

Все URL, которые попадают в теги, проходят через PathResolver:
- base_path приводится к виду "a/b/" (без ведущего слэша, ровно один завершающий)
- asset_host (CDN) заменяет собственный хост приложения
- ведущий слэш у относительного пути не влияет на результат
"""
from __future__ import annotations

import posixpath
import re
from pathlib import PurePath
from typing import Optional, Union

_SLASHES = re.compile(r"/{2,}")


def _to_posix(value: Union[str, PurePath]) -> str:
    return str(value).replace("\\", "/")


def normalize_base(base_path: Optional[str]) -> str:
    """Приводит base_path к виду 'segment/segment/' или '' для пустого пути."""
    base = _SLASHES.sub("/", _to_posix(base_path or "")).strip("/")
    if base in ("", "."):
        return ""
    return f"{base}/"


def normalize_relative(relative_path: str) -> str:
    return _SLASHES.sub("/", _to_posix(relative_path or "")).lstrip("/")


def base_from_manifest(manifest_path: Union[str, PurePath], public_path: Union[str, PurePath]) -> str:
    """
    Вычисляет base_path из расположения manifest.json относительно публичной директории.

    public/with-css/manifest.json -> 'with-css/'
    public/build/.vite/manifest.json -> 'build/'
    """
    manifest = _SLASHES.sub("/", _to_posix(manifest_path))
    public = _SLASHES.sub("/", _to_posix(public_path)).rstrip("/")

    if public and manifest.startswith(public + "/"):
        manifest = manifest[len(public):]

    directory = posixpath.dirname(manifest)
    # Vite >= 5 кладёт манифест в .vite/ внутри outDir
    if posixpath.basename(directory) == ".vite":
        directory = posixpath.dirname(directory)

    return normalize_base(directory)


class PathResolver:
    """
    Строит абсолютные (или корневые) URL для файлов сборки.

    app_url — корень, под которым приложение отдаёт ассеты (обычно STATIC_URL
    или APP_URL); используется, если asset_host не задан.
    """

    def __init__(self, app_url: str = ""):
        self.app_url = app_url or ""

    def host_for(self, asset_host: Optional[str]) -> str:
        host = asset_host or self.app_url
        return _to_posix(host).rstrip("/")

    def resolve(self, base_path: Optional[str], asset_host: Optional[str], relative_path: str) -> str:
        base = normalize_base(base_path)
        relative = normalize_relative(relative_path)
        return f"{self.host_for(asset_host)}/{base}{relative}"

    def join(self, origin: str, relative_path: str) -> str:
        """Склеивает произвольный origin (например, dev server) и путь к файлу."""
        return f"{origin.rstrip('/')}/{normalize_relative(relative_path)}"
