"""
Чтение manifest.json, который Vite создаёт при сборке.

Манифест — граф: ключ (исходный путь) -> чанк с хешированным файлом,
его CSS, ассетами, статическими и динамическими импортами.
"""
from __future__ import annotations

import json
import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from apps.vite.exceptions import EntryNotFound, ManifestNotFound

logger = logging.getLogger(__name__)

MANIFEST_FILENAMES = ("manifest.json", ".vite/manifest.json")


def _strings(value: Any) -> Tuple[str, ...]:
    return tuple(str(v) for v in (value or []))


@dataclass(frozen=True)
class ManifestEntry:
    key: str
    file: str
    src: Optional[str] = None
    is_entry: bool = False
    is_dynamic_entry: bool = False
    css: Tuple[str, ...] = ()
    imports: Tuple[str, ...] = ()
    dynamic_imports: Tuple[str, ...] = ()
    assets: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, key: str, data: Mapping[str, Any]) -> "ManifestEntry":
        return cls(
            key=key,
            file=str(data.get("file") or ""),
            src=data.get("src"),
            is_entry=bool(data.get("isEntry", False)),
            is_dynamic_entry=bool(data.get("isDynamicEntry", False)),
            css=_strings(data.get("css")),
            imports=_strings(data.get("imports")),
            dynamic_imports=_strings(data.get("dynamicImports")),
            assets=_strings(data.get("assets")),
        )

    @property
    def name(self) -> str:
        return Path(self.src or self.key).stem


@dataclass
class Manifest:
    entries: "OrderedDict[str, ManifestEntry]"
    path: Path
    _names: Optional[Dict[str, str]] = field(default=None, init=False, repr=False, compare=False)

    @classmethod
    def load(cls, path) -> "Manifest":
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise ManifestNotFound(path)
        except (OSError, ValueError) as e:
            logger.error(f"Ошибка при чтении Vite manifest {path}: {e}")
            raise ManifestNotFound(path, str(e))

        if not isinstance(data, dict):
            raise ManifestNotFound(path, "The manifest must be a JSON object.")

        entries: "OrderedDict[str, ManifestEntry]" = OrderedDict()
        for key, chunk in data.items():
            if not isinstance(chunk, dict):
                raise ManifestNotFound(path, f"Entry '{key}' is not an object.")
            entries[key] = ManifestEntry.from_dict(key, chunk)

        logger.info(f"Загружен Vite manifest {path}: {len(entries)} записей")
        return cls(entries=entries, path=path)

    def __contains__(self, key: str) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[ManifestEntry]:
        return iter(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str) -> ManifestEntry:
        try:
            return self.entries[key]
        except KeyError:
            raise EntryNotFound(key)

    def lookup(self, key: str) -> Optional[ManifestEntry]:
        return self.entries.get(key)

    def find(self, name: str) -> ManifestEntry:
        """Ищет запись по ключу, затем по src, имени файла или имени без расширения."""
        if name in self.entries:
            return self.entries[name]
        key = self._name_index().get(name)
        if key is None:
            raise EntryNotFound(name)
        return self.entries[key]

    def entrypoints(self) -> Tuple[ManifestEntry, ...]:
        return tuple(e for e in self.entries.values() if e.is_entry)

    def _name_index(self) -> Dict[str, str]:
        # Индекс строится один раз; при гонке результат одинаковый
        if self._names is None:
            names: Dict[str, str] = {}
            for entry in self.entries.values():
                if not entry.is_entry:
                    continue
                source = entry.src or entry.key
                for alias in (source, Path(source).name, Path(source).stem):
                    owner = names.setdefault(alias, entry.key)
                    if owner != entry.key:
                        logger.warning(
                            f"Vite manifest {self.path}: имя '{alias}' неоднозначно, "
                            f"используется '{owner}', а не '{entry.key}'"
                        )
            self._names = names
        return self._names


class ManifestRepository:
    """
    Кеш манифестов на время жизни процесса: один на пару (конфигурация, путь).
    Загрузка одного и того же файла выполняется не более одного раза одновременно.
    """

    def __init__(self):
        self._manifests: Dict[Tuple[str, str], Manifest] = {}
        self._locks: Dict[Tuple[str, str], threading.Lock] = {}
        self._guard = threading.Lock()
        self._generation = 0

    def get(self, config_name: str, path) -> Manifest:
        cache_key = (config_name, str(path))
        manifest = self._manifests.get(cache_key)
        if manifest is not None:
            return manifest

        with self._guard:
            lock = self._locks.setdefault(cache_key, threading.Lock())
            generation = self._generation
        with lock:
            manifest = self._manifests.get(cache_key)
            if manifest is None:
                manifest = Manifest.load(path)
                with self._guard:
                    # После clear() результат устаревшей загрузки в кеш не попадает
                    if generation == self._generation:
                        self._manifests[cache_key] = manifest
        return manifest

    def clear(self) -> None:
        with self._guard:
            self._generation += 1
            self._manifests.clear()
            self._locks.clear()


def locate_manifest(build_directory: Path) -> Path:
    """Возвращает первый существующий manifest.json в каталоге сборки."""
    for filename in MANIFEST_FILENAMES:
        candidate = build_directory / filename
        if candidate.is_file():
            return candidate
    return build_directory / MANIFEST_FILENAMES[0]


manifests = ManifestRepository()
