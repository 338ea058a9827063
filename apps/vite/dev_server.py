"""
Режим разработки: теги указывают прямо на Vite dev server, манифест не читается.
"""
from __future__ import annotations

import logging
import re
from collections import Counter, OrderedDict
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional
from urllib.parse import urlsplit

from apps.vite.certificates import CertificateProvider, default_provider
from apps.vite.config import DevServer
from apps.vite.exceptions import EntryNotFound
from apps.vite.paths import PathResolver, normalize_relative
from apps.vite.tags import Tag, TagKind

logger = logging.getLogger(__name__)

CLIENT_SCRIPT_PATH = "@vite/client"


class EntrypointsFinder:
    """
    Находит точки входа из конфигурации:
    - словарь {имя: путь} используется как есть
    - каталог сканируется (без рекурсии), файлы по шаблону ignore пропускаются
    - файл берётся как есть
    """

    def __init__(self, root: Path, ignore: Optional[str] = None):
        self.root = Path(root)
        self.ignore = re.compile(ignore) if ignore else None

    def find(self, paths: Any) -> "OrderedDict[str, str]":
        found: "OrderedDict[str, str]" = OrderedDict()
        if not paths:
            return found

        if isinstance(paths, Mapping):
            for name, path in paths.items():
                found[str(name)] = normalize_relative(str(path))
            return found

        if isinstance(paths, (str, Path)):
            paths = [paths]

        files: List[str] = []
        for path in paths:
            for relative in self._files(normalize_relative(str(path))):
                if relative not in files:
                    files.append(relative)

        # Имя без расширения, пока оно уникально (app.ts и app.css получают полные имена)
        stems = Counter(Path(relative).stem for relative in files)
        names = Counter(Path(relative).name for relative in files)
        for relative in files:
            path = Path(relative)
            if stems[path.stem] == 1:
                found[path.stem] = relative
            elif names[path.name] == 1:
                found[path.name] = relative
            else:
                found[relative] = relative
        return found

    def _files(self, relative: str) -> Iterable[str]:
        absolute = self.root / relative
        if absolute.is_dir():
            for child in sorted(absolute.iterdir()):
                if not child.is_file() or self._ignored(child.name):
                    continue
                yield child.relative_to(self.root).as_posix()
        elif absolute.is_file():
            yield relative
        else:
            logger.warning(f"Путь точки входа не найден: {absolute}")

    def _ignored(self, filename: str) -> bool:
        return bool(self.ignore and self.ignore.search(filename))

    @staticmethod
    def match(entrypoints: Mapping[str, str], name: str) -> str:
        """Ищет точку входа по имени, относительному пути, имени файла или имени без расширения."""
        if name in entrypoints:
            return entrypoints[name]
        wanted = normalize_relative(name)
        for path in entrypoints.values():
            if wanted in (path, Path(path).name, Path(path).stem):
                return path
        raise EntryNotFound(name, "configured entry points")


class DevServerResolver:
    def __init__(
        self,
        dev_server: DevServer,
        path_resolver: Optional[PathResolver] = None,
        certificates: CertificateProvider = default_provider,
    ):
        self.dev_server = dev_server
        self.path_resolver = path_resolver or PathResolver()
        self.certificates = certificates

    @property
    def url(self) -> str:
        return self.dev_server.url

    def hostname(self) -> Optional[str]:
        return urlsplit(self.url).hostname

    def with_certificates(self) -> DevServer:
        """Дополняет конфигурацию dev server найденными сертификатами."""
        if self.dev_server.key and self.dev_server.cert:
            return self.dev_server
        found = self.certificates(self.hostname())
        return DevServer(
            url=self.dev_server.url,
            key=self.dev_server.key or found.key,
            cert=self.dev_server.cert or found.cert,
        )

    def asset_url(self, path: str) -> str:
        return self.path_resolver.join(self.url, path)

    def client_tag(self) -> Tag:
        return Tag(TagKind.SCRIPT, self.asset_url(CLIENT_SCRIPT_PATH))

    def resolve(self, entrypoint_path: str) -> Tag:
        return Tag.for_file(entrypoint_path, self.asset_url(entrypoint_path))
