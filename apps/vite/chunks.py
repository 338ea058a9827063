"""
Разрешение чанков манифеста в теги.

Обход графа идёт только по статическим imports; dynamicImports
загружаются по требованию, поэтому их CSS не собирается.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Set, Tuple

from apps.vite.exceptions import EntryWithoutFile
from apps.vite.manifest import Manifest, ManifestEntry
from apps.vite.paths import PathResolver
from apps.vite.tags import Tag, TagKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedChunk:
    entry: ManifestEntry
    main: Tag
    styles: Tuple[Tag, ...] = ()
    preloads: Tuple[Tag, ...] = ()
    prefetch_urls: Tuple[str, ...] = ()

    @property
    def tags(self) -> Tuple[Tag, ...]:
        return (self.main, *self.styles, *self.preloads)


def _walk_imports(manifest: Manifest, root: ManifestEntry, visit: Callable[[ManifestEntry], None]) -> None:
    """Обход в глубину по imports с явным множеством посещённых ключей."""
    visited: Set[str] = set()
    stack: List[ManifestEntry] = [root]

    while stack:
        entry = stack.pop()
        if entry.key in visited:
            continue
        visited.add(entry.key)
        visit(entry)

        # В обратном порядке, чтобы первый import обрабатывался первым
        for key in reversed(entry.imports):
            if key in visited:
                continue
            child = manifest.lookup(key)
            if child is None:
                logger.warning(f"Vite manifest {manifest.path}: '{entry.key}' импортирует отсутствующий чанк '{key}'")
                continue
            stack.append(child)


def collect_css(manifest: Manifest, key: str) -> List[str]:
    """CSS записи и всех статически импортированных чанков, без повторов, в порядке первого появления."""
    css: List[str] = []
    seen: Set[str] = set()

    def visit(entry: ManifestEntry) -> None:
        for path in entry.css:
            if path not in seen:
                seen.add(path)
                css.append(path)

    _walk_imports(manifest, manifest.get(key), visit)
    return css


def collect_imports(manifest: Manifest, key: str) -> List[ManifestEntry]:
    """Все чанки, достижимые через imports (без самой записи)."""
    chunks: List[ManifestEntry] = []
    _walk_imports(manifest, manifest.get(key), chunks.append)
    return chunks[1:]


class ChunkResolver:
    def __init__(self, path_resolver: PathResolver, base_path: str, asset_host: Optional[str] = None):
        self.path_resolver = path_resolver
        self.base_path = base_path
        self.asset_host = asset_host

    def url(self, path: str) -> str:
        return self.path_resolver.resolve(self.base_path, self.asset_host, path)

    def resolve(self, manifest: Manifest, name: str, aggregate: bool = False) -> ResolvedChunk:
        entry = manifest.find(name)
        if not entry.file:
            raise EntryWithoutFile(entry.key)
        main = Tag.for_file(entry.file, self.url(entry.file))

        if not aggregate:
            styles = tuple(Tag(TagKind.STYLE, self.url(path)) for path in entry.css)
            return ResolvedChunk(entry=entry, main=main, styles=styles)

        styles = tuple(Tag(TagKind.STYLE, self.url(path)) for path in collect_css(manifest, entry.key))
        preloads = tuple(
            Tag(TagKind.PRELOAD, self.url(chunk.file))
            for chunk in collect_imports(manifest, entry.key)
            if chunk.file
        )
        return ResolvedChunk(
            entry=entry,
            main=main,
            styles=styles,
            preloads=preloads,
            prefetch_urls=tuple(self._dynamic_urls(manifest, entry)),
        )

    def _dynamic_urls(self, manifest: Manifest, entry: ManifestEntry) -> List[str]:
        urls: List[str] = []
        for key in entry.dynamic_imports:
            chunk = manifest.lookup(key)
            if chunk is None:
                logger.warning(f"Vite manifest {manifest.path}: '{entry.key}' динамически импортирует отсутствующий чанк '{key}'")
                continue
            urls.append(self.url(chunk.file))
        return urls

    def asset_urls(self, entry: ManifestEntry) -> List[str]:
        return [self.url(path) for path in entry.assets]
