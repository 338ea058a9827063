"""
Публичные операции для приложения: теги и URL точек входа.

Конфигурация передаётся явно, поэтому несколько конфигураций
можно разрешать одновременно:

    vite().get_tags()
    vite("admin").get_tag("main")
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from django.utils.safestring import mark_safe

from apps.vite import config as vite_config
from apps.vite.chunks import ChunkResolver, ResolvedChunk
from apps.vite.dev_server import DevServerResolver, EntrypointsFinder
from apps.vite.exceptions import NoBuildPath
from apps.vite.manifest import Manifest, ManifestRepository, locate_manifest, manifests
from apps.vite.paths import PathResolver, base_from_manifest
from apps.vite.tags import Tag, TagGenerator, TagKind, UrlTagGenerator, get_tag_generator


def _join(tags: Iterable[str]) -> str:
    return mark_safe("".join(tags))


def _unique(tags: Iterable[Tag]) -> List[Tag]:
    seen = set()
    result: List[Tag] = []
    for tag in tags:
        if tag not in seen:
            seen.add(tag)
            result.append(tag)
    return result


class Vite:
    def __init__(
        self,
        config: vite_config.ViteConfig,
        repository: Optional[ManifestRepository] = None,
        tag_generator: Optional[TagGenerator] = None,
    ):
        self.config = config
        self.repository = repository or manifests
        self.tag_generator = tag_generator or get_tag_generator(config.tag_generator)
        self.path_resolver = PathResolver(config.app_url)
        self.dev_server = DevServerResolver(config.dev_server, self.path_resolver)

    # --- режим ---

    def uses_manifest(self) -> bool:
        return not self.config.is_development

    def _ensure_build_path(self) -> None:
        if not self.config.build_path.strip("/\\ "):
            raise NoBuildPath(self.config.name)

    def manifest_path(self) -> Path:
        self._ensure_build_path()
        return locate_manifest(self.config.build_directory)

    def get_manifest(self) -> Manifest:
        return self.repository.get(self.config.name, self.manifest_path())

    def _chunk_resolver(self, manifest: Manifest) -> ChunkResolver:
        base = base_from_manifest(manifest.path, self.config.public_path)
        return ChunkResolver(self.path_resolver, base, self.config.asset_host)

    def resolve(self, name: str, aggregate: bool = False) -> ResolvedChunk:
        manifest = self.get_manifest()
        key = self._manifest_key(manifest, name)
        return self._chunk_resolver(manifest).resolve(manifest, key, aggregate=aggregate)

    def _manifest_key(self, manifest: Manifest, name: str) -> str:
        # Имя из entrypoints.paths ({имя: исходный путь}) ссылается на ключ манифеста
        if name not in manifest and isinstance(self.config.entrypoints, dict):
            return self.config.entrypoints.get(name, name)
        return name

    def get_entrypoints(self, ssr: bool = False) -> Dict[str, str]:
        paths = self.config.ssr_entrypoints if ssr else self.config.entrypoints
        return dict(EntrypointsFinder(self.config.root, self.config.ignore).find(paths))

    # --- публичные операции ---

    def get_client_script_tag(self) -> str:
        if self.uses_manifest():
            return ""
        return self.tag_generator.render(self.dev_server.client_tag())

    def get_tag(self, name: str) -> str:
        if self.uses_manifest():
            return self.tag_generator.render(self.resolve(name).main)
        path = EntrypointsFinder.match(self.get_entrypoints(), name)
        return self.tag_generator.render(self.dev_server.resolve(path))

    def get_style_tags(self, name: str) -> str:
        if not self.uses_manifest():
            # Dev server внедряет CSS через JS-модуль
            return ""
        return _join(self.tag_generator.render(tag) for tag in self.resolve(name).styles)

    def get_tags(self, names: Union[str, Iterable[str], None] = None) -> str:
        return _join(self.tag_generator.render(tag) for tag in self.tags_for(names))

    def tags_for(self, names: Union[str, Iterable[str], None] = None) -> List[Tag]:
        if isinstance(names, str):
            names = [names]

        if not self.uses_manifest():
            entrypoints = self.get_entrypoints()
            paths = entrypoints.values() if names is None else [EntrypointsFinder.match(entrypoints, n) for n in names]
            return _unique([self.dev_server.client_tag(), *(self.dev_server.resolve(p) for p in paths)])

        if names is None:
            names = [entry.key for entry in self.get_manifest().entrypoints()]

        tags: List[Tag] = []
        for name in names:
            tags.extend(self.resolve(name, aggregate=True).tags)
        return _unique(tags)

    def get_asset_url(self, path: str) -> str:
        if not self.uses_manifest():
            return self.dev_server.asset_url(path)
        self._ensure_build_path()
        return self.path_resolver.resolve(self.config.build_path, self.config.asset_host, path)

    def get_urls(self, name: str) -> Dict[str, List[str]]:
        """Структурированный вывод: списки URL вместо разметки."""
        if not self.uses_manifest():
            path = EntrypointsFinder.match(self.get_entrypoints(), name)
            return self._urls([self.dev_server.client_tag(), self.dev_server.resolve(path)])

        chunk = self.resolve(name, aggregate=True)
        urls = self._urls(chunk.tags)
        urls["prefetch"] = list(chunk.prefetch_urls)
        return urls

    @staticmethod
    def _urls(tags: Iterable[Tag]) -> Dict[str, List[str]]:
        generator = UrlTagGenerator()
        grouped: Dict[str, List[str]] = {"scripts": [], "styles": [], "preloads": [], "prefetch": []}
        groups = {TagKind.SCRIPT: "scripts", TagKind.STYLE: "styles", TagKind.PRELOAD: "preloads"}
        for tag in _unique(tags):
            grouped[groups[tag.kind]].append(generator.render(tag))
        return grouped


def vite(name: Optional[str] = None) -> Vite:
    """Фасад для именованной конфигурации (по умолчанию — settings.VITE['default'])."""
    return Vite(vite_config.get_config(name))
