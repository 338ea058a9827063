"""
Форматирование тегов: чистый слой без I/O и состояния.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from django.utils.encoding import iri_to_uri
from django.utils.html import format_html
from django.utils.module_loading import import_string

CSS_EXTENSIONS = (".css",)


class TagKind(str, Enum):
    SCRIPT = "script"
    STYLE = "style"
    PRELOAD = "preload"


@dataclass(frozen=True)
class Tag:
    kind: TagKind
    url: str

    @classmethod
    def for_file(cls, path: str, url: str) -> "Tag":
        """Вид основного тега определяется расширением файла: .css -> стиль, иначе модуль."""
        if path.lower().endswith(CSS_EXTENSIONS):
            return cls(TagKind.STYLE, url)
        return cls(TagKind.SCRIPT, url)


class TagGenerator:
    """Базовый генератор. Подклассы задают конкретный формат вывода."""

    def make_script_tag(self, url: str) -> str:
        raise NotImplementedError

    def make_style_tag(self, url: str) -> str:
        raise NotImplementedError

    def make_preload_tag(self, url: str) -> str:
        raise NotImplementedError

    def render(self, tag: Tag) -> str:
        if tag.kind is TagKind.SCRIPT:
            return self.make_script_tag(tag.url)
        if tag.kind is TagKind.STYLE:
            return self.make_style_tag(tag.url)
        if tag.kind is TagKind.PRELOAD:
            return self.make_preload_tag(tag.url)
        raise ValueError(f"Unknown tag kind: {tag.kind!r}")


class HtmlTagGenerator(TagGenerator):
    """HTML-разметка. Уже закодированные %xx в URL не кодируются повторно."""

    def make_script_tag(self, url: str) -> str:
        return format_html('<script type="module" src="{}"></script>', iri_to_uri(url))

    def make_style_tag(self, url: str) -> str:
        return format_html('<link rel="stylesheet" href="{}" />', iri_to_uri(url))

    def make_preload_tag(self, url: str) -> str:
        return format_html('<link rel="modulepreload" href="{}" />', iri_to_uri(url))


class UrlTagGenerator(TagGenerator):
    """Структурированный вывод: вместо разметки возвращается сам URL."""

    def make_script_tag(self, url: str) -> str:
        return iri_to_uri(url)

    def make_style_tag(self, url: str) -> str:
        return iri_to_uri(url)

    def make_preload_tag(self, url: str) -> str:
        return iri_to_uri(url)


def get_tag_generator(dotted_path: str | None = None) -> TagGenerator:
    if not dotted_path:
        return HtmlTagGenerator()
    return import_string(dotted_path)()
