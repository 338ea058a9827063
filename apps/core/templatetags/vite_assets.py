"""
Template tags для загрузки Vite-ассетов (dev server или manifest.json).

Использование в шаблоне:
    {% load vite_assets %}
    {% vite 'main' %}                  клиент dev server + теги точки входа
    {% vite_client %}
    {% vite_tag 'main' %}
    {% vite_styles 'main' %}
    <img src="{% vite_asset 'images/logo.svg' %}">
"""
from django import template

from apps.vite.vite import vite as vite_for

register = template.Library()


@register.simple_tag
def vite(*entries, config=None):
    """
    Все теги для перечисленных точек входа (без аргументов — для всех).

    В dev режиме первым идёт клиент Vite (@vite/client), в production —
    скрипт, стили и modulepreload импортированных чанков из manifest.json.
    """
    return vite_for(config).get_tags(list(entries) or None)


@register.simple_tag
def vite_client(config=None):
    """Клиент HMR; в production возвращает пустую строку."""
    return vite_for(config).get_client_script_tag()


@register.simple_tag
def vite_tag(entry, config=None):
    return vite_for(config).get_tag(entry)


@register.simple_tag
def vite_styles(entry, config=None):
    """CSS точки входа; в dev режиме Vite внедряет CSS сам, поэтому пусто."""
    return vite_for(config).get_style_tags(entry)


@register.simple_tag
def vite_asset(path, config=None):
    """URL произвольного файла сборки (шрифты, картинки)."""
    return vite_for(config).get_asset_url(path)
