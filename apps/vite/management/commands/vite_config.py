"""
Management команда: печатает конфигурацию Vite в JSON для плагина сборки.

Плагин вызывает `python manage.py vite_config` и берёт из вывода точки входа,
build_path, адрес dev server, алиасы и команды.
"""
import json

from django.core.management.base import BaseCommand, CommandError

from apps.vite import config as vite_config
from apps.vite.dev_server import DevServerResolver
from apps.vite.exceptions import ConfigurationNotFound


def _server_config(name: str) -> dict:
    cfg = vite_config.get_config(name)
    data = cfg.as_server_config()
    dev_server = DevServerResolver(cfg.dev_server).with_certificates()
    data["dev_server"].update({"key": dev_server.key, "cert": dev_server.cert, "https": dev_server.uses_https})
    return data


class Command(BaseCommand):
    help = "Выводит конфигурацию Vite в формате JSON (для плагина сборки)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--config",
            type=str,
            default=None,
            help="Имя конфигурации; без параметра выводятся все конфигурации",
        )
        parser.add_argument("--indent", type=int, default=None, help="Отступ JSON")

    def handle(self, *args, **options):
        name = options.get("config")
        indent = options.get("indent")

        try:
            if name:
                payload = {
                    **_server_config(name),
                    "aliases": vite_config.get_aliases(),
                    "commands": vite_config.get_commands(),
                }
            else:
                payload = {
                    "default": vite_config.default_name(),
                    "configs": {n: _server_config(n) for n in vite_config.config_names()},
                    "aliases": vite_config.get_aliases(),
                    "commands": vite_config.get_commands(),
                }
        except ConfigurationNotFound as e:
            raise CommandError(str(e))

        self.stdout.write(json.dumps(payload, indent=indent, ensure_ascii=False))
