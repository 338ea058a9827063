import json

from django.core.management.base import BaseCommand, CommandError

from apps.vite.exceptions import ViteException
from apps.vite.vite import vite


class Command(BaseCommand):
    help = "Показывает теги (или списки URL) для точек входа Vite"

    def add_arguments(self, parser):
        parser.add_argument("entries", nargs="*", help="Имена точек входа; по умолчанию все")
        parser.add_argument("--config", type=str, default=None, help="Имя конфигурации Vite")
        parser.add_argument("--urls", action="store_true", help="Вывести списки URL в JSON вместо HTML")

    def handle(self, *args, **options):
        entries = options.get("entries") or None
        try:
            v = vite(options.get("config"))
            if not options.get("urls"):
                self.stdout.write(v.get_tags(entries))
                return

            if entries is None and v.uses_manifest():
                entries = [entry.key for entry in v.get_manifest().entrypoints()]
            elif entries is None:
                entries = list(v.get_entrypoints())
            payload = {name: v.get_urls(name) for name in entries}
        except ViteException as e:
            raise CommandError(str(e))

        self.stdout.write(json.dumps(payload, indent=2, ensure_ascii=False))
