"""
Тесты management команд vite_config и vite_tags.
"""
import json
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase, override_settings

from apps.vite.tests.helpers import vite_settings


@override_settings(VITE=vite_settings())
class ViteConfigCommandTestCase(SimpleTestCase):
    def _call(self, **options):
        out = StringIO()
        call_command("vite_config", stdout=out, **options)
        return json.loads(out.getvalue())

    def test_all_configurations(self):
        """Все конфигурации с алиасами и командами"""
        payload = self._call()
        self.assertEqual(payload["default"], "default")
        self.assertEqual(list(payload["configs"]), ["default"])
        self.assertEqual(payload["aliases"], {"@": "frontend/src"})
        self.assertEqual(payload["commands"], {"manage": ["collectstatic --noinput"]})

        config = payload["configs"]["default"]
        self.assertEqual(config["build_path"], "with-css")
        self.assertEqual(config["entrypoints"]["paths"], "entrypoints/multiple")
        self.assertEqual(config["dev_server"]["url"], "http://localhost:3000")
        self.assertFalse(config["dev_server"]["https"])

    def test_single_configuration(self):
        """Одна конфигурация"""
        payload = self._call(config="default")
        self.assertEqual(payload["build_path"], "with-css")
        self.assertIn("aliases", payload)
        self.assertNotIn("configs", payload)

    def test_unknown_configuration(self):
        """Неизвестная конфигурация"""
        with self.assertRaises(CommandError):
            call_command("vite_config", config="unknown", stdout=StringIO())


@override_settings(VITE=vite_settings())
class ViteTagsCommandTestCase(SimpleTestCase):
    def test_html(self):
        """Вывод тегов"""
        out = StringIO()
        call_command("vite_tags", "test", stdout=out)
        self.assertIn('<script type="module" src="http://localhost/with-css/assets/test.a2c636dd.js"></script>', out.getvalue())

    def test_urls(self):
        """Вывод списков URL"""
        out = StringIO()
        call_command("vite_tags", urls=True, stdout=out)
        payload = json.loads(out.getvalue())
        self.assertEqual(
            payload["resources/scripts/test.ts"]["styles"],
            ["http://localhost/with-css/assets/test.65bd481b.css"],
        )

    def test_errors_become_command_errors(self):
        """Ошибки движка превращаются в CommandError"""
        with self.assertRaises(CommandError):
            call_command("vite_tags", "unknown", stdout=StringIO())
