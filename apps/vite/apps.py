from django.apps import AppConfig
from django.test.signals import setting_changed


def _reset_manifests(setting, **kwargs):
    if setting == "VITE":
        from apps.vite.manifest import manifests

        manifests.clear()


class ViteAppConfig(AppConfig):
    """Разрешение Vite-ассетов (manifest.json / dev server) в теги."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.vite'
    verbose_name = 'Vite'

    def ready(self):
        setting_changed.connect(_reset_manifests, dispatch_uid="apps.vite.reset_manifests")
