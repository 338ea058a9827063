"""
Исключения движка Vite-ассетов.
"""


class ViteException(Exception):
    """Базовое исключение для всех ошибок разрешения ассетов."""


class ConfigurationNotFound(ViteException):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Vite configuration '{name}' does not exist.")


class ManifestNotFound(ViteException):
    def __init__(self, path, reason: str = ""):
        self.path = path
        message = f"Vite manifest could not be read at {path}."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message + " Did you run `npm run build`?")


class NoBuildPath(ViteException):
    """build_path пуст при включённом production-режиме."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"The build path of the Vite configuration '{name}' is not defined.")


class EntryNotFound(ViteException):
    def __init__(self, name: str, where: str = "manifest"):
        self.name = name
        super().__init__(f"Entry '{name}' not found in the {where}.")


class EntryWithoutFile(EntryNotFound):
    """Запись манифеста есть, но поле file пустое."""

    def __init__(self, name: str):
        self.name = name
        ViteException.__init__(self, f"Entry '{name}' in the manifest has no file.")
