"""
Поиск TLS-сертификатов для локального dev server.

Порядок: явные DEV_SERVER_KEY / DEV_SERVER_CERT из окружения, затем
сертификаты Valet (macOS) или Laragon (Windows). На результат генерации
тегов это не влияет: меняется только протокол в URL dev server.
"""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional

logger = logging.getLogger(__name__)

VALET_CERTIFICATES = ".config/valet/Certificates"


@dataclass(frozen=True)
class Certificates:
    key: str = ""
    cert: str = ""

    def __bool__(self) -> bool:
        return bool(self.key and self.cert)


def _valet(hostname: Optional[str], home: Path) -> Certificates:
    if not hostname:
        return Certificates()
    base = f"{home.as_posix().rstrip('/')}/{VALET_CERTIFICATES}/{hostname}"
    return Certificates(key=f"{base}.key", cert=f"{base}.crt")


def _laragon(env_path: str) -> Certificates:
    directory = next((p for p in env_path.split(";") if "laragon" in p.lower()), None)
    if not directory:
        return Certificates()
    directory = directory.split("\\bin")[0].rstrip("\\")
    return Certificates(
        key=f"{directory}\\etc\\ssl\\laragon.key",
        cert=f"{directory}\\etc\\ssl\\laragon.crt",
    )


def find_certificates(
    env: Optional[Mapping[str, str]] = None,
    hostname: Optional[str] = None,
    platform: Optional[str] = None,
    home: Optional[Path] = None,
) -> Certificates:
    env = os.environ if env is None else env
    platform = platform or sys.platform
    key = env.get("DEV_SERVER_KEY", "")
    cert = env.get("DEV_SERVER_CERT", "")

    if key and cert:
        return Certificates(key=key, cert=cert)

    if platform == "darwin":
        found = _valet(hostname, home or Path.home())
        logger.debug(f"Сертификаты Valet: {found}")
    elif platform == "win32":
        found = _laragon(env.get("PATH", ""))
        logger.debug(f"Сертификаты Laragon: {found}")
    else:
        found = Certificates()

    return Certificates(key=key or found.key, cert=cert or found.cert)


CertificateProvider = Callable[[Optional[str]], Certificates]


def default_provider(hostname: Optional[str]) -> Certificates:
    return find_certificates(hostname=hostname)
