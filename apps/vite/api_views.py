"""
API для SPA-клиентов: URL ассетов точки входа Vite.
"""
import logging

from django.http import HttpRequest
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.vite.exceptions import ConfigurationNotFound, EntryNotFound, ViteException
from apps.vite.vite import vite

logger = logging.getLogger(__name__)


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def entry_urls(request: HttpRequest, config: str, name: str) -> Response:
    """
    URL скриптов, стилей, modulepreload и prefetch для точки входа.

    Возвращает:
        - config, mode, entry
        - urls: {scripts, styles, preloads, prefetch}
    """
    try:
        v = vite(config)
        urls = v.get_urls(name)
    except (ConfigurationNotFound, EntryNotFound) as e:
        return Response({"detail": str(e)}, status=status.HTTP_404_NOT_FOUND)
    except ViteException as e:
        logger.error(f"Ошибка разрешения Vite-ассетов для '{name}' ({config}): {e}")
        return Response({"detail": str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({
        "config": v.config.name,
        "mode": v.config.mode,
        "entry": name,
        "urls": urls,
    })
