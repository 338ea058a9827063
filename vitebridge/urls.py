from django.urls import path, include, re_path
from django.views.generic import TemplateView
from django.conf import settings
from django.http import JsonResponse

from .vite import get_vite_assets

# SPA View для фронтенда на Vite
class SPAView(TemplateView):
    template_name = "spa.html"
    entry = "main"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["debug"] = settings.DEBUG
        # URL ассетов точки входа (dev server или manifest.json)
        ctx["vite_assets"] = get_vite_assets(self.entry)
        return ctx

# Простое health-check представление
def health(request):
    return JsonResponse({"ok": True, "status": "healthy"})

urlpatterns = [
    # API endpoints
    path("api/vite/", include("apps.vite.api_urls")),
    # Health check
    path("api/health/", health, name="health"),

    # SPA - все остальные маршруты направляем во фронтенд
    re_path(r"^.*$", SPAView.as_view(), name="spa"),
]
