"""
URL маршруты для API Vite.
"""
from django.urls import path
from apps.vite import api_views

urlpatterns = [
    # URL ассетов точки входа (name может содержать слэши: src/main.ts)
    path('<str:config>/entries/<path:name>/', api_views.entry_urls, name='vite_entry_urls'),
]
