"""
Al-Bait URL Configuration
"""

from django.urls import path, include
from django.http import JsonResponse


def api_root(request):
    """
    API root — public surface is minimal.
    """
    return JsonResponse({
        "service": "Al-Bait Assistant API",
        "version": "1.0.0",
        "endpoints": {
            "chat": "/api/v1/assistant/chat/",
            "health": "/api/v1/assistant/health/",
        },
    })


urlpatterns = [
    path('', api_root, name='api_root'),

    # ── Versioned API ─────────────────────────────────────────────────
    path('api/v1/assistant/', include('assistant.urls')),
]
