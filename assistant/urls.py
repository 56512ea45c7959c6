"""
Assistant URLs

URL routing for the assistant app.
"""

from django.urls import path
from .views import ChatView, SessionView, HealthView

urlpatterns = [
    path('chat/', ChatView.as_view(), name='assistant-chat'),
    path('sessions/<str:session_id>/', SessionView.as_view(), name='assistant-session'),
    path('health/', HealthView.as_view(), name='assistant-health'),
]
