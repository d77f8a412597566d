"""FastAPI host for the onboarding chat page.

Endpoints:
    - GET /health: Service health status
    - GET /: Chat page (mounted by NiceGUI at startup)
"""

from onboarding_chat.api.app import create_app

__all__ = ["create_app"]
