"""Onboarding Chat - conversational onboarding client for mock interviews.

Combines NiceGUI for the chat page, httpx for backend calls, FastAPI for
hosting, and Pydantic for data validation.

Components:
    - session: Transcript, state machine, text and upload pipelines
    - client: Backend endpoints and configuration
    - models: Turn and wire schemas
    - api: Hosting application and health check
    - ui: Web interface for the conversation
"""

__version__ = "0.1.0"
