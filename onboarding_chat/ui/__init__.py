"""NiceGUI interface - thin visualization layer for the onboarding conversation.

Responsibilities:
    - Transcript display with a typing indicator while a reply is pending
    - Resume upload control, disabled while the session is busy
    - Interview link once onboarding is complete

Contains no business logic. Delegates every action to the SessionController.
"""
