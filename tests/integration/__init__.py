"""Integration tests for components working together.

Coverage:
    - SessionController text and upload flows through the real pipelines
    - Hosting app routes via ASGITransport
"""
