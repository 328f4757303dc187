"""
Utilities Package

Helpers shared by the routers:
- responses.py: envelope to HTTP status mapping
"""
