"""
Service layer: logic invoked by routes once the filter chain lets a
request through.
"""

from .user_service import create_user

__all__ = ["create_user"]
