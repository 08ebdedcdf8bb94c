"""
MindScope HTTP API
"""

from .main import API_VERSION, create_app

__all__ = [
    "API_VERSION",
    "create_app",
]
