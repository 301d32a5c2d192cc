"""
Domain layer - Document models and enums.
"""

from domain import enums, models

__all__ = ["enums", "models"]
