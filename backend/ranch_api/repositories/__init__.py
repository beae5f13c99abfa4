"""
Data access layer.
"""

from ranch_api.repositories.owned import OwnedRepository

__all__ = ["OwnedRepository"]
