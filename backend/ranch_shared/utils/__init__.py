"""
Utilities module: exceptions and decimal helpers.
"""

from ranch_shared.utils.exceptions import (
    NotFoundError,
    ForbiddenError,
    ValidationError,
    ConflictError,
    DuplicateEntityError,
)
from ranch_shared.utils.money import to_decimal, money, to_json_number

__all__ = [
    # exceptions
    "NotFoundError",
    "ForbiddenError",
    "ValidationError",
    "ConflictError",
    "DuplicateEntityError",
    # money
    "to_decimal",
    "money",
    "to_json_number",
]
