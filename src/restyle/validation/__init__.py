from restyle.errors import StylesheetValidationError
from restyle.validation.rules import ALL_RULES, ValidationPolicy
from restyle.validation.validator import validate, validate_or_raise

__all__ = [
    "ALL_RULES",
    "StylesheetValidationError",
    "ValidationPolicy",
    "validate",
    "validate_or_raise",
]
