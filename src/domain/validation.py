"""Required-field checks shared by the domain services."""

from typing import Any

from core.exceptions import ValidationError


def is_blank(value: Any) -> bool:
    """A value counts as missing when it is None or an empty string."""
    return value is None or (isinstance(value, str) and value == "")


def require_fields(values: dict[str, Any], messages: dict[str, str]) -> None:
    """Raise ValidationError listing every field in ``messages`` that is blank.

    ``messages`` maps field name to the message reported when it is missing,
    in the order the errors should be reported.
    """
    errors = [
        {"field": name, "message": message}
        for name, message in messages.items()
        if is_blank(values.get(name))
    ]
    if errors:
        raise ValidationError(errors)
