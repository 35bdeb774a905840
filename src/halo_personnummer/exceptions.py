"""Errors and warnings raised while parsing personnummer."""

from typing import Any


class PersonnummerError(Exception):
    """Raised when a value is not a valid personnummer."""

    def __init__(self, value: Any, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid personnummer {value!r}: {reason}")


class CoordinationNumberError(PersonnummerError):
    """Raised when a coordination number is given but not allowed."""

    pass


class PersonnummerWarning(UserWarning):
    """Non-fatal diagnostic, e.g. an unknown option or property name."""

    pass
