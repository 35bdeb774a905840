"""
Halo Personnummer - Swedish personal identity numbers

Parses, validates and formats personnummer and coordination numbers
(samordningsnummer) in all their common textual forms, and derives birth
date, age and sex from a valid number.
"""

from halo_personnummer.clock import Clock, FixedClock, SystemClock
from halo_personnummer.exceptions import (
    CoordinationNumberError,
    PersonnummerError,
    PersonnummerWarning,
)
from halo_personnummer.luhn import luhn_checksum, verify_luhn
from halo_personnummer.options import ParseOptions, build_options
from halo_personnummer.personnummer import (
    Personnummer,
    format_personnummer,
    generate_personnummer,
    parse,
    valid,
)

__version__ = "0.1.0"

__all__ = [
    # Personnummer
    "Personnummer",
    "parse",
    "valid",
    "format_personnummer",
    "generate_personnummer",
    # Checksum
    "luhn_checksum",
    "verify_luhn",
    # Options and clock
    "ParseOptions",
    "build_options",
    "Clock",
    "FixedClock",
    "SystemClock",
    # Errors
    "PersonnummerError",
    "CoordinationNumberError",
    "PersonnummerWarning",
]
