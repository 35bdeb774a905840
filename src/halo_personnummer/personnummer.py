"""
Swedish personnummer (personal identity number) parsing and validation.

Format: [CC]YYMMDD[-+]NNNC
- CC: century (optional; inferred from the clock when omitted)
- YYMMDD: birth date
- NNN: birth number, last digit odd for male, even for female
- C: Luhn checksum over YYMMDDNNN

The '+' separator in the short form marks a person aged 100 or more.
Coordination numbers (samordningsnummer) add 60 to the day.
"""

import logging
import re
import warnings
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any, Optional, Union

from halo_personnummer.clock import Clock, SystemClock, as_datetime
from halo_personnummer.exceptions import (
    CoordinationNumberError,
    PersonnummerError,
    PersonnummerWarning,
)
from halo_personnummer.luhn import luhn_checksum
from halo_personnummer.options import ParseOptions, build_options

logger = logging.getLogger(__name__)

# Separator sits at index 6 of the short form and index 8 of the long form
PNR_PATTERN = re.compile(
    r"(?P<century>[0-9]{2})?(?P<year>[0-9]{2})(?P<month>[0-9]{2})(?P<day>[0-9]{2})"
    r"(?P<sep>[-+]?)(?P<num>[0-9]{3})(?P<check>[0-9])"
)

COORDINATION_OFFSET = 60

# Offsets into the separated long form CCYYMMDDsNNNC
PARTS = {
    "century": (0, 2),
    "year": (2, 4),
    "full_year": (0, 4),
    "month": (4, 6),
    "day": (6, 8),
    "sep": (8, 9),
    "num": (9, 12),
    "check": (12, 13),
}

PART_ALIASES = {"fullYear": "full_year"}


def _coerce(value: Any) -> str:
    """Turn caller input into text, rejecting types that cannot be a personnummer."""
    # bool is an int subclass but never a personnummer
    if isinstance(value, bool):
        raise PersonnummerError(value, "boolean is not a personnummer")
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    raise TypeError(
        f"personnummer must be str or int, not {type(value).__name__}"
    )


def _infer_century(year: str, sep: str, now: datetime) -> str:
    """
    Pick the century for a two-digit year.

    The most recent year ending in ``year`` that is not after the reference
    year; with '+' the reference year moves back 100 years.
    """
    base_year = now.year - 100 if sep == "+" else now.year
    full_year = base_year - ((base_year - int(year)) % 100)
    return f"{full_year // 100:02d}"


def _long_form_separator(full_year: int, now: datetime) -> str:
    return "+" if now.year - full_year >= 100 else "-"


def _whole_years(start: datetime, end: datetime) -> int:
    """Completed years from start to end, where start <= end."""
    years = end.year - start.year
    if (end.month, end.day, end.time()) < (start.month, start.day, start.time()):
        years -= 1
    return years


@dataclass(frozen=True)
class Personnummer:
    """
    A validated Swedish personnummer or coordination number.

    Build instances with ``parse()``; every field is a digit string taken from
    the canonical separated long form CCYYMMDDsNNNC. ``day`` keeps the encoded
    value, so coordination numbers store day + 60. Direct construction runs
    the same date, birth number and checksum checks as parsing.
    """

    century: str
    year: str
    month: str
    day: str
    sep: str
    num: str
    check: str
    clock: Clock = field(default_factory=SystemClock, repr=False, compare=False)
    is_coordination_number: bool = field(init=False)

    def __post_init__(self):
        text = self.separated_long()
        match = PNR_PATTERN.fullmatch(text)
        fields = {name: getattr(self, name) for name in PNR_PATTERN.groupindex}
        if not match or match.groupdict() != fields or not self.sep:
            raise _reject(text, "malformed personnummer")
        object.__setattr__(
            self,
            "is_coordination_number",
            _check_parts(
                text, self.century, self.year, self.month, self.day, self.num, self.check
            ),
        )

    @classmethod
    def parse(
        cls,
        value: Union[str, int],
        options: Union[ParseOptions, dict, None] = None,
        **kwargs: Any,
    ) -> "Personnummer":
        """
        Parse and validate a personnummer.

        Accepts formats:
        - YYMMDDNNNC / YYMMDD-NNNC / YYMMDD+NNNC
        - CCYYMMDDNNNC / CCYYMMDD-NNNC
        - the same digits as an int

        Raises:
            TypeError: value is neither str nor int
            PersonnummerError: value is not a valid personnummer
            CoordinationNumberError: coordination number while not allowed
        """
        return _build(cls, value, options, kwargs)

    @property
    def full_year(self) -> str:
        return self.century + self.year

    @property
    def real_day(self) -> int:
        """Calendar day with any coordination offset removed."""
        day = int(self.day)
        return day - COORDINATION_OFFSET if self.is_coordination_number else day

    def separated_long(self) -> str:
        """Canonical CCYYMMDDsNNNC form."""
        return (
            f"{self.century}{self.year}{self.month}{self.day}"
            f"{self.sep}{self.num}{self.check}"
        )

    def format(self, long_format: bool = False) -> str:
        """
        Format as YYMMDD-NNNC (or YYMMDD+NNNC), or CCYYMMDDNNNC when long.
        """
        if long_format:
            return f"{self.full_year}{self.month}{self.day}{self.num}{self.check}"
        return f"{self.year}{self.month}{self.day}{self.sep}{self.num}{self.check}"

    def get_date(self) -> date:
        return date(int(self.full_year), int(self.month), self.real_day)

    def get_age(self, now: Union[date, datetime, None] = None) -> int:
        """
        Age in completed years at ``now`` (defaults to the parse clock).

        Birth is taken as midnight of the birth date. Before that instant the
        age is negative, counting completed years until birth.
        """
        current = as_datetime(now if now is not None else self.clock.now())
        born = datetime.combine(self.get_date(), time(), tzinfo=current.tzinfo)
        if current >= born:
            return _whole_years(born, current)
        return -_whole_years(current, born)

    def is_male(self) -> bool:
        return int(self.num[-1]) % 2 == 1

    def is_female(self) -> bool:
        return not self.is_male()

    def is_interim_number(self) -> bool:
        """Interim numbers carry a letter in the birth number; never parsed here."""
        return not self.num.isdigit()

    def has(self, name: str) -> bool:
        """Whether ``name`` is a declared property."""
        return PART_ALIASES.get(name, name) in PARTS

    __contains__ = has

    def get(self, name: str) -> Optional[str]:
        """
        Look up a property by name.

        Unknown names emit a PersonnummerWarning and return None.
        """
        key = PART_ALIASES.get(name, name)
        if key not in PARTS:
            warnings.warn(
                f"Undefined personnummer property: {name}",
                PersonnummerWarning,
                stacklevel=2,
            )
            return None
        start, end = PARTS[key]
        return self.separated_long()[start:end]

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Personnummer({self.format()!r})"


def _reject(value: Any, reason: str) -> PersonnummerError:
    logger.debug("Rejected personnummer %r: %s", value, reason)
    return PersonnummerError(value, reason)


def _check_parts(
    value: Any, century: str, year: str, month: str, day: str, num: str, check: str
) -> bool:
    """
    Check date, birth number and checksum of split digit fields.

    Returns True for a coordination number. Raises PersonnummerError
    naming ``value`` on the first failed check.
    """
    if not 1 <= int(month) <= 12:
        raise _reject(value, f"invalid month {month}")

    encoded_day = int(day)
    is_coordination = COORDINATION_OFFSET < encoded_day <= COORDINATION_OFFSET + 31
    if not (1 <= encoded_day <= 31 or is_coordination):
        raise _reject(value, f"invalid day {day}")
    real_day = encoded_day - COORDINATION_OFFSET if is_coordination else encoded_day

    try:
        date(int(century + year), int(month), real_day)
    except ValueError:
        raise _reject(value, "date does not exist") from None

    if num == "000":
        raise _reject(value, "birth number 000 is not assigned")

    if luhn_checksum(year + month + day + num) != int(check):
        raise _reject(value, "checksum mismatch")

    return is_coordination


def _build(
    cls: type,
    value: Union[str, int],
    options: Union[ParseOptions, dict, None],
    kwargs: dict,
) -> Personnummer:
    # Every public entry point calls this directly, so the caller of the
    # entry point sits four frames above the warning in build_options.
    text = _coerce(value)
    opts = build_options(options, stacklevel=4, **kwargs)
    now = as_datetime(opts.clock.now())

    match = PNR_PATTERN.fullmatch(text)
    if not match:
        raise _reject(value, "malformed personnummer")

    parts = match.groupdict()
    century = parts["century"]
    sep = parts["sep"]

    if century is None:
        century = _infer_century(parts["year"], sep, now)
        sep = sep or "-"
    else:
        derived = _long_form_separator(int(century + parts["year"]), now)
        if sep == "+" and derived != "+":
            raise _reject(value, "'+' separator on a person younger than 100")
        sep = derived

    is_coordination = _check_parts(
        value,
        century,
        parts["year"],
        parts["month"],
        parts["day"],
        parts["num"],
        parts["check"],
    )

    if is_coordination and not opts.allow_coordination_number:
        logger.debug("Rejected coordination number %r", value)
        raise CoordinationNumberError(value, "coordination numbers not allowed")

    return cls(
        century=century,
        year=parts["year"],
        month=parts["month"],
        day=parts["day"],
        sep=sep,
        num=parts["num"],
        check=parts["check"],
        clock=opts.clock,
    )


def parse(
    value: Union[str, int],
    options: Union[ParseOptions, dict, None] = None,
    **kwargs: Any,
) -> Personnummer:
    """Parse a personnummer; see Personnummer.parse."""
    return _build(Personnummer, value, options, kwargs)


def valid(
    value: Union[str, int],
    options: Union[ParseOptions, dict, None] = None,
    **kwargs: Any,
) -> bool:
    """
    Check whether ``value`` is a valid personnummer.

    Returns False for invalid numbers; TypeError still propagates for
    values that are neither str nor int.
    """
    try:
        _build(Personnummer, value, options, kwargs)
    except PersonnummerError:
        return False
    return True


def format_personnummer(
    value: Union[str, int], long_format: bool = False, **options: Any
) -> Optional[str]:
    """
    Format a personnummer as YYMMDD-NNNC, or CCYYMMDDNNNC when long.

    Returns:
        Formatted personnummer or None if invalid
    """
    try:
        return _build(Personnummer, value, options, {}).format(long_format)
    except PersonnummerError:
        return None


def generate_personnummer(
    birth_date: date,
    gender: str = "M",
    birth_number: int = 1,
    coordination: bool = False,
) -> str:
    """
    Generate a valid personnummer for testing purposes.

    Args:
        birth_date: Date of birth
        gender: 'M' for male, 'F' for female
        birth_number: Birth number (1-999)
        coordination: Produce a coordination number (day + 60)

    Returns:
        A valid personnummer in CCYYMMDDNNNC format
    """
    if not 1 <= birth_number <= 999:
        raise ValueError("Birth number must be between 1 and 999")

    # Adjust birth number for gender (odd for male, even for female)
    wants_odd = gender == "M"
    if (birth_number % 2 == 1) != wants_odd:
        birth_number += 1 if birth_number < 999 else -1

    day = birth_date.day + (COORDINATION_OFFSET if coordination else 0)
    date_part = f"{birth_date.year:04d}{birth_date.month:02d}{day:02d}"
    birth_str = f"{birth_number:03d}"

    # Calculate checksum on 10-digit format
    checksum = luhn_checksum(date_part[2:] + birth_str)

    return f"{date_part}{birth_str}{checksum}"
