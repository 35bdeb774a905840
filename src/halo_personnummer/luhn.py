"""
Luhn (mod 10) check digit used by Swedish identity numbers.
"""


def luhn_checksum(digits: str) -> int:
    """
    Calculate Luhn checksum digit.

    The Luhn algorithm, as applied to personnummer:
    1. Double every second digit, starting with the first
    2. If doubling results in > 9, subtract 9
    3. Sum all digits
    4. Checksum is (10 - (sum % 10)) % 10

    Args:
        digits: Numeric string, normally YYMMDDNNN

    Returns:
        The check digit (0-9)
    """
    if not digits.isascii() or not digits.isdigit():
        raise ValueError(f"Luhn input must be ASCII digits, got {digits!r}")

    total = 0
    for i, digit in enumerate(digits):
        d = int(digit)
        if i % 2 == 0:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return (10 - (total % 10)) % 10


def verify_luhn(digits: str, check: int) -> bool:
    """Return True if ``check`` is the Luhn check digit of ``digits``."""
    return luhn_checksum(digits) == int(check)
