"""Elementary number routines: binary digits, GCDs and digit parsing."""

_DIGITS = "0123456789"


def dec_to_bin(decimal: int) -> int:
    """Return the binary form of ``decimal`` written as a base-10 integer.

    For example 5 becomes 101. Values of zero or below give 0.
    """
    if decimal <= 0:
        return 0
    return int(format(decimal, "b"))


def _check_operands(a: int, b: int) -> None:
    if a > 0 and b <= 0:
        raise ValueError("the second operand must be positive when the first is")


def euclid_gcd(a: int, b: int) -> int:
    """Greatest common divisor by repeated subtraction.

    Uses gcd(a, b) == gcd(b, a - b) until ``a`` reaches zero.
    """
    _check_operands(a, b)
    while a > 0:
        if a < b:
            a, b = b, a
        a -= b
    return b


def modulo_gcd(a: int, b: int) -> int:
    """Greatest common divisor by repeated remainder.

    Uses gcd(a, b) == gcd(b, a % b) until ``a`` reaches zero.
    """
    _check_operands(a, b)
    while a > 0:
        if a < b:
            a, b = b, a
        a %= b
    return b


def triple_gcd(a: int, b: int, c: int) -> int:
    """Greatest common divisor of three numbers: gcd(a, gcd(b, c))."""
    return euclid_gcd(a, euclid_gcd(b, c))


def string_to_num(text: str) -> int:
    """Read a non-negative decimal number from ``text``.

    One trailing newline is ignored. Anything other than ASCII digits
    raises ``ValueError``.
    """
    if text.endswith("\n"):
        text = text[:-1]
    if not text:
        raise ValueError("no digits to read")
    number = 0
    for char in text:
        if char not in _DIGITS:
            raise ValueError(f"not a decimal digit: {char!r}")
        number = number * 10 + (ord(char) - ord("0"))
    return number