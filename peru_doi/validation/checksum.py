"""SUNAT modulo-11 check digit for RUC numbers."""

from peru_doi.validation.rules import RUC_CHECKSUM, ChecksumContext


def check_digit_for_remainder(remainder: int, modulus: int = RUC_CHECKSUM.modulus) -> str:
    """Map a weighted-sum remainder to its check digit.

    11 - remainder collapses to '1' for remainder 0 and to '0' for remainder 1.
    """
    if not 0 <= remainder < modulus:
        raise ValueError(f"Remainder must be in [0, {modulus}), got {remainder}")
    check = modulus - remainder
    if check == 11:
        return "1"
    if check == 10:
        return "0"
    return str(check)


def compute_check_digit(digits: str, context: ChecksumContext = RUC_CHECKSUM) -> str:
    """Compute the RUC check digit from its leading digits.

    Args:
        digits: The first 10 digits of a RUC, or a full 11-digit RUC whose
            last digit is ignored.
        context: Weights and modulus to apply.

    Returns:
        The expected check digit as a single character.

    Raises:
        ValueError: if ``digits`` is not a string, is too short or too long, or
            is not numeric.
    """
    if not isinstance(digits, str):
        raise ValueError(f"RUC digits must be a string, got {type(digits).__name__}")
    body_length = len(context.weights)
    if len(digits) < body_length:
        raise ValueError(
            f"To compute a RUC check digit, at least {body_length} digits are required"
        )
    if len(digits) > body_length + 1:
        raise ValueError(f"RUC length cannot exceed {body_length + 1} digits")

    total = 0
    for index, (char, weight) in enumerate(zip(digits, context.weights)):
        if char not in "0123456789":
            raise ValueError(f"Invalid RUC character {char!r} at index {index}")
        total += int(char) * weight

    return check_digit_for_remainder(total % context.modulus, context.modulus)
