"""Validation of the source numbers and target supplied by a caller."""

from typing import List

from .exceptions import InputValidationError

MAX_NUMBERS = 6
TARGET_MIN = 1
TARGET_MAX = 999


def is_valid_target(target: int, minimum: int = TARGET_MIN, maximum: int = TARGET_MAX) -> bool:
    return minimum <= target <= maximum


def parse_numbers(text: str, max_numbers: int = MAX_NUMBERS,
                  allow_duplicates: bool = False) -> List[int]:
    """
    Parse a comma separated list of source numbers, e.g. "1,3,7,10,25,50".

    Blank entries are ignored.

    Raises:
        InputValidationError: On a non-numeric or non-positive entry, an
            empty list, duplicates, or more than `max_numbers` numbers
    """
    numbers = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            number = int(part)
        except ValueError:
            raise InputValidationError(f"Invalid number format in input: {part!r}") from None
        if number <= 0:
            raise InputValidationError(f"Numbers must be positive integers, got {number}")
        numbers.append(number)

    if not numbers:
        raise InputValidationError("No valid numbers provided")
    if not allow_duplicates and len(set(numbers)) != len(numbers):
        raise InputValidationError("Duplicate numbers are not allowed")
    if len(numbers) > max_numbers:
        raise InputValidationError(f"Maximum {max_numbers} numbers allowed")
    return numbers


def parse_target(text: str, minimum: int = TARGET_MIN, maximum: int = TARGET_MAX) -> int:
    """
    Parse the target number.

    Raises:
        InputValidationError: If it is not an integer in [minimum, maximum]
    """
    try:
        target = int(text.strip())
    except ValueError:
        raise InputValidationError(f"Invalid target number format: {text!r}") from None
    if not is_valid_target(target, minimum, maximum):
        raise InputValidationError(f"Target must be between {minimum} and {maximum}")
    return target
