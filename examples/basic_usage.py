"""Basic usage example for numberlist."""

import logging
import tempfile
from pathlib import Path

from numberlist import DEFAULT_CONFIG, NumberConfig, NumberList


def main() -> None:
    """Demonstrate list operations under an explicit and the default configuration."""
    logging.basicConfig(level=logging.DEBUG)

    config = NumberConfig(
        primary_base=10, additional_base=3, operation="sub", circular=True, doubly=True
    )

    print("=== Building numbers ===\n")
    number = NumberList("173", config=config)
    print(f"{number!r}")
    print(f"Digits: {number.to_list()}, value: {number.value}")

    scaled = number.change_scale()
    print(f"In base {scaled.base}: {scaled} (still equal: {scaled == number})\n")

    # Invalid input leaves the list empty instead of raising
    rejected = NumberList("-42", config=config)
    print(f"'-42' gives an empty list: {rejected.is_empty()}\n")

    print("=== Digit operations ===\n")
    digits = NumberList("41422", config=config)
    digits.sort_ascending()
    print(f"Sorted ascending: {digits}")
    digits.shift_left()
    print(f"Rotated left: {digits}")
    print(f"Swap(0, 9) succeeded: {digits.swap(0, 9)}")

    cursor = digits.cursor()
    for digit in cursor:
        if digit == 2:
            cursor.remove()
    print(f"Without 2s: {digits}, value {digits.value}\n")

    print("=== Configured operation ===\n")
    five, nine = NumberList("5", config=config), NumberList("9", config=config)
    print(f"5 {config.operation} 9 = {five.additional_operation(nine)}")
    print(f"9 {config.operation} 5 = {nine.additional_operation(five)}\n")

    print("=== Persistence ===\n")
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "numbers" / "value.txt"
        number.save(path)
        print(f"Loaded back: {NumberList.from_file(path, config=config)!r}\n")

    print(f"Default configuration: {DEFAULT_CONFIG}")
    print(f"'64' in default primary base: {NumberList('64')}")


if __name__ == "__main__":
    main()
