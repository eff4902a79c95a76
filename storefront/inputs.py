"""Parsing of typed answers: numbers, menu choices and Y/N questions."""

from __future__ import annotations

from storefront.constant import MAIN_MENU_OPTIONS
from storefront.errors import ErrorKind, StoreError


def parse_int(raw: str) -> int:
    """Parse a whole number; anything else, including trailing garbage, is invalid."""
    text = raw.strip()
    digits = text[1:] if text[:1] in {"-", "+"} else text
    if not digits or not digits.isdigit() or not digits.isascii():
        raise StoreError(ErrorKind.INVALID_INPUT, raw=raw)
    return int(text)


def parse_menu_choice(raw: str) -> int:
    choice = parse_int(raw)
    if choice not in MAIN_MENU_OPTIONS:
        raise StoreError(
            ErrorKind.INVALID_CHOICE,
            f"Invalid menu choice. Please select 1-{len(MAIN_MENU_OPTIONS)}.",
            choice=choice,
        )
    return choice


def parse_yes_no(raw: str) -> bool:
    """Return True for Y and False for N, case-insensitive."""
    answer = raw.strip().upper()
    if answer == "Y":
        return True
    if answer == "N":
        return False
    raise StoreError(ErrorKind.INVALID_CHOICE, "Please enter Y or N.", raw=raw)
