import logging
import string

LOGGER = logging.getLogger(__name__)


class MalformedSymbol(Exception):
    def __init__(self, given_str, message="Not able to demangle the given string as a Swift symbol"):
        self.message = message
        self.given_str = given_str
        super().__init__(self.message)

    def __str__(self):
        return f"[{self.given_str}] {self.message}"


class TruncatedComponent(MalformedSymbol):
    def __init__(self, given_str, message="Declared component length exceeds the remaining characters"):
        super().__init__(given_str, message)


def strip_prefix(value: str, prefix: str) -> str:
    """Remove prefix from the start of value, return value unchanged if it is not there."""
    if not prefix or not value.startswith(prefix):
        return value
    return value[len(prefix) :]


def strip_suffix(value: str, suffix: str) -> str:
    """Remove suffix from the end of value, return value unchanged if it is not there."""
    if not suffix or not value.endswith(suffix):
        return value
    return value[: -len(suffix)]


def _find_digit_run(value: str):
    """Return (start, end) of the first run of consecutive ASCII digits, (-1, -1) if there is none."""
    start = -1
    for index, char in enumerate(value):
        if char in string.digits:
            start = index
            break
    if start == -1:
        return -1, -1
    end = start
    while end < len(value) and value[end] in string.digits:
        end += 1
    return start, end


def leading_digit_run_value(value: str) -> int:
    """Find the first block of digits in value and return it as integer.

    Digits before or after that first block are not considered.

    Args:
        value (str): string to search

    Returns:
        int: parsed number, 0 if value contains no digit at all
    """
    start, end = _find_digit_run(value)
    if start == -1:
        return 0
    # no int(str) conversion, digit runs may exceed the interpreter's conversion limit
    number = 0
    for char in value[start:end]:
        number = number * 10 + int(char)
    return number


def _locate_component(value: str):
    """Return (length, payload_start) of the length-prefixed component in value.

    payload_start skips len(str(length)) characters from the beginning of the digit run.
    A length with more digits than the length of value itself is reported as len(value) + 1,
    which always ends up as a truncated component.
    """
    start, end = _find_digit_run(value)
    if start == -1:
        return 0, 0
    significant = value[start:end].lstrip("0")
    if not significant:
        return 0, 0
    if len(significant) > len(str(len(value))):
        return len(value) + 1, start + len(significant)
    length = leading_digit_run_value(value)
    return length, start + len(significant)


def split_component(value: str, strict: bool = False):
    """Split off a {digits}{payload} component from the front of value.

    Args:
        value (str): remaining mangled input
        strict (bool): raise TruncatedComponent instead of returning a shortened payload

    Returns:
        tuple: (payload, rest) where rest is everything behind the payload.
            Without a usable length the whole value is the payload and rest is empty.
    """
    length, payload_start = _locate_component(value)
    if length == 0:
        return value, ""
    payload_end = payload_start + length
    if payload_end > len(value):
        if strict:
            raise TruncatedComponent(value)
        LOGGER.debug("Component in %s declares %d characters, only %d available", value, length, len(value) - payload_start)
    return value[payload_start:payload_end], value[payload_end:]


def component_payload(value: str) -> str:
    """Return the {payload} part of a {digits}{payload} component, value itself if there is no length."""
    payload, _ = split_component(value)
    return payload


def component_span(value: str) -> str:
    """Return the {digits}{payload} part of value, i.e. what the component occupies."""
    length, payload_start = _locate_component(value)
    if length == 0:
        return value
    digits_start, _ = _find_digit_run(value)
    return value[digits_start : payload_start + length]
