from enum import Enum
from typing import Optional


class KnownType(Enum):
    BOOL = "b"
    INT = "i"
    STRING = "S"
    FLOAT = "f"


# type code -> KnownType, only these four codes are recognized
_TYPE_CODES = {known_type.value: known_type for known_type in KnownType}

DISPLAY_NAMES = {
    KnownType.BOOL: "Swift.Bool",
    KnownType.INT: "Swift.Int",
    KnownType.STRING: "Swift.String",
    KnownType.FLOAT: "Swift.Float",
}


def display_name(known_type: KnownType) -> str:
    return DISPLAY_NAMES[known_type]


def decode_code(code: str) -> Optional[KnownType]:
    """Map a single type code character to its KnownType, None if the code is not known."""
    return _TYPE_CODES.get(code)
