from typing import Optional

from .known_type import KnownType, decode_code
from .SwiftDemanglerConfig import SwiftDemanglerConfig


def match_signature(value: str, marker: str = SwiftDemanglerConfig.TYPE_MARKER) -> Optional[str]:
    """Return the leading two character type signature of value, None if value does not start with one."""
    if len(value) < 2 or value[0] != marker:
        return None
    return value[:2]


def decode_type_signature(signature: str) -> Optional[KnownType]:
    """Translate a signature like "Si" into its KnownType.

    The marker character is not validated again here, use match_signature() for that.
    """
    if signature is None or len(signature) < 2:
        return None
    return decode_code(signature[1])
