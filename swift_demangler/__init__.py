from .component import (
    MalformedSymbol,
    TruncatedComponent,
    component_payload,
    component_span,
    leading_digit_run_value,
    strip_prefix,
    strip_suffix,
)
from .known_type import KnownType, decode_code, display_name
from .main import demangle, demangle_symbol, is_swift_symbol
from .signature import decode_type_signature, match_signature
from .swift import SwiftDemangler
from .SwiftDemanglerConfig import DecodingPolicy, SwiftDemanglerConfig
from .symbol import DecodedSymbol
