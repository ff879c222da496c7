from .swift import SwiftDemangler
from .SwiftDemanglerConfig import SwiftDemanglerConfig


def demangle(inp_str: str, policy=None) -> str:
    """Demangle a Swift mangled symbol name.

    Args:
        inp_str: The mangled symbol name to demangle.
        policy: Optional DecodingPolicy, defaults to the configured one (lenient).

    Returns:
        The demangled signature, e.g. "ExampleNumber.isEven(number: Swift.Int) -> Swift.Bool".

    Raises:
        MalformedSymbol: Only with DecodingPolicy.STRICT, if the symbol does not fit the supported grammar.
        TruncatedComponent: Only with DecodingPolicy.STRICT, if a name is shorter than its declared length.
    """
    demangler = SwiftDemangler(policy=policy)
    return demangler.demangle(inp_str)


def demangle_symbol(inp_str: str, policy=None):
    """Like demangle(), but return the DecodedSymbol instead of its string form."""
    demangler = SwiftDemangler(policy=policy)
    return demangler.decode_symbol(inp_str)


def is_swift_symbol(name: str) -> bool:
    return name.startswith(SwiftDemanglerConfig.PREFIX)
