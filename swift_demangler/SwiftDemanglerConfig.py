from enum import Enum


class DecodingPolicy(Enum):
    # fall back silently (with debug logging) on anything unexpected
    LENIENT_TRUNCATE = 0
    # raise MalformedSymbol on anything unexpected
    STRICT = 1


class SwiftDemanglerConfig(object):

    # note to self: always change this in setup.py as well!
    VERSION = "1.0.0"

    # literals of the supported grammar:
    # $S <len><module> <len><decl> {<len><label>} [S<code>] {S<code> | _ | t} F
    PREFIX = "$S"
    SUFFIX = "F"
    TYPE_MARKER = "S"
    TUPLE_SEPARATOR = "_"
    TUPLE_TERMINATOR = "t"

    POLICY = DecodingPolicy.LENIENT_TRUNCATE
