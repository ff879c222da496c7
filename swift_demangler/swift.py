import logging
from typing import List, Optional

from .component import MalformedSymbol, leading_digit_run_value, split_component, strip_prefix, strip_suffix
from .known_type import KnownType
from .signature import decode_type_signature, match_signature
from .SwiftDemanglerConfig import DecodingPolicy, SwiftDemanglerConfig
from .symbol import DecodedSymbol

LOGGER = logging.getLogger(__name__)


class SwiftDemangler:
    """Demangler for plain Swift 4.2 function symbols ($S...F) using Bool, Int, String and Float.

    Every parse_* step takes the not yet consumed rest of the mangled name and
    returns (value, rest), so the demangler itself holds no per-symbol state.
    """

    def __init__(self, config=None, policy=None):
        if config is None:
            config = SwiftDemanglerConfig()
        self.config = config
        self.policy = policy if policy is not None else config.POLICY

    @property
    def is_strict(self):
        return self.policy == DecodingPolicy.STRICT

    def _fail(self, given_str, message):
        if self.is_strict:
            raise MalformedSymbol(given_str, message)
        LOGGER.debug("%s: %s", message, given_str)

    def is_swift_symbol(self, name: str) -> bool:
        return name.startswith(self.config.PREFIX)

    def demangle(self, inpstr: str) -> str:
        """Demangle the given string into "Module.decl(label: Type, ...) -> Type"

        Args:
            inpstr (str): String to be demangled
        """
        return self.decode_symbol(inpstr).format()

    def decode_symbol(self, inpstr: str) -> DecodedSymbol:
        _, rest = self.parse_prefix(inpstr)
        module, rest = self.parse_module(rest)
        decl_name, rest = self.parse_decl(rest)
        labels, rest = self.parse_labels(rest)
        return_type, rest = self.parse_return_type(rest)
        argument_types, rest = self.parse_argument_types(rest)
        _, rest = self.parse_suffix(rest)
        if rest:
            self._fail(inpstr, "Unconsumed characters after argument types")
        if len(labels) != len(argument_types):
            self._fail(inpstr, "Found {} labels but {} argument types".format(len(labels), len(argument_types)))
        return DecodedSymbol(inpstr, module, decl_name, labels, argument_types, return_type)

    def parse_prefix(self, rest: str):
        stripped = strip_prefix(rest, self.config.PREFIX)
        return stripped != rest, stripped

    def parse_suffix(self, rest: str):
        stripped = strip_suffix(rest, self.config.SUFFIX)
        return stripped != rest, stripped

    def _parse_component(self, rest: str):
        return split_component(rest, strict=self.is_strict)

    def parse_module(self, rest: str):
        return self._parse_component(rest)

    def parse_decl(self, rest: str):
        return self._parse_component(rest)

    def parse_labels(self, rest: str):
        labels: List[str] = []
        while leading_digit_run_value(rest) > 0:
            label, rest = self._parse_component(rest)
            labels.append(label)
        return labels, rest

    def parse_return_type(self, rest: str):
        signature = match_signature(rest, self.config.TYPE_MARKER)
        if signature is None:
            return None, rest
        return_type: Optional[KnownType] = decode_type_signature(signature)
        if return_type is None:
            self._fail(signature, "Unknown return type signature")
        return return_type, rest[len(signature) :]

    def parse_argument_types(self, rest: str):
        argument_types: List[KnownType] = []
        structural = (self.config.TUPLE_SEPARATOR, self.config.TUPLE_TERMINATOR)
        while len(rest) > 1:
            signature = match_signature(rest, self.config.TYPE_MARKER)
            known_type = decode_type_signature(signature)
            if known_type is not None:
                argument_types.append(known_type)
                rest = rest[len(signature) :]
            elif rest[0] in structural:
                rest = rest[1:]
            else:
                self._fail(rest, "Unrecognized character in argument types")
                break
        # without the suffix the loop leaves a trailing separator or terminator behind
        if rest in structural:
            rest = ""
        return argument_types, rest

    def demangle_names(self, names) -> dict:
        """Demangle all Swift symbols among names, return a dict mangled -> demangled"""
        demangled_names = {}
        for name in names:
            if not name or not self.is_swift_symbol(name):
                continue
            try:
                demangled_names[name] = self.demangle(name)
            except MalformedSymbol as exc:
                LOGGER.debug("Failed to demangle Swift symbol %s: %s", name, exc)
        return demangled_names
