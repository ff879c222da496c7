from typing import List, Optional

from .known_type import KnownType, display_name


class DecodedSymbol(object):
    """Everything the demangler extracted from one mangled name"""

    def __init__(self, mangled="", module="", decl_name="", labels=None, argument_types=None, return_type=None):
        self.mangled = mangled
        self.module = module
        self.decl_name = decl_name
        self.labels: List[str] = labels if labels is not None else []
        self.argument_types: List[KnownType] = argument_types if argument_types is not None else []
        self.return_type: Optional[KnownType] = return_type

    @property
    def num_parameters(self):
        return min(len(self.labels), len(self.argument_types))

    def getParameters(self):
        """Pairs of (label, KnownType), extra labels or types without a partner are dropped"""
        return list(zip(self.labels, self.argument_types))

    def format(self) -> str:
        result = "{}.{}".format(self.module, self.decl_name)
        # any label opens a parameter list, even if no argument type pairs with it
        if self.labels:
            parameters = ["{}: {}".format(label, display_name(known_type)) for label, known_type in self.getParameters()]
            result += "({})".format(", ".join(parameters))
        if self.return_type is not None:
            result += " -> {}".format(display_name(self.return_type))
        return result

    @classmethod
    def fromDict(cls, symbol_dict) -> "DecodedSymbol":
        return cls(
            mangled=symbol_dict["mangled"],
            module=symbol_dict["module"],
            decl_name=symbol_dict["decl_name"],
            labels=list(symbol_dict["labels"]),
            argument_types=[KnownType[name] for name in symbol_dict["argument_types"]],
            return_type=KnownType[symbol_dict["return_type"]] if symbol_dict["return_type"] else None,
        )

    def toDict(self) -> dict:
        return {
            "mangled": self.mangled,
            "module": self.module,
            "decl_name": self.decl_name,
            "labels": list(self.labels),
            "argument_types": [known_type.name for known_type in self.argument_types],
            "return_type": self.return_type.name if self.return_type is not None else None,
            "demangled": self.format(),
        }

    def __str__(self):
        return self.format()

    def __repr__(self):
        return "DecodedSymbol({!r})".format(self.format())
