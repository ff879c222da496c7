import unittest

from swift_demangler.known_type import KnownType
from swift_demangler.symbol import DecodedSymbol


class DecodedSymbolTestSuite(unittest.TestCase):

    def test_format(self):
        symbol = DecodedSymbol("", "ExampleNumber", "isEven", ["number"], [KnownType.INT], KnownType.BOOL)
        self.assertEqual(symbol.format(), "ExampleNumber.isEven(number: Swift.Int) -> Swift.Bool")
        self.assertEqual(str(symbol), symbol.format())

    def test_format_without_labels(self):
        self.assertEqual(DecodedSymbol(module="Main", decl_name="main").format(), "Main.main")
        # types without labels are not rendered
        symbol = DecodedSymbol(module="Main", decl_name="run", argument_types=[KnownType.INT], return_type=KnownType.FLOAT)
        self.assertEqual(symbol.format(), "Main.run -> Swift.Float")

    def test_format_truncates_to_shorter_list(self):
        symbol = DecodedSymbol(module="M", decl_name="f", labels=["a", "b", "c"], argument_types=[KnownType.STRING, KnownType.BOOL])
        self.assertEqual(symbol.getParameters(), [("a", KnownType.STRING), ("b", KnownType.BOOL)])
        self.assertEqual(symbol.format(), "M.f(a: Swift.String, b: Swift.Bool)")

    def test_to_dict(self):
        symbol = DecodedSymbol("$S13ExampleNumber6isEven6numberSbSi_tF", "ExampleNumber", "isEven", ["number"], [KnownType.INT], KnownType.BOOL)
        symbol_dict = symbol.toDict()
        self.assertEqual(symbol_dict["argument_types"], ["INT"])
        self.assertEqual(symbol_dict["return_type"], "BOOL")
        self.assertEqual(symbol_dict["demangled"], "ExampleNumber.isEven(number: Swift.Int) -> Swift.Bool")
        restored = DecodedSymbol.fromDict(symbol_dict)
        self.assertEqual(restored.toDict(), symbol_dict)
        no_return = DecodedSymbol(module="Main", decl_name="main").toDict()
        self.assertIsNone(no_return["return_type"])
        self.assertIsNone(DecodedSymbol.fromDict(no_return).return_type)


if __name__ == '__main__':
    unittest.main()
