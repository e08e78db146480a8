from __future__ import annotations

import unittest

from texcalc_lang import Operator, SymbolTable


class SymbolTableTests(unittest.TestCase):
    def test_resolve_reports_arity_and_operator(self) -> None:
        self.assertEqual(SymbolTable.resolve("sqrt"), (1, Operator.SQRT))
        self.assertEqual(SymbolTable.resolve("frac"), (2, Operator.FRAC))
        self.assertEqual(SymbolTable.resolve("clamp"), (3, Operator.CLAMP))
        self.assertEqual(SymbolTable.resolve("sum_"), (3, Operator.SUM))

    def test_unknown_and_reserved_names_do_not_resolve(self) -> None:
        self.assertIsNone(SymbolTable.resolve("bogus"))
        self.assertIsNone(SymbolTable.resolve("vec"))
        self.assertIsNone(SymbolTable.resolve("sum"))
        self.assertIn("vec", SymbolTable.RESERVED)

    def test_arity_of(self) -> None:
        self.assertEqual(SymbolTable.arity_of("sin"), 1)
        self.assertEqual(SymbolTable.arity_of("binom"), 2)
        self.assertEqual(SymbolTable.arity_of("lerp"), 3)
        self.assertIsNone(SymbolTable.arity_of("nope"))

    def test_lookup_raises_for_unknown_names(self) -> None:
        self.assertIs(SymbolTable.lookup("cos"), Operator.COS)
        with self.assertRaises(KeyError):
            SymbolTable.lookup("nope")

    def test_every_name_belongs_to_exactly_one_arity_class(self) -> None:
        names = SymbolTable.names()
        self.assertEqual(len(names), len(set(names)))
        for name in names:
            classes = [
                table for table in (SymbolTable.SINGLE, SymbolTable.DOUBLE, SymbolTable.TRIPLE)
                if name in table
            ]
            self.assertEqual(len(classes), 1, name)

    def test_names_match_operator_spelling(self) -> None:
        for name in SymbolTable.names():
            self.assertEqual(SymbolTable.lookup(name).value, name)

    def test_tables_are_read_only(self) -> None:
        with self.assertRaises(TypeError):
            SymbolTable.SINGLE["bogus"] = Operator.SIN  # type: ignore[index]
        with self.assertRaises(TypeError):
            del SymbolTable.DOUBLE["frac"]  # type: ignore[attr-defined]


if __name__ == "__main__":
    unittest.main(verbosity=2)
