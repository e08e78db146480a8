from __future__ import annotations

import unittest

from texcalc_lang import (
    Abstraction,
    Application,
    DoubleArity,
    MapAbstraction,
    Operator,
    ParseError,
    Program,
    ScalarId,
    SingleArity,
    VectorId,
    Vector,
    parse,
    parse_expression,
    parse_statement,
)
from tests.helpers import assign, binary, num, var, vec


class DeclarationTests(unittest.TestCase):
    def test_assignment(self) -> None:
        self.assertEqual(
            parse("a = 1 + 2\n"),
            Program((assign(var("a"), binary(Operator.ADDITION, num(1), num(2))),)),
        )

    def test_vector_assignment(self) -> None:
        self.assertEqual(
            parse_statement("\\vec{v} = (1, 2)"),
            assign(vec("v"), Vector((num(1), num(2)))),
        )

    def test_function_declaration(self) -> None:
        self.assertEqual(
            parse("f(x) = x^2\n"),
            Program(
                (
                    assign(
                        var("f"),
                        Abstraction(ScalarId("x"), binary(Operator.EXPONENTIATION, var("x"), num(2))),
                    ),
                )
            ),
        )

    def test_function_declaration_with_vector_parameter(self) -> None:
        self.assertEqual(
            parse_statement("g(\\vec{u}) = \\norm{\\vec{u}}"),
            assign(var("g"), Abstraction(VectorId("u"), SingleArity(Operator.NORM, vec("u")))),
        )

    def test_map_function_declaration(self) -> None:
        self.assertEqual(
            parse_statement("h(\\vec{p})_{i} = \\vec{p}_{i} * 2"),
            assign(
                var("h"),
                MapAbstraction(
                    VectorId("p"),
                    "i",
                    binary(
                        Operator.MULTIPLICATION,
                        DoubleArity(Operator.INDEX, vec("p"), var("i")),
                        num(2),
                    ),
                ),
            ),
        )

    def test_call_without_equals_stays_an_expression(self) -> None:
        self.assertEqual(parse_statement("f(x)"), Application(var("f"), var("x")))

    def test_assignment_target_is_outermost_node(self) -> None:
        statement = parse_statement("y = f(2) + 1")
        self.assertIs(statement.op, Operator.ASSIGNMENT)
        self.assertEqual(statement.left, var("y"))


class DeclarationRejectionTests(unittest.TestCase):
    def _assert_rejected(self, text: str) -> ParseError:
        with self.assertRaises(ParseError) as ctx:
            parse(text)
        return ctx.exception

    def test_assignment_inside_parentheses(self) -> None:
        self._assert_rejected("(a = 1)\n")

    def test_assignment_inside_symbol_operand(self) -> None:
        self._assert_rejected("\\sqrt{a = 1}\n")

    def test_chained_assignment(self) -> None:
        self._assert_rejected("a = b = 1\n")

    def test_arithmetic_target(self) -> None:
        err = self._assert_rejected("1 + 2 = 3\n")
        self.assertEqual(err.message, "invalid declaration target")
        self.assertEqual(err.position, 6)
        self.assertEqual((err.line, err.column), (1, 7))

    def test_parenthesized_target(self) -> None:
        self._assert_rejected("(a) = 1\n")

    def test_parenthesized_parameter(self) -> None:
        self._assert_rejected("f((x)) = x\n")

    def test_non_identifier_parameter(self) -> None:
        self._assert_rejected("f(1) = 2\n")

    def test_map_declaration_needs_vector_parameter(self) -> None:
        self._assert_rejected("f(x)_{i} = x\n")

    def test_map_declaration_needs_scalar_index(self) -> None:
        self._assert_rejected("f(\\vec{x})_{2} = 1\n")
        self._assert_rejected("f(\\vec{x})_{\\vec{i}} = 1\n")

    def test_declaration_with_missing_body(self) -> None:
        err = self._assert_rejected("f(x) = \n")
        self.assertEqual(err.found, "newline")

    def test_declaration_with_malformed_body(self) -> None:
        self._assert_rejected("f(x) = x +\n")

    def test_expression_entry_point_rejects_declarations(self) -> None:
        with self.assertRaises(ParseError):
            parse_expression("a = 1")
        with self.assertRaises(ParseError):
            parse_expression("f(x) = x")

    def test_statement_entry_point_takes_one_line(self) -> None:
        with self.assertRaises(ParseError):
            parse_statement("a = 1\nb = 2")


if __name__ == "__main__":
    unittest.main(verbosity=2)
