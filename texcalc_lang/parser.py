"""Source text to AST.

Parsing is a single lark LALR pass. Control sequences are resolved against
the symbol table by a post-lexer as soon as they are lexed, so an unknown
``\\name`` is reported before anything to its right is looked at. The
resulting tree is then turned into :mod:`texcalc_lang.models` nodes:
statements top-down (declaration heads must be inspected before their
parentheses are discarded), expressions bottom-up.
"""

import logging
import re
from functools import lru_cache
from typing import Iterable, Iterator, Optional, Tuple, Union

from lark import Lark, Token, Tree, v_args
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken
from lark.lark import PostLex
from lark.visitors import Interpreter, Transformer_NonRecursive

from .exceptions import ParseError
from .grammar import TEXCALC_GRAMMAR
from .models import (
    Abstraction,
    Application,
    Binding,
    DoubleArity,
    Expression,
    Identifier,
    MapAbstraction,
    Number,
    Operator,
    Program,
    ScalarId,
    SingleArity,
    TripleArity,
    Variable,
    Vector,
    VectorId,
)
from .settings import ParserSettings
from .symbols import SymbolTable

logger = logging.getLogger(__name__)

# Appended to every program; the grammar stops at a line holding just EOF.
SENTINEL = "\nEOF"

# A line starting with EOF ends the program early; the rest is ignored.
_END_MARKER = re.compile(r"^[ \t\r]*EOF", re.MULTILINE)

_ARITY_TERMINALS = {1: "UNARY_OP", 2: "BINARY_OP", 3: "TERNARY_OP"}

_TERMINAL_DESCRIPTIONS = {
    "NUMBER": "number",
    "SCALAR": "identifier",
    "CALLEE": "function call",
    "CONTROL": "control sequence",
    "_VEC": "'\\vec'",
    "UNARY_OP": "symbol",
    "BINARY_OP": "symbol",
    "TERNARY_OP": "symbol",
    "SUM_OP": "'\\sum_'",
    "EQUALS": "'='",
    "_INDEX": "'_{'",
    "_NL": "newline",
    "EOF": "end of input",
    "$END": "end of input",
    "LPAR": "'('",
    "RPAR": "')'",
    "LBRACE": "'{'",
    "RBRACE": "'}'",
    "PLUS": "'+'",
    "MINUS": "'-'",
    "STAR": "'*'",
    "SLASH": "'/'",
    "CIRCUMFLEX": "'^'",
    "COMMA": "','",
}


def _describe_terminals(names: Iterable[str]) -> Tuple[str, ...]:
    return tuple(sorted({_TERMINAL_DESCRIPTIONS.get(name, name) for name in names}))


def _expected_terminals(names: Iterable[str]) -> Tuple[str, ...]:
    # CONTROL is accepted by every lexer state; it only counts when nothing else does.
    names = set(names)
    wanted = names - {"CONTROL"}
    return _describe_terminals(wanted or names)


def _describe_token(token: Token) -> str:
    if token.type in ("_NL", "EOF", "$END"):
        return _TERMINAL_DESCRIPTIONS[token.type]
    return repr(str(token))


def _locate(text: str, position: int) -> Tuple[int, int]:
    line = text.count("\n", 0, position) + 1
    column = position - (text.rfind("\n", 0, position) + 1) + 1
    return line, column


class ControlSequenceResolver(PostLex):
    """Retypes ``CONTROL`` tokens to the arity class of the symbol they name."""

    always_accept = ("CONTROL",)

    def process(self, stream: Iterator[Token]) -> Iterator[Token]:
        for token in stream:
            if token.type == "CONTROL":
                token = self.resolve(token)
            yield token

    @staticmethod
    def resolve(token: Token) -> Token:
        name = token.value[1:]
        if name in SymbolTable.RESERVED:
            return Token.new_borrow_pos("_VEC", token.value, token)
        resolved = SymbolTable.resolve(name)
        if resolved is None:
            raise ParseError(
                f"unknown symbol '{token.value}'",
                token.start_pos,
                token.line,
                token.column,
                expected=_describe_terminals(["SUM_OP", "UNARY_OP", "_VEC"]),
                found=repr(token.value),
            )
        arity, op = resolved
        kind = "SUM_OP" if op is Operator.SUM else _ARITY_TERMINALS[arity]
        return Token.new_borrow_pos(kind, token.value, token)


def _identifier(node: Union[Token, Identifier]) -> Identifier:
    if isinstance(node, Token):
        return ScalarId(node.value)
    return node


def _symbol(token: Token) -> Operator:
    return SymbolTable.lookup(token.value[1:])


@v_args(inline=True)
class ExpressionBuilder(Transformer_NonRecursive):
    def number(self, token):
        return Number(float(token))

    def variable(self, identifier):
        return Variable(_identifier(identifier))

    def vector_ident(self, name):
        return VectorId(name.value)

    def group(self, inner):
        return inner

    def call(self, callee, argument):
        return Application(Variable(ScalarId(callee.value)), argument)

    def vector(self, *items):
        return Vector(tuple(items))

    def addition(self, left, right):
        return DoubleArity(Operator.ADDITION, left, right)

    def subtraction(self, left, right):
        return DoubleArity(Operator.SUBTRACTION, left, right)

    def multiplication(self, left, right):
        return DoubleArity(Operator.MULTIPLICATION, left, right)

    def division(self, left, right):
        return DoubleArity(Operator.DIVISION, left, right)

    def exponentiation(self, left, right):
        return DoubleArity(Operator.EXPONENTIATION, left, right)

    def index(self, base, subscript):
        return DoubleArity(Operator.INDEX, base, subscript)

    def single_arity(self, symbol, operand):
        return SingleArity(_symbol(symbol), operand)

    def double_arity(self, symbol, left, right):
        return DoubleArity(_symbol(symbol), left, right)

    def triple_arity(self, symbol, first, second, third):
        return TripleArity(_symbol(symbol), first, second, third)

    def summation(self, _sum, variable, _equals, start, bound, summand):
        return TripleArity(
            Operator.SUM, Binding(_identifier(variable), start), bound, summand
        )


def _bare_identifier(tree) -> Optional[Identifier]:
    """The identifier of a ``variable`` tree, or None for anything else."""
    if not isinstance(tree, Tree) or tree.data != "variable":
        return None
    (node,) = tree.children
    if isinstance(node, Token):
        return ScalarId(node.value)
    return VectorId(node.children[0].value)


class StatementBuilder(Interpreter):
    def __init__(self):
        self.expressions = ExpressionBuilder()

    def program(self, tree):
        return Program(tuple(self.visit(statement) for statement in tree.children))

    def line(self, tree):
        return self.visit(tree.children[0])

    def formula(self, tree):
        return self.expressions.transform(tree.children[0])

    def declaration(self, tree):
        target, equals, body = tree.children
        statement = self._declare(target, self.expressions.transform(body))
        if statement is None:
            raise ParseError(
                "invalid declaration target",
                equals.start_pos,
                equals.line,
                equals.column,
                expected=_describe_terminals(["_NL"]),
                found=repr(equals.value),
            )
        return statement

    @staticmethod
    def _declare(target, body):
        # name(\vec{p})_{i} = body
        if target.data == "index":
            head, subscript = target.children
            index_name = _bare_identifier(subscript)
            if not (isinstance(head, Tree) and head.data == "call" and isinstance(index_name, ScalarId)):
                return None
            callee, argument = head.children
            parameter = _bare_identifier(argument)
            if not isinstance(parameter, VectorId):
                return None
            return DoubleArity(
                Operator.ASSIGNMENT,
                Variable(ScalarId(callee.value)),
                MapAbstraction(parameter, index_name.name, body),
            )

        # name(param) = body
        if target.data == "call":
            callee, argument = target.children
            parameter = _bare_identifier(argument)
            if parameter is None:
                return None
            return DoubleArity(
                Operator.ASSIGNMENT,
                Variable(ScalarId(callee.value)),
                Abstraction(parameter, body),
            )

        # identifier = body
        identifier = _bare_identifier(target)
        if identifier is None:
            return None
        return DoubleArity(Operator.ASSIGNMENT, Variable(identifier), body)

    def __default__(self, tree):
        return self.expressions.transform(tree)


@lru_cache(maxsize=None)
def build_parser(settings: ParserSettings = ParserSettings()) -> Lark:
    logger.debug("Building LALR parser (debug=%s, cache=%s)", settings.debug, settings.cache_grammar)
    return Lark(
        TEXCALC_GRAMMAR,
        parser="lalr",
        start=["program", "line", "formula"],
        postlex=ControlSequenceResolver(),
        propagate_positions=True,
        debug=settings.debug,
        cache=settings.cache_grammar,
    )


def _convert(err: UnexpectedInput, text: str, limit: int) -> ParseError:
    if isinstance(err, UnexpectedToken):
        token = err.token
        found = _describe_token(token)
        message = f"unexpected {found}"
        position = token.start_pos if token.start_pos is not None else len(text)
        # Tokens rejected by the lexer carry its allowed set, not the parser's.
        expected = _expected_terminals(err.accepts or err.expected)
    elif isinstance(err, UnexpectedCharacters):
        found = repr(err.char)
        message = f"unexpected character {found}"
        position = err.pos_in_stream
        expected = _expected_terminals(err.allowed or ())
    else:
        found = _TERMINAL_DESCRIPTIONS["$END"]
        message = "unexpected end of input"
        position = len(text)
        expected = _describe_terminals(getattr(err, "expected", None) or ())

    # Failures inside the appended sentinel are reported at the end of the
    # caller's text.
    position = min(max(position, 0), limit)
    line, column = _locate(text, position)
    return ParseError(message, position, line, column, expected=expected, found=found)


def _run(text: str, start: str, limit: int, settings: Optional[ParserSettings]):
    parser = build_parser(settings if settings is not None else ParserSettings.from_env())
    try:
        tree = parser.parse(text, start=start)
        return StatementBuilder().visit(tree)
    except UnexpectedInput as err:
        error = _convert(err, text, limit)
        logger.debug("Rejected input: %s", error)
        raise error from None
    except ParseError as err:
        logger.debug("Rejected input: %s", err)
        raise


def parse(text: str, settings: Optional[ParserSettings] = None) -> Program:
    """Parse a newline-separated program, declarations allowed on every line.

    Parsing stops at the first line that starts with ``EOF``; anything after
    it is not looked at.
    """
    marker = _END_MARKER.search(text)
    if marker is not None:
        logger.debug("Program ends at line %d", text.count("\n", 0, marker.start()) + 1)
        text = text[: marker.start()]
    program = _run(text + SENTINEL, "program", len(text), settings)
    logger.debug("Parsed %d statement(s)", len(program))
    return program


def parse_statement(text: str, settings: Optional[ParserSettings] = None) -> Expression:
    """Parse exactly one top-level statement."""
    return _run(text, "line", len(text), settings)


def parse_expression(text: str, settings: Optional[ParserSettings] = None) -> Expression:
    """Parse one expression; declarations are rejected."""
    return _run(text, "formula", len(text), settings)
