from .grammar import TEXCALC_GRAMMAR
from .exceptions import TexcalcError, ParseError
from .models import (
    Operator,
    ScalarId,
    VectorId,
    Identifier,
    Number,
    Variable,
    Application,
    Vector,
    SingleArity,
    DoubleArity,
    TripleArity,
    Abstraction,
    MapAbstraction,
    Binding,
    Expression,
    Program,
)
from .settings import ParserSettings
from .symbols import SymbolTable
from .parser import (
    SENTINEL,
    ControlSequenceResolver,
    build_parser,
    parse,
    parse_expression,
    parse_statement,
)
from .printer import describe_identifier, format_tree

__all__ = [
    "TEXCALC_GRAMMAR",
    "TexcalcError",
    "ParseError",
    "Operator",
    "ScalarId",
    "VectorId",
    "Identifier",
    "Number",
    "Variable",
    "Application",
    "Vector",
    "SingleArity",
    "DoubleArity",
    "TripleArity",
    "Abstraction",
    "MapAbstraction",
    "Binding",
    "Expression",
    "Program",
    "ParserSettings",
    "SymbolTable",
    "SENTINEL",
    "ControlSequenceResolver",
    "build_parser",
    "parse",
    "parse_expression",
    "parse_statement",
    "describe_identifier",
    "format_tree",
]
