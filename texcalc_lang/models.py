from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple, Union


class Operator(Enum):
    """Tags carried by the arity nodes.

    Values are the spelling used in source: the infix symbol for the
    arithmetic operators, the control-sequence name for everything else.
    """

    ASSIGNMENT = "="
    INDEX = "_"
    EXPONENTIATION = "^"
    MULTIPLICATION = "*"
    DIVISION = "/"
    ADDITION = "+"
    SUBTRACTION = "-"
    SUM = "sum_"

    SQRT = "sqrt"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ARCSIN = "arcsin"
    ARCCOS = "arccos"
    ARCTAN = "arctan"
    SINH = "sinh"
    COSH = "cosh"
    TANH = "tanh"
    EXP = "exp"
    LN = "ln"
    LOG = "log"
    ABS = "abs"
    FLOOR = "floor"
    CEIL = "ceil"
    NORM = "norm"

    FRAC = "frac"
    ROOT = "root"
    BINOM = "binom"
    MAX = "max"
    MIN = "min"
    MOD = "mod"
    DOT = "dot"
    CROSS = "cross"

    CLAMP = "clamp"
    LERP = "lerp"


# --- Identifiers ---


@dataclass(frozen=True)
class ScalarId:
    name: str


@dataclass(frozen=True)
class VectorId:
    name: str


Identifier = Union[ScalarId, VectorId]


# --- Expressions ---


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Variable:
    identifier: Identifier


@dataclass(frozen=True)
class Application:
    callee: "Expression"
    argument: "Expression"


@dataclass(frozen=True)
class Vector:
    items: Tuple["Expression", ...]


@dataclass(frozen=True)
class SingleArity:
    op: Operator
    operand: "Expression"


@dataclass(frozen=True)
class DoubleArity:
    op: Operator
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class TripleArity:
    op: Operator
    first: "Expression"
    second: "Expression"
    third: "Expression"


@dataclass(frozen=True)
class Abstraction:
    parameter: Identifier
    body: "Expression"


@dataclass(frozen=True)
class MapAbstraction:
    parameter: Identifier
    index_name: str
    body: "Expression"


@dataclass(frozen=True)
class Binding:
    """The ``{i = start}`` clause of a summation."""

    variable: Identifier
    value: "Expression"


Expression = Union[
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
]


@dataclass(frozen=True)
class Program:
    statements: Tuple[Expression, ...]

    def __iter__(self) -> Iterator[Expression]:
        return iter(self.statements)

    def __len__(self) -> int:
        return len(self.statements)
