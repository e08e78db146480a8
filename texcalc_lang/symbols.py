from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .models import Operator


def _table(*operators: Operator) -> Mapping[str, Operator]:
    return MappingProxyType({op.value: op for op in operators})


class SymbolTable:
    """Control-sequence names grouped by the number of ``{...}`` operands."""

    SINGLE = _table(
        Operator.SQRT,
        Operator.SIN,
        Operator.COS,
        Operator.TAN,
        Operator.ARCSIN,
        Operator.ARCCOS,
        Operator.ARCTAN,
        Operator.SINH,
        Operator.COSH,
        Operator.TANH,
        Operator.EXP,
        Operator.LN,
        Operator.LOG,
        Operator.ABS,
        Operator.FLOOR,
        Operator.CEIL,
        Operator.NORM,
    )
    DOUBLE = _table(
        Operator.FRAC,
        Operator.ROOT,
        Operator.BINOM,
        Operator.MAX,
        Operator.MIN,
        Operator.MOD,
        Operator.DOT,
        Operator.CROSS,
    )
    TRIPLE = _table(Operator.SUM, Operator.CLAMP, Operator.LERP)

    # Reserved control sequences that are not operators.
    RESERVED = frozenset({"vec"})

    @classmethod
    def resolve(cls, name: str) -> Optional[Tuple[int, Operator]]:
        for arity, table in ((1, cls.SINGLE), (2, cls.DOUBLE), (3, cls.TRIPLE)):
            op = table.get(name)
            if op is not None:
                return arity, op
        return None

    @classmethod
    def arity_of(cls, name: str) -> Optional[int]:
        resolved = cls.resolve(name)
        return resolved[0] if resolved else None

    @classmethod
    def lookup(cls, name: str) -> Operator:
        resolved = cls.resolve(name)
        if resolved is None:
            raise KeyError(name)
        return resolved[1]

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        return tuple(cls.SINGLE) + tuple(cls.DOUBLE) + tuple(cls.TRIPLE)
