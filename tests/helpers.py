from texcalc_lang import (
    DoubleArity,
    Number,
    Operator,
    ScalarId,
    Variable,
    VectorId,
)


def num(value) -> Number:
    return Number(float(value))


def var(name: str) -> Variable:
    return Variable(ScalarId(name))


def vec(name: str) -> Variable:
    return Variable(VectorId(name))


def binary(op: Operator, left, right) -> DoubleArity:
    return DoubleArity(op, left, right)


def assign(target, body) -> DoubleArity:
    return DoubleArity(Operator.ASSIGNMENT, target, body)
