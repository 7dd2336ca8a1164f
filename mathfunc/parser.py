import logging

from .context import Context
from .functions import Const, Kind, Special, Var, add, sub, mul, div, power, neg, e, pi
from .rational import Rational
from .splitter import (
    split, Op, VARIABLES,
    ParsingError, UnknownToken, InvalidInput, DimensionMismatch,
)

logger = logging.getLogger(__name__)

KINDS = {kind.value: kind for kind in Kind}

COMBINATORS = {
    Op.ADD: add,
    Op.SUB: sub,
    Op.MUL: mul,
    Op.DIV: div,
    Op.POW: power,
}

def build(text, ctx=None, dim=1):
    assert dim in (1, 2, 3), dim
    if ctx is None:
        ctx = Context()
    return parse_text("".join(text.split()), ctx, dim)

def parse_text(text, ctx, dim):
    if ctx.has_name(text):
        return atom(text, ctx, dim)
    return parse(split(text), ctx, dim)

def parse(s, ctx, dim):
    logger.debug("split %r %s %r", s.first, s.operator.name, s.second)
    if s.second is not None:
        if s.operator is Op.COMP:
            return composite(s.first, s.second, ctx, dim)
        lhs = parse_text(s.first, ctx, dim)
        rhs = parse_text(s.second, ctx, dim)
        if s.operator not in COMBINATORS:
            raise InvalidInput()
        return COMBINATORS[s.operator](lhs, rhs)
    if s.operator is Op.SUB:
        return neg(parse_text(s.first, ctx, dim))
    return atom(s.first, ctx, dim)

def composite(name, argument, ctx, dim):
    if not name:
        return parse_text(argument, ctx, dim)
    kind = KINDS.get(name)
    if kind is not None:
        try:
            return Special(kind, parse_text(argument, ctx, dim))
        except ParsingError:
            if ctx.lookup_function(name) is None:
                raise
    return registered(name, ctx, dim)

def registered(name, ctx, dim):
    entry = ctx.lookup_function(name)
    if entry is None:
        raise UnknownToken(name)
    function, arity = entry
    if arity > dim:
        raise DimensionMismatch(name)
    return function

def atom(token, ctx, dim):
    if len(token) == 1 and token in VARIABLES and VARIABLES.index(token) < dim:
        return Var(VARIABLES.index(token))
    if token == "e":
        return e
    if token == "pi":
        return pi
    value = Rational.parse(token)
    if value is not None:
        return Const(value)
    if ctx.lookup_function(token) is not None:
        return registered(token, ctx, dim)
    symbol = ctx.lookup_symbol(token)
    if symbol is not None:
        return Const(Rational.from_float(symbol))
    raise UnknownToken(token)
