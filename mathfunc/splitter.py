from dataclasses import dataclass
from enum import Enum
from typing import Optional

OPENING   = "([{"
CLOSING   = ")]}"
OPERATORS = "+-*/^"
VARIABLES = "xyz"

class ParsingError(Exception):
    pass

class UnknownToken(ParsingError):
    def __init__(self, token):
        super().__init__(f"Token: {token} is not valid")
        self.token = token

class MismatchedParenthesis(ParsingError):
    def __init__(self):
        super().__init__("Mismatched Parenthesis")

class EmptyInput(ParsingError):
    def __init__(self):
        super().__init__("Input is empty")

class InvalidInput(ParsingError):
    def __init__(self):
        super().__init__("Invalid input")

class DimensionMismatch(ParsingError):
    def __init__(self, name):
        super().__init__(f"Can't use {name} in a lower dimension function")
        self.name = name

class Op(Enum):
    ADD  = "+"
    SUB  = "-"
    MUL  = "*"
    DIV  = "/"
    POW  = "^"
    COMP = "("

    # Lower binds tighter; the loosest operator at depth 0 becomes the split.
    @property
    def priority(self):
        return PRIORITY[self]

PRIORITY = {Op.ADD: 4, Op.SUB: 4, Op.MUL: 3, Op.DIV: 3, Op.POW: 2, Op.COMP: 1}

@dataclass
class Split:
    first    : str
    second   : Optional[str]
    operator : Op

    def update(self, text, first_idx, second_idx, op):
        if op.priority < self.operator.priority:
            return
        if first_idx == 0 and op is Op.SUB:
            self.first = unwrap(text[1:])
            self.second = None
        else:
            end = len(text) - 1 if op is Op.COMP else len(text)
            self.first = unwrap(text[:first_idx])
            self.second = unwrap(text[second_idx:end])
        self.operator = op

def split(text):
    if not text:
        raise EmptyInput()
    depth = 0
    result = Split(text, None, Op.COMP)
    for i, ch in enumerate(text):
        if ch in CLOSING:
            depth -= 1
            if depth < 0:
                raise MismatchedParenthesis()
        if depth == 0:
            if ch in OPENING:
                result.update(text, i, i+1, Op.COMP)
            elif ch in OPERATORS:
                result.update(text, i, i+1, Op(ch))
            elif i+1 < len(text) and ends_atom(text, i) and starts_atom(text[i+1]):
                result.update(text, i+1, i+1, Op.MUL)
        if ch in OPENING:
            depth += 1
    if depth != 0:
        raise MismatchedParenthesis()
    return result

def ends_atom(text, i):
    ch = text[i]
    return ch.isdigit() or ch in CLOSING or is_variable(text, i)

def starts_atom(ch):
    return not ch.isdigit() and ch != "." and ch not in OPERATORS

def is_variable(text, i):
    # "xyz" is x*y*z but the y in "myFunc" belongs to the name.
    if text[i] not in VARIABLES:
        return False
    while i >= 0 and text[i] in VARIABLES:
        i -= 1
    return i < 0 or not text[i].isalpha()

def unwrap(text):
    if not text or text[0] not in OPENING:
        return text
    depth = 0
    for i, ch in enumerate(text):
        if ch in OPENING:
            depth += 1
        elif ch in CLOSING:
            depth -= 1
        if depth == 0 and i != len(text) - 1:
            return text
    if len(text) > 1:
        return text[1:-1]
    return text
