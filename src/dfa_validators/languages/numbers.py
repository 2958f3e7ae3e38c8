"""
Floating point constants with optional sign and exponent.

A constant has two segments. The first is a sequence of digits, optionally
preceded by a sign and optionally followed by a decimal point and at least one
more digit. The second is optional: the letter 'e' followed by a sequence with
the same shape as the first. In both segments the decimal point need not be
preceded by digits ("+.5", "1e.5").
"""
from enum import Enum

from dfa_validators.dfa import Specification

SIGNS = "+-"


class States(Enum):
    INIT = "init"
    SIGN = "sign"
    INTEGRAL_PART = "integral-part"
    DECIMAL_POINT = "decimal-point"
    DECIMAL_PART = "decimal-part"
    EXP = "exp"
    EXP_SIGN = "exp-sign"
    EXP_INTEGRAL_PART = "exp-integral-part"
    EXP_DECIMAL_POINT = "exp-decimal-point"
    EXP_DECIMAL_PART = "exp-decimal-part"
    INVALID = "invalid"


def classify(char: str) -> str:
    if char.isdecimal():
        return "digit"
    if char in SIGNS:
        return "sign"
    return char    # '.' and 'e' are their own class


def is_float_char(char: str) -> bool:
    return char.isdecimal() or char in SIGNS or char in ".e"


ANY = Specification.WILDCARD
TRANSITIONS = {
    States.INIT:              {"sign": States.SIGN, "digit": States.INTEGRAL_PART, '.': States.DECIMAL_POINT, ANY: States.INVALID},
    States.SIGN:              {"digit": States.INTEGRAL_PART, '.': States.DECIMAL_POINT, ANY: States.INVALID},
    States.INTEGRAL_PART:     {"digit": States.INTEGRAL_PART, '.': States.DECIMAL_POINT, 'e': States.EXP, "sign": States.INVALID},
    States.DECIMAL_POINT:     {"digit": States.DECIMAL_PART, ANY: States.INVALID},
    States.DECIMAL_PART:      {"digit": States.DECIMAL_PART, 'e': States.EXP, ANY: States.INVALID},
    States.EXP:               {"sign": States.EXP_SIGN, "digit": States.EXP_INTEGRAL_PART, '.': States.EXP_DECIMAL_POINT, ANY: States.INVALID},
    States.EXP_SIGN:          {"digit": States.EXP_INTEGRAL_PART, '.': States.EXP_DECIMAL_POINT, ANY: States.INVALID},
    States.EXP_INTEGRAL_PART: {"digit": States.EXP_INTEGRAL_PART, '.': States.EXP_DECIMAL_POINT, ANY: States.INVALID},
    States.EXP_DECIMAL_POINT: {"digit": States.EXP_DECIMAL_PART, ANY: States.INVALID},
    States.EXP_DECIMAL_PART:  {"digit": States.EXP_DECIMAL_PART, ANY: States.INVALID},
    States.INVALID:           {ANY: States.INVALID},
}


def floating_point() -> Specification:
    return Specification(TRANSITIONS, States.INIT,
                         accept_states={States.INTEGRAL_PART, States.DECIMAL_PART,
                                        States.EXP_INTEGRAL_PART, States.EXP_DECIMAL_PART},
                         alphabet=is_float_char,
                         classifier=classify,
                         symbols={"digit", "sign", '.', 'e'},
                         name="floating-point",
                         description="a floating point constant with optional sign and exponent")
