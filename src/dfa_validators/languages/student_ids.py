"""
Student identifiers paired with a surname.

A pair is valid when the surname starts with an uppercase letter between 'A'
and 'K' and the identifier is even, or the surname starts with a letter between
'L' and 'Z' and the identifier is odd. The parity of the identifier is the
parity of its last digit. Surnames are case-sensitive.

Three layouts are provided: identifier then surname, surname then identifier,
and identifier then surname with optional spaces around and between (where
every word of a multi-word surname must be capitalized, e.g. "Van Dyk").
"""
from enum import Enum

from dfa_validators.dfa import Specification

ANY = Specification.WILDCARD
FIRST_HALF = frozenset("ABCDEFGHIJK")
SECOND_HALF = frozenset("LMNOPQRSTUVWXYZ")


def classify(char: str) -> str:
    if char == ' ':
        return "space"
    if char.isdecimal():
        return "even" if int(char) % 2 == 0 else "odd"
    if char in FIRST_HALF:
        return "A-K"
    if char in SECOND_HALF:
        return "L-Z"
    if char.isupper():
        return "upper"
    return "lower"


def is_letter_or_digit(char: str) -> bool:
    return char.isalpha() or char.isdecimal()


def is_letter_digit_or_space(char: str) -> bool:
    return is_letter_or_digit(char) or char == ' '


LETTERS = {"A-K", "L-Z", "upper", "lower"}
DIGITS = {"even", "odd"}


class IdFirst(Enum):
    INIT = "init"
    EVEN = "even"
    ODD = "odd"
    VALID = "valid"
    NOT_VALID = "not-valid"


ID_FIRST_TRANSITIONS = {
    IdFirst.INIT:      {"even": IdFirst.EVEN, "odd": IdFirst.ODD, ANY: IdFirst.NOT_VALID},
    IdFirst.EVEN:      {"even": IdFirst.EVEN, "odd": IdFirst.ODD, "A-K": IdFirst.VALID, ANY: IdFirst.NOT_VALID},
    IdFirst.ODD:       {"even": IdFirst.EVEN, "odd": IdFirst.ODD, "L-Z": IdFirst.VALID, ANY: IdFirst.NOT_VALID},
    # digits after the surname
    IdFirst.VALID:     {"even": IdFirst.NOT_VALID, "odd": IdFirst.NOT_VALID, ANY: IdFirst.VALID},
    IdFirst.NOT_VALID: {ANY: IdFirst.NOT_VALID},
}


def student_id() -> Specification:
    return Specification(ID_FIRST_TRANSITIONS, IdFirst.INIT,
                         accept_states={IdFirst.VALID},
                         alphabet=is_letter_or_digit,
                         classifier=classify,
                         symbols=DIGITS | LETTERS,
                         name="student-id",
                         description="a student identifier immediately followed by a surname")


class SurnameFirst(Enum):
    INIT = "init"
    SURNAME_A = "surname-a"
    SURNAME_B = "surname-b"
    SURNAME_A_EVEN = "surname-a-even"
    SURNAME_A_ODD = "surname-a-odd"
    SURNAME_B_EVEN = "surname-b-even"
    SURNAME_B_ODD = "surname-b-odd"
    INVALID = "invalid"


S = SurnameFirst
SURNAME_FIRST_TRANSITIONS = {
    S.INIT:           {"A-K": S.SURNAME_A, "L-Z": S.SURNAME_B, ANY: S.INVALID},
    S.SURNAME_A:      {"even": S.SURNAME_A_EVEN, "odd": S.SURNAME_A_ODD, ANY: S.SURNAME_A},
    S.SURNAME_B:      {"even": S.SURNAME_B_EVEN, "odd": S.SURNAME_B_ODD, ANY: S.SURNAME_B},
    # letters after the identifier
    S.SURNAME_A_EVEN: {"even": S.SURNAME_A_EVEN, "odd": S.SURNAME_A_ODD, ANY: S.INVALID},
    S.SURNAME_A_ODD:  {"even": S.SURNAME_A_EVEN, "odd": S.SURNAME_A_ODD, ANY: S.INVALID},
    S.SURNAME_B_EVEN: {"even": S.SURNAME_B_EVEN, "odd": S.SURNAME_B_ODD, ANY: S.INVALID},
    S.SURNAME_B_ODD:  {"even": S.SURNAME_B_EVEN, "odd": S.SURNAME_B_ODD, ANY: S.INVALID},
    S.INVALID:        {ANY: S.INVALID},
}
del S


def student_id_inverse() -> Specification:
    return Specification(SURNAME_FIRST_TRANSITIONS, SurnameFirst.INIT,
                         accept_states={SurnameFirst.SURNAME_A_EVEN, SurnameFirst.SURNAME_B_ODD},
                         alphabet=is_letter_or_digit,
                         classifier=classify,
                         symbols=DIGITS | LETTERS,
                         name="student-id-inverse",
                         description="a surname immediately followed by a student identifier")


class Spaced(Enum):
    INIT_OR_SPACE = "init-or-space"
    EVEN = "even"
    ODD = "odd"
    SPACE_AFTER_EVEN_ID = "space-after-even-id"
    SPACE_AFTER_ODD_ID = "space-after-odd-id"
    VALID = "valid"
    TRAILING_SPACE = "trailing-space"
    NOT_VALID = "not-valid"


S = Spaced
SPACED_TRANSITIONS = {
    S.INIT_OR_SPACE:       {"space": S.INIT_OR_SPACE, "even": S.EVEN, "odd": S.ODD, ANY: S.NOT_VALID},
    S.EVEN:                {"even": S.EVEN, "odd": S.ODD, "A-K": S.VALID, "space": S.SPACE_AFTER_EVEN_ID, ANY: S.NOT_VALID},
    S.ODD:                 {"even": S.EVEN, "odd": S.ODD, "L-Z": S.VALID, "space": S.SPACE_AFTER_ODD_ID, ANY: S.NOT_VALID},
    S.SPACE_AFTER_EVEN_ID: {"space": S.SPACE_AFTER_EVEN_ID, "A-K": S.VALID, ANY: S.NOT_VALID},
    S.SPACE_AFTER_ODD_ID:  {"space": S.SPACE_AFTER_ODD_ID, "L-Z": S.VALID, ANY: S.NOT_VALID},
    S.VALID:               {"even": S.NOT_VALID, "odd": S.NOT_VALID, "space": S.TRAILING_SPACE, ANY: S.VALID},
    # either trailing whitespace, or the next word of the surname
    S.TRAILING_SPACE:      {"space": S.TRAILING_SPACE, "A-K": S.VALID, "L-Z": S.VALID, "upper": S.VALID, ANY: S.NOT_VALID},
    S.NOT_VALID:           {ANY: S.NOT_VALID},
}
del S


def student_id_space() -> Specification:
    return Specification(SPACED_TRANSITIONS, Spaced.INIT_OR_SPACE,
                         accept_states={Spaced.VALID, Spaced.TRAILING_SPACE},
                         alphabet=is_letter_digit_or_space,
                         classifier=classify,
                         symbols=DIGITS | LETTERS | {"space"},
                         name="student-id-space",
                         description="a student identifier and a surname, with optional spaces")
