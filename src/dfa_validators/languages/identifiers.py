"""
Java-style identifiers.

A valid identifier is a non-empty sequence of letters, digits and '_' that does
not start with a digit and is not made only of '_' characters. Any letter or
digit following a leading run of underscores makes the identifier valid.
"""
from enum import Enum

from dfa_validators.dfa import Specification


class States(Enum):
    EMPTY_STRING = "empty"
    FIRST_DIGIT = "first-digit"
    UNDERSCORE_PREFIX = "underscore-prefix"
    VALID_ID = "valid"


def is_identifier_char(char: str) -> bool:
    return char.isalpha() or char.isdecimal() or char == '_'


def classify(char: str) -> str:
    if char == '_':
        return '_'
    if char.isdecimal():
        return "digit"
    return "letter"


TRANSITIONS = {
    States.EMPTY_STRING:      {'_': States.UNDERSCORE_PREFIX, "digit": States.FIRST_DIGIT, "letter": States.VALID_ID},
    States.UNDERSCORE_PREFIX: {'_': States.UNDERSCORE_PREFIX, "digit": States.VALID_ID,    "letter": States.VALID_ID},
    States.FIRST_DIGIT:       {Specification.WILDCARD: States.FIRST_DIGIT},
    States.VALID_ID:          {Specification.WILDCARD: States.VALID_ID},
}


def java_identifier() -> Specification:
    return Specification(TRANSITIONS, States.EMPTY_STRING,
                         accept_states={States.VALID_ID},
                         alphabet=is_identifier_char,
                         classifier=classify,
                         name="java-identifier",
                         description="a Java identifier: letters, digits and '_', no leading digit, not only '_'")
