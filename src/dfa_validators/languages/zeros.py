"""
Strings over {0, 1} with (or without) three consecutive '0' characters.
"""
from enum import Enum

from dfa_validators.dfa import Specification


class States(Enum):
    NOT_FOUND = 0
    FOUND_ONE = 1
    FOUND_TWO = 2
    FOUND_THREE = 3


TRANSITIONS = {
    States.NOT_FOUND:   {'0': States.FOUND_ONE,   '1': States.NOT_FOUND},
    States.FOUND_ONE:   {'0': States.FOUND_TWO,   '1': States.NOT_FOUND},
    States.FOUND_TWO:   {'0': States.FOUND_THREE, '1': States.NOT_FOUND},
    States.FOUND_THREE: {Specification.WILDCARD: States.FOUND_THREE},
}


def three_zeros() -> Specification:
    return Specification(TRANSITIONS, States.NOT_FOUND,
                         accept_states={States.FOUND_THREE},
                         symbols={'0', '1'},
                         name="three-zeros",
                         description="contains three consecutive '0' characters")


def not_three_zeros() -> Specification:
    return three_zeros().complement(name="not-three-zeros",
                                    description="does not contain three consecutive '0' characters")
