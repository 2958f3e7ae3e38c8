"""
Strings over {a, b} with at least one 'a' among the last three characters.
"""
from enum import Enum

from dfa_validators.dfa import Specification


class States(Enum):
    INIT = "init"
    A_1 = "a-last"            # last character is 'a'
    A_2 = "a-second-to-last"
    A_3 = "a-third-to-last"
    INVALID = "invalid"


TRANSITIONS = {
    States.INIT:    {'a': States.A_1, 'b': States.INVALID},
    States.A_1:     {'a': States.A_1, 'b': States.A_2},
    States.A_2:     {'a': States.A_1, 'b': States.A_3},
    States.A_3:     {'a': States.A_1, 'b': States.INVALID},
    States.INVALID: {'a': States.A_1, 'b': States.INVALID},
}


def last_three_a() -> Specification:
    return Specification(TRANSITIONS, States.INIT,
                         accept_states={States.A_1, States.A_2, States.A_3},
                         name="last-three-a",
                         description="one of the last three characters of a string over {a, b} is 'a'")
