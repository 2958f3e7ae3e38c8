"""
A name with at most one character replaced.

The input is compared position by position with a reference name supplied as
the scan context. The comparison is case-sensitive, and only replacements are
allowed: an input whose length differs from the reference is rejected.
"""
from enum import Enum

from dfa_validators.dfa import Run, Specification


class States(Enum):
    VALID = "valid"
    REPLACEMENT_OCCURRED = "replacement-occurred"
    INVALID = "invalid"


TRANSITIONS = {
    States.VALID:                {"match": States.VALID,                "mismatch": States.REPLACEMENT_OCCURRED,
                                  "past-end": States.INVALID},
    States.REPLACEMENT_OCCURRED: {"match": States.REPLACEMENT_OCCURRED, "mismatch": States.INVALID,
                                  "past-end": States.INVALID},
    States.INVALID:              {Specification.WILDCARD: States.INVALID},
}


class ReferenceComparisonRun(Run):
    """
    Classifies every character as "match" or "mismatch" against the character at the same
     position of the reference string held in `self.context`.
    Characters beyond the end of the reference are "past-end", which is never accepted.
    """
    def admits(self, input: str) -> bool:
        return len(input) == len(self.context)

    def symbol_for(self, char: str) -> str:
        if self.position >= len(self.context):
            return "past-end"
        return "match" if char == self.context[self.position] else "mismatch"


def any_character(char: str) -> bool:
    return True


def name_minus_one() -> Specification:
    spec = Specification(TRANSITIONS, States.VALID,
                         accept_states={States.VALID, States.REPLACEMENT_OCCURRED},
                         alphabet=any_character,
                         requires_context=True,
                         name="name-minus-one",
                         description="the reference name with at most one character replaced")
    spec.set_run_factory(ReferenceComparisonRun)
    return spec
