"""
Outcomes of scanning an input with a `Specification`.

A scan ends in exactly one of three verdicts: `Accepted`, `Rejected`, or
`AlphabetViolation` carrying the index and the offending character.
"""
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Accepted:
    accepted = True

    def __str__(self):
        return "valid"


@dataclass(frozen=True)
class Rejected:
    accepted = False

    def __str__(self):
        return "not valid"


@dataclass(frozen=True)
class AlphabetViolation:
    """ The first character outside the automaton's alphabet; scanning stopped at `index`. """
    index: int
    character: str

    accepted = False

    def __str__(self):
        return f"invalid character {self.character!r} at index {self.index}"


ACCEPTED = Accepted()
REJECTED = Rejected()

Verdict = Union[Accepted, Rejected, AlphabetViolation]
