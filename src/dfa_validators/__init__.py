from dfa_validators.dfa import Run, Specification, scan
from dfa_validators.exceptions import (
    AutomatonError,
    IncompleteTransitionsError,
    MissingContextError,
    UnknownLanguageError,
)
from dfa_validators.verdicts import ACCEPTED, REJECTED, Accepted, AlphabetViolation, Rejected, Verdict
