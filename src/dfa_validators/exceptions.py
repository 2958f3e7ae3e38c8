"""
Errors raised for misuse of the automaton engine.

Malformed input strings are never errors: they end in an `AlphabetViolation`
verdict. These exceptions signal programming mistakes in building or invoking
a specification.
"""


class AutomatonError(Exception):
    pass


class IncompleteTransitionsError(AutomatonError, ValueError):
    """ The transition table is not total over the declared symbols, or names unknown states. """


class MissingContextError(AutomatonError, ValueError):
    """ A context-aware specification was scanned without its auxiliary context. """


class UnknownLanguageError(AutomatonError, KeyError):
    def __init__(self, name, available):
        self.name = name
        self.available = sorted(available)
        super().__init__(name)

    def __str__(self):
        return f"unknown language {self.name!r}; available: {', '.join(self.available)}"
