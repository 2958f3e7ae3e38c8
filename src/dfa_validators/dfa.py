from typing import Iterable, Tuple, Any, Union, Dict, Optional, Callable, Container, Hashable
from collections.abc import Mapping
from types import MappingProxyType

from dfa_validators.exceptions import IncompleteTransitionsError, MissingContextError
from dfa_validators.verdicts import Verdict, ACCEPTED, REJECTED, AlphabetViolation

State = Hashable
Symbol = Hashable
Transitions = Dict[State, Dict[Symbol, State]]
AlphabetTest = Union[Callable[[str], bool], Container[str]]


class Run():
    """
    A "running automaton" object - keeps current state and position along with wrapping the Specification.

    Custom per-scan behaviour (e.g. classifying characters against an auxiliary context) is achieved by
     extending this class and installing the subclass with `Specification.set_run_factory`.
     A Run may only keep bounded data besides the state; the position is the sole index into the input.
    """
    def __init__(self, spec: 'Specification', context: Any = None) -> None:
        self.spec = spec
        self.context = context
        self.current_state = spec.s0
        self.position = 0

    def __call__(self, input: str) -> Verdict:
        """
        Run the automaton over the whole `input`, starting from the current state.
        Returns `ACCEPTED` or `REJECTED` after consuming every character, or an `AlphabetViolation`
         for the first character outside the alphabet (the rest of the input is not scanned).
        """
        if not self.admits(input):
            return REJECTED
        for char in input:
            if not self.step(char):
                return AlphabetViolation(self.position, char)
        return ACCEPTED if self.spec.is_accepting(self.current_state) else REJECTED

    def admits(self, input: str) -> bool:
        " Precondition on the whole input; override for comparison-based automata. "
        return True

    def symbol_for(self, char: str) -> Symbol:
        " Override this method to classify characters using the run context. "
        return self.spec.classify(char)

    def step(self, char: str) -> bool:
        """
        Move one step on the automaton.
        Assume automaton is in `self.current_state`, and try to consume `char`.
        Returns False iff `char` is outside the alphabet; the state is then left unchanged.
        """
        if not self.spec.in_alphabet(char):
            return False
        self.current_state = self.spec.next_state(self.current_state, self.symbol_for(char))
        self.position += 1
        return True

    def __repr__(self):
        return f"@state: {repr(self.current_state)}, position: {self.position}"


class Specification(Mapping):
    """
    Deterministic Finite Automaton specification.
    Defined as a read-only mapping, referring to the automaton's `transitions`.
    Transition info is in the shape: Dict[State, Dict[Symbol, State]], where symbols are
     produced from input characters by `classifier` (identity by default).

    Notice it is a DFA and not an NFA because internal dictionaries can only have one value (target state) per key (symbol).
    """
    WILDCARD: Symbol = "***@Wild-Card@***" # one can use Specification.WILDCARD as a row's fallback for every other symbol
    def __init__(self,
                 transitions: Transitions,
                 s0: State,
                 accept_states: Iterable[State],
                 alphabet: Optional[AlphabetTest] = None,
                 classifier: Optional[Callable[[str], Symbol]] = None,
                 symbols: Optional[Iterable[Symbol]] = None,
                 requires_context: bool = False,
                 name: Optional[str] = None,
                 description: str = ""):
        self.data = MappingProxyType({state: MappingProxyType(dict(row))
                                      for state, row in transitions.items()})
        self.s0 = s0
        self.states = frozenset(transitions.keys() | {target_state
                                                      for row in transitions.values()
                                                      for target_state in row.values()})
        self.accept_states = frozenset(accept_states)
        # declared symbols: all explicit transition keys, unless specified
        if symbols is None:
            symbols = {symbol for row in transitions.values() for symbol in row} - {Specification.WILDCARD}
        self.symbols = frozenset(symbols)
        self._alphabet = alphabet
        self._classifier = classifier
        self.requires_context = requires_context
        self.name = name
        self.description = description
        # run factory - so that it would be easy to replace the default `Run` class with a subclass having custom behavior
        self._run_factory = Run
        self._check_total()

    def _check_total(self):
        if self.s0 not in self.states:
            raise IncompleteTransitionsError(f"initial state {self.s0!r} is not a state of {self.name or 'the automaton'}")
        unknown_accept_states = self.accept_states - self.states
        if unknown_accept_states:
            raise IncompleteTransitionsError(f"accept states {sorted(map(repr, unknown_accept_states))} are not states")
        required_symbols = set(self.symbols)
        # a finite alphabet is classified up front, so every character has a row entry
        if self._alphabet is not None and not callable(self._alphabet):
            required_symbols.update(self.classify(char) for char in self._alphabet)
        for state in self.states:
            row = self.data.get(state, {})
            if Specification.WILDCARD in row:
                continue
            missing = [symbol for symbol in required_symbols if symbol not in row]
            if missing:
                raise IncompleteTransitionsError(
                    f"no transition from {state!r} for symbols {sorted(map(repr, missing))}")

    def __getitem__(self, state: State) -> Mapping:
        return self.data[state]

    def __iter__(self):
        return iter(self.data)

    def __len__(self):
        return len(self.data)

    def copy(self, **overrides) -> 'Specification':
        kwargs = dict(transitions={state: dict(row) for state, row in self.data.items()},
                      s0=self.s0,
                      accept_states=self.accept_states,
                      alphabet=self._alphabet,
                      classifier=self._classifier,
                      symbols=self.symbols,
                      requires_context=self.requires_context,
                      name=self.name,
                      description=self.description)
        kwargs.update(overrides)
        _copy = Specification(**kwargs)
        _copy._run_factory = self._run_factory
        return _copy

    def complement(self, name: Optional[str] = None, description: str = "") -> 'Specification':
        """
        Return a copy of the automaton accepting exactly the strings this one rejects
         (over the same alphabet), by swapping accepting and non-accepting states.
        """
        return self.copy(accept_states=self.states - self.accept_states,
                         name=name,
                         description=description)

    def in_alphabet(self, char: str) -> bool:
        if self._alphabet is None:
            return self.classify(char) in self.symbols
        if callable(self._alphabet):
            return self._alphabet(char)
        return char in self._alphabet

    def classify(self, char: str) -> Symbol:
        if self._classifier is None:
            return char
        return self._classifier(char)

    def is_accepting(self, state: State) -> bool:
        return state in self.accept_states

    def next_state(self, current_state: State, symbol: Symbol) -> State:
        row = self.data.get(current_state, {})
        if symbol in row:
            return row[symbol]
        if Specification.WILDCARD in row:
            return row[Specification.WILDCARD]
        raise IncompleteTransitionsError(f"no transition from {current_state!r} for symbol {symbol!r}")

    def step(self, current_state: State, char: str, context: Any = None, position: int = 0) -> Tuple[bool, State]:
        """
        Compute one step on the automaton.
        Assume automaton is in `current_state`, and try to consume `char` found at index `position` of the input
         (context-aware runs classify characters by their position).
        Returns: (success, end_state), where `success` is False iff `char` is outside the alphabet.
        """
        run = self.run(context)
        run.current_state = current_state
        run.position = position
        success = run.step(char)
        return success, run.current_state

    def set_run_factory(self, run_factory: Callable[..., Run]):
        assert isinstance(run_factory(self), Run), "new run class must be a subclass of `Run`"
        self._run_factory = run_factory

    def run(self, context: Any = None) -> Run:
        if self.requires_context and context is None:
            raise MissingContextError(f"{self.name or 'automaton'} requires an auxiliary context to scan")
        return self._run_factory(self, context)

    def __call__(self, input: str, context: Any = None) -> Verdict:
        return scan(self, input, context)

    # identity semantics, so specifications can be used as keys
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __repr__(self):
        return (f"Specification({self.name or ''}: {len(self.states)} states, "
                f"s0={self.s0!r}, accept={sorted(map(repr, self.accept_states))})")


def scan(spec: Specification, input: str, context: Any = None) -> Verdict:
    """
    Drive `spec` over `input` to a verdict.
    A fresh `Run` is created per call, so concurrent scans against the same specification never interfere.
    The empty string is evaluated by checking whether the initial state is accepting.
    """
    return spec.run(context)(input)
