"""Main FSM class for running deterministic finite automata"""

__author__ = "Callum Hynes"
__all__ = ["FSM"]

import copy
from typing import Any, Callable, Iterable, Mapping

try:
    import numpy as np
except ImportError as e:
    e.add_note("fsmbuilder requires numpy: `pip install numpy`")
    raise e  # raise to user

from .fsm_error import (TransitionUndefinedError, UnknownStateError,
                        UnknownSymbolError)
from .fsmutil import State, Symbol, TransitionKey, symbols_of


_UNDEFINED = -1
"""Marker in the transition table for a (state, symbol) with no move"""


class FSM:
    """
    Represents a deterministic finite automaton (Q, Σ, q0, F, δ), along
    with the state it is currently in. Everything except the current
    state is frozen once constructed.

    Use FSMBuilder to construct an FSM which is guaranteed to have a
    total transition function. Constructing an FSM directly (e.g. when
    restoring one from an untrusted source) only checks that every label
    referenced is known.
    """
    if __debug__:
        # Function for debugging
        _debug_function: Callable[['FSM', str], None]\
            = lambda *_: None
        """
        A function which gets called whenever the FSM changes state, in
        order to allow tracing of the execution.

        Arguments:
            fsm -- The FSM object, in it's current state.
            msg -- A debug message explaining what is happening.
        """

    def _debug(self, msg: str):
        """
        Call the debugging function.

        Arguments:
            msg -- Description of what is happening at the current point
                in time.
        """
        if __debug__:
            FSM._debug_function(self, msg)

    _states: tuple[State, ...]
    """All states, in the order of the rows of {_table}"""

    _alphabet: tuple[Symbol, ...]
    """All symbols, in the order of the columns of {_table}"""

    _state_index: dict[State, int]
    """Maps each state to its row in {_table}"""

    _symbol_index: dict[Symbol, int]
    """Maps each symbol to its column in {_table}"""

    _final_states: frozenset[State]
    """The set of accepting states"""

    # pylint: disable-next=no-member, unsubscriptable-object
    _accepting: np.ndarray[Any, np.dtype[np.bool_]]
    """Whether each state (by row index) is accepting"""

    # pylint: disable-next=no-member, unsubscriptable-object
    _table: np.ndarray[Any, np.dtype[np.intp]]
    """
    The transition function as a read-only 2D array (matrix), so that
    _table[q, a] is the index of the state reached from state q on
    symbol a, or -1 if there is no such transition.
    """

    _initial: int
    """The index of the initial state"""

    _current: int
    """The index of the current state"""

    def __init__(self,
                 states: Iterable[str],
                 alphabet: Iterable[str],
                 initial_state: str,
                 final_states: Iterable[str],
                 transitions: Mapping[TransitionKey | tuple[str, str],
                                      str]) -> None:
        """
        Creates an FSM from its 5-tuple description. Note that the
        transition function is NOT checked to be total, see
        FSMBuilder.build() for that.

        Arguments:
            states -- The states of the FSM
            alphabet -- The input symbols of the FSM
            initial_state -- The state to start in
            final_states -- The accepting states
            transitions -- Mapping of (state, symbol) pairs to the next
                state

        Raises:
            UnknownStateError: If any state referenced is not in
                {states}
            UnknownSymbolError: If any transition consumes a symbol not
                in {alphabet}
        """
        # dict.fromkeys() removes duplicates but keeps order
        self._states = tuple(dict.fromkeys(map(State, states)))
        self._alphabet = tuple(dict.fromkeys(map(Symbol, alphabet)))
        self._state_index = {state: idx
                             for idx, state in enumerate(self._states)}
        self._symbol_index = {symbol: idx
                              for idx, symbol in enumerate(self._alphabet)}

        if initial_state not in self._state_index:
            raise UnknownStateError(State(initial_state),
                                    role="initial state")
        self._initial = self._state_index[State(initial_state)]

        final = frozenset(map(State, final_states))
        for state in final:
            if state not in self._state_index:
                raise UnknownStateError(state, role="final state")
        self._final_states = final
        self._accepting = np.array(
            [state in final for state in self._states], dtype=np.bool_)
        self._accepting.flags.writeable = False

        table = np.full((len(self._states), len(self._alphabet)),
                        _UNDEFINED, dtype=np.intp)
        for (state, symbol), next_state in transitions.items():
            if state not in self._state_index:
                raise UnknownStateError(State(state))
            if next_state not in self._state_index:
                raise UnknownStateError(State(next_state),
                                        role="next state")
            if symbol not in self._symbol_index:
                raise UnknownSymbolError(Symbol(symbol))
            table[self._state_index[State(state)],
                  self._symbol_index[Symbol(symbol)]]\
                = self._state_index[State(next_state)]
        # Freeze, only the current state may change from here on
        table.flags.writeable = False
        self._table = table

        self._current = self._initial

    @property
    def initial_state(self) -> State:
        """The state the FSM starts in"""
        return self._states[self._initial]

    @property
    def current_state(self) -> State:
        """The state the FSM is currently in"""
        return self._states[self._current]

    @property
    def transition_table(self) -> np.ndarray:
        """
        Read-only matrix of the transition function, indexed by the
        positions of states and symbols in {_states} and {_alphabet}
        """
        return self._table

    @property
    def transitions(self) -> dict[TransitionKey, State]:
        """Copy of the transition function as a mapping"""
        result: dict[TransitionKey, State] = {}
        it = np.nditer(self._table, flags=['multi_index'])
        for target in it:
            if target < 0:
                continue
            row, col = it.multi_index
            result[TransitionKey(self._states[row],
                                 self._alphabet[col])]\
                = self._states[int(target)]
        return result

    def reset(self) -> None:
        """Return the FSM to its initial state."""
        self._current = self._initial
        self._debug("reset")

    def step(self, symbol: str) -> None:
        """
        Consume a single symbol, moving to the next state.

        Arguments:
            symbol -- The symbol to consume

        Raises:
            UnknownSymbolError: If the symbol is not in the alphabet
            TransitionUndefinedError: If there is no transition from
                the current state on the symbol
        """
        col = self._symbol_index.get(Symbol(symbol))
        if col is None:
            raise UnknownSymbolError(Symbol(symbol))
        next_idx = int(self._table[self._current, col])
        if next_idx == _UNDEFINED:
            raise TransitionUndefinedError(
                TransitionKey(self.current_state, Symbol(symbol)))
        if __debug__:
            self._debug(f"{self.current_state} --{symbol}--> "
                        f"{self._states[next_idx]}")
        self._current = next_idx

    def process_string(self, value: str | Iterable[str]) -> None:
        """
        Consume each symbol of the input in turn, continuing from the
        current state. Stops at the first error, leaving the FSM in
        whatever state it had reached.

        Arguments:
            value -- The input, either a str (one symbol per char) or a
                sequence of symbols

        Raises:
            UnknownSymbolError: see step()
            TransitionUndefinedError: see step()
        """
        for symbol in symbols_of(value):
            self.step(symbol)

    def is_final_state(self) -> bool:
        """
        Returns:
            Whether the current state is an accepting state.
        """
        return bool(self._accepting[self._current])

    def process_input(self, value: str | Iterable[str]) -> bool:
        """
        Run the FSM on the whole input, starting from the initial state.

        Arguments:
            value -- The input, either a str (one symbol per char) or a
                sequence of symbols

        Returns:
            Whether the FSM accepts the input.

        Raises:
            UnknownSymbolError: see step()
            TransitionUndefinedError: see step()
        """
        self.reset()
        self.process_string(value)
        return self.is_final_state()
    accepts = process_input

    def get_states(self) -> set[State]:
        """
        Returns:
            A copy of the set of states.
        """
        return set(self._states)

    def get_alphabet(self) -> set[Symbol]:
        """
        Returns:
            A copy of the alphabet.
        """
        return set(self._alphabet)

    def get_final_states(self) -> set[State]:
        """
        Returns:
            A copy of the set of final states.
        """
        return set(self._final_states)

    def copy(self) -> 'FSM':
        """
        Creates a clone of the current FSM, with its own current state.
        The frozen parts are shared.

        Returns:
            A new FSM instance identical to this one.
        """
        return copy.copy(self)

    def __str__(self) -> str:
        """
        Creates pretty-printable representation of the transition table,
        useful for debugging. The initial state is marked with `->`,
        final states with `*` and the current state with `@`.

        Returns:
            The formatted string.
        """
        width = max((len(str(label))
                     for label in (*self._states, *self._alphabet)),
                    default=1)
        lines = [" " * 4 + " | ".join(
            f"{str(symbol):^{width}}" for symbol in ("", *self._alphabet))]
        for idx, state in enumerate(self._states):
            marks = (("->" if idx == self._initial else "  ")
                     + ("*" if self._accepting[idx] else " ")
                     + ("@" if idx == self._current else " "))
            cells = ["-" if target == _UNDEFINED
                     else self._states[target]
                     for target in self._table[idx]]
            lines.append(marks + " | ".join(
                f"{str(cell):^{width}}" for cell in (state, *cells)))
        return "\n".join(lines)
