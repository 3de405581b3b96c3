"""Utilities for constructing and validating an FSM"""

__author__ = "Callum Hynes"
__all__ = ['FSMBuilder']

from typing import Callable, Iterable, Self

from .fsm import FSM
from .fsm_error import (DuplicateTransitionError, EmptyAlphabetError,
                        EmptyFinalStatesError, EmptyStatesError,
                        InitialStateNotInStatesError,
                        MissingInitialStateError, MissingTransitionError,
                        UnknownStateError, UnknownSymbolError)
from .fsmutil import State, Symbol, TransitionGroup, TransitionKey


class FSMBuilder:
    """
    Builder class to incrementally describe and then construct an FSM.
    Each method returns the builder itself so calls can be chained, and
    raises as soon as something invalid is added. Nothing is rolled
    back when an error is raised.

    Usage:
        fsm = FSMBuilder() \\
            .add_states("q0", "q1") \\
            .add_symbols("a", "b") \\
            .set_initial_state("q0") \\
            .add_final_states("q1") \\
            .add_transitions([{("q0", "a"): "q1", ("q0", "b"): "q0"},
                              {("q1", "a"): "q1", ("q1", "b"): "q0"}]) \\
            .build()
    """
    if __debug__:
        # Function for debugging
        _debug_function: Callable[['FSMBuilder', str], None]\
            = lambda *_: None
        """
        A function which gets called after each step of the building
        process, in order to allow logging of certain events.

        Arguments:
            builder -- The FSMBuilder object, in it's current state.
            msg -- A debug message explaining what is happening.
        """

    def _debug(self, msg: str):
        """
        Call the debugging function.

        Arguments:
            msg -- Description of why the function was called, or
                what is happening at the current point in time.
        """
        if __debug__:
            FSMBuilder._debug_function(self, msg)

    # dicts are used as insertion-ordered sets, so that validation
    # always reports the same error for the same sequence of calls

    _states: dict[State, None]
    """Q, the states added so far"""

    _alphabet: dict[Symbol, None]
    """Σ, the symbols added so far"""

    _initial_state: State | None
    """q0, the initial state, if it has been set"""

    _final_states: dict[State, None]
    """F, the accepting states added so far"""

    _transitions: dict[TransitionKey, State]
    """δ, the transitions added so far"""

    def __init__(self) -> None:
        """Creates an empty builder."""
        self._states = {}
        self._alphabet = {}
        self._initial_state = None
        self._final_states = {}
        self._transitions = {}

    @property
    def states(self) -> set[State]:
        """Copy of the states added so far"""
        return set(self._states)

    @property
    def alphabet(self) -> set[Symbol]:
        """Copy of the symbols added so far"""
        return set(self._alphabet)

    @property
    def initial_state(self) -> State | None:
        """The initial state, or None if not set yet"""
        return self._initial_state

    @property
    def final_states(self) -> set[State]:
        """Copy of the final states added so far"""
        return set(self._final_states)

    @property
    def transitions(self) -> dict[TransitionKey, State]:
        """Copy of the transitions added so far"""
        return dict(self._transitions)

    def add_states(self, *states: str) -> Self:
        """
        Adds states to the state set. Adding a state twice does
        nothing.

        Returns:
            The current instance
        """
        for state in states:
            self._states[State(state)] = None
        return self

    def add_symbols(self, *symbols: str) -> Self:
        """
        Adds symbols to the alphabet. Adding a symbol twice does
        nothing.

        Returns:
            The current instance
        """
        for symbol in symbols:
            self._alphabet[Symbol(symbol)] = None
        return self

    def set_initial_state(self, state: str) -> Self:
        """
        Sets the initial state, replacing any previous one.

        Arguments:
            state -- The initial state, must already be in the state set

        Returns:
            The current instance

        Raises:
            UnknownStateError: If the state is not in the state set
        """
        if state not in self._states:
            raise UnknownStateError(State(state))
        self._initial_state = State(state)
        self._debug(f"initial state set to {state}")
        return self

    def add_final_states(self, *states: str) -> Self:
        """
        Adds states to the set of final states. If one of the states is
        unknown, the states before it will still have been added.

        Returns:
            The current instance

        Raises:
            UnknownStateError: If any state is not in the state set
        """
        for state in states:
            if state not in self._states:
                raise UnknownStateError(State(state))
            self._final_states[State(state)] = None
        return self

    def add_transition(self, state: str, symbol: str,
                       next_state: str) -> Self:
        """
        Defines δ(state, symbol) = next_state.

        Arguments:
            state -- The state the transition leaves from
            symbol -- The symbol consumed by the transition
            next_state -- The state the transition leads to

        Returns:
            The current instance

        Raises:
            UnknownStateError: If either state is not in the state set
            UnknownSymbolError: If the symbol is not in the alphabet
            DuplicateTransitionError: If δ(state, symbol) is already
                defined
        """
        if state not in self._states:
            raise UnknownStateError(State(state))
        if next_state not in self._states:
            raise UnknownStateError(State(next_state), role="next state")
        if symbol not in self._alphabet:
            raise UnknownSymbolError(Symbol(symbol))
        key = TransitionKey(State(state), Symbol(symbol))
        if key in self._transitions:
            raise DuplicateTransitionError(key)
        self._transitions[key] = State(next_state)
        return self

    def add_transitions(self, batch: Iterable[TransitionGroup]) -> Self:
        """
        Adds each transition from each group in turn, see
        add_transition(). Stops at the first invalid transition, the
        transitions before it will still have been added.

        Arguments:
            batch -- The groups of transitions to add, in order

        Returns:
            The current instance

        Raises:
            UnknownStateError: see add_transition()
            UnknownSymbolError: see add_transition()
            DuplicateTransitionError: see add_transition()
        """
        for group in batch:
            for (state, symbol), next_state in group.items():
                self.add_transition(state, symbol, next_state)
        return self

    def build(self) -> FSM:
        """
        Validates the description and creates the FSM from it. The
        builder is left untouched, and can be inspected or built again.

        Returns:
            A new FSM, in its initial state

        Raises:
            EmptyStatesError: If there are no states
            EmptyAlphabetError: If there are no symbols
            MissingInitialStateError: If the initial state was not set
            EmptyFinalStatesError: If there are no final states
            InitialStateNotInStatesError: If the initial state is not
                in the state set
            MissingTransitionError: If the transition function is not
                total
        """
        # Cheap structural checks first, before the full scan of δ
        if not self._states:
            raise EmptyStatesError()
        if not self._alphabet:
            raise EmptyAlphabetError()
        # An empty label counts as no initial state
        if not self._initial_state:
            raise MissingInitialStateError()
        if not self._final_states:
            raise EmptyFinalStatesError()
        # Also checked by set_initial_state(), but the state set may
        # have changed since
        if self._initial_state not in self._states:
            raise InitialStateNotInStatesError(self._initial_state)
        for state in self._states:
            for symbol in self._alphabet:
                key = TransitionKey(state, symbol)
                if key not in self._transitions:
                    raise MissingTransitionError(key)
        result = FSM(self._states, self._alphabet, self._initial_state,
                     self._final_states, self._transitions)
        self._debug("built FSM")
        return result
