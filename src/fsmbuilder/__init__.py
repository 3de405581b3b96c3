"""
Library for building and running deterministic finite automata (DFA),
described by their 5-tuple (Q, Σ, q0, F, δ)

Usage:
    fsm = FSMBuilder().add_states("even", "odd").add_symbols("1") \\
        .set_initial_state("even").add_final_states("even") \\
        .add_transition("even", "1", "odd") \\
        .add_transition("odd", "1", "even").build()
    fsm.process_input("1111") # True
"""

__author__ = "Callum Hynes"
__all__ = ["FSM", "FSMBuilder", "State", "Symbol", "TransitionKey",
           "FSMError", "FSMBuildError", "UnknownStateError",
           "UnknownSymbolError", "DuplicateTransitionError",
           "EmptyStatesError", "EmptyAlphabetError",
           "MissingInitialStateError", "EmptyFinalStatesError",
           "InitialStateNotInStatesError", "MissingTransitionError",
           "TransitionUndefinedError"]
__version__ = "0.0.1"

from .fsm import FSM
from .fsm_builder import FSMBuilder
from .fsm_error import (DuplicateTransitionError, EmptyAlphabetError,
                        EmptyFinalStatesError, EmptyStatesError,
                        FSMBuildError, FSMError,
                        InitialStateNotInStatesError,
                        MissingInitialStateError, MissingTransitionError,
                        TransitionUndefinedError, UnknownStateError,
                        UnknownSymbolError)
from .fsmutil import State, Symbol, TransitionKey
