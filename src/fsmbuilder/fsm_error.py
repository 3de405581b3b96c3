"""Exceptions raised while building or running an FSM"""

__author__ = "Callum Hynes"
__all__ = ["FSMError", "UnknownStateError", "UnknownSymbolError",
           "DuplicateTransitionError", "FSMBuildError",
           "EmptyStatesError", "EmptyAlphabetError",
           "MissingInitialStateError", "EmptyFinalStatesError",
           "InitialStateNotInStatesError", "MissingTransitionError",
           "TransitionUndefinedError"]

from .fsmutil import State, Symbol, TransitionKey


class FSMError(Exception):
    """
    Base class for all errors raised by the builder or by the FSM
    """
    message: str
    """The human-readable message associated with the error."""

    def __init__(self, msg: str, *args) -> None:
        """
        Initializes an FSM error.

        Arguments:
            msg -- The human-readable message associated with the error
        """
        super().__init__(msg, *args)
        self.message = msg

    def __str__(self) -> str:
        """
        Human-readable string representaion of the error.

        Returns:
            The error message, followed by the cause of the error if
            there was one.
        """
        result = self.message
        if self.__cause__ is not None:
            cause_cls = self.__cause__.__class__.__name__
            result += f"\nCaused by {cause_cls}: {self.__cause__}"
        return result


class UnknownStateError(FSMError):
    """A state was referenced which is not in the state set"""

    state: State
    """The state which could not be found"""

    def __init__(self, state: State, *, role: str = "state") -> None:
        """
        Arguments:
            state -- The unknown state

        Keyword Arguments:
            role -- How the state was being used, for the error message
                (default: {"state"})
        """
        super().__init__(f"{role} {state} not in state set", state)
        self.state = state


class UnknownSymbolError(FSMError):
    """A symbol was referenced which is not in the alphabet"""

    symbol: Symbol
    """The symbol which could not be found"""

    def __init__(self, symbol: Symbol) -> None:
        super().__init__(f"symbol {symbol} not in alphabet", symbol)
        self.symbol = symbol


class DuplicateTransitionError(FSMError):
    """A transition was defined twice for the same (state, symbol)"""

    key: TransitionKey
    """The (state, symbol) pair which was already defined"""

    def __init__(self, key: TransitionKey) -> None:
        super().__init__(f"transition {key} already defined", key)
        self.key = key


class FSMBuildError(FSMError):
    """The builder could not produce a valid FSM"""


class EmptyStatesError(FSMBuildError):
    """No states were added"""

    def __init__(self) -> None:
        super().__init__("FSM must have at least one state")


class EmptyAlphabetError(FSMBuildError):
    """No symbols were added to the alphabet"""

    def __init__(self) -> None:
        super().__init__("FSM must have at least one symbol in alphabet")


class MissingInitialStateError(FSMBuildError):
    """The initial state was never set"""

    def __init__(self) -> None:
        super().__init__("FSM must have an initial state")


class EmptyFinalStatesError(FSMBuildError):
    """No final states were added"""

    def __init__(self) -> None:
        super().__init__("FSM must have at least one final state")


class InitialStateNotInStatesError(FSMBuildError):
    """The initial state is not (or no longer) in the state set"""

    state: State
    """The initial state that was set"""

    def __init__(self, state: State) -> None:
        super().__init__("initial state must be in state set", state)
        self.state = state


class MissingTransitionError(FSMBuildError):
    """
    The transition function is not total, i.e. some (state, symbol) pair
    has no transition defined
    """

    key: TransitionKey
    """The first (state, symbol) pair found to have no transition"""

    def __init__(self, key: TransitionKey) -> None:
        super().__init__(f"transition {key} is not defined", key)
        self.key = key


class TransitionUndefinedError(FSMError):
    """
    The FSM was asked to step from a state for which there is no
    transition on the given symbol. Cannot happen for an FSM produced
    by FSMBuilder.build()
    """

    key: TransitionKey
    """The (state, symbol) pair that was looked up"""

    def __init__(self, key: TransitionKey) -> None:
        super().__init__(f"no transition defined for {key}", key)
        self.key = key
