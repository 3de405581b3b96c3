"""Utility types shared by the FSM builder and the FSM itself"""

__author__ = "Callum Hynes"
__all__ = ['State', 'Symbol', 'TransitionKey', 'TransitionGroup',
           'symbols_of']

from typing import Iterable, Iterator, Mapping, NamedTuple, NewType


State = NewType('State', str)
"""
A single state of the automaton, identified only by its label. Two
states with the same label are the same state
"""

Symbol = NewType('Symbol', str)
"""
A single input symbol from the alphabet of the automaton. Kept distinct
from State for the typechecker, even though both are labels
"""


class TransitionKey(NamedTuple):
    """A (state, symbol) pair, the domain of the transition function"""

    state: State
    """The state the transition leaves from"""

    symbol: Symbol
    """The symbol which is consumed by the transition"""

    def __str__(self) -> str:
        return f"δ({self.state}, {self.symbol})"


TransitionGroup = Mapping[TransitionKey | tuple[str, str], str]
"""
A group of transitions, mapping each (state, symbol) pair to the state
it should lead to
"""


def symbols_of(value: str | Iterable[str]) -> Iterator[Symbol]:
    """
    Decompose an input into the symbols it is made of, in order. A str
    is split into its individual chars, any other iterable is assumed
    to already be a sequence of symbol labels.

    Arguments:
        value -- The input to decompose

    Returns:
        An iterator over the symbols of the input
    """
    # Iterating a str yields its chars
    return (Symbol(unit) for unit in value)
