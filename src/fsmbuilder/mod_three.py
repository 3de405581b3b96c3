"""Modulo-three recognizer, an FSM tracking the remainder of a binary
number divided by three"""

__author__ = "Callum Hynes"
__all__ = ["make_mod_three", "mod_three"]

from typing import Iterable

from .fsm import FSM
from .fsm_builder import FSMBuilder

_REMAINDERS = {"S0": 0, "S1": 1, "S2": 2}
"""The remainder represented by each state"""


def make_mod_three() -> FSM:
    """
    Builds the FSM whose state after reading a binary number (most
    significant bit first) is S{n}, where n is the number modulo 3.

    Returns:
        The new FSM
    """
    # Reading bit b from state n leads to state (2n + b) % 3
    return FSMBuilder() \
        .add_states(*_REMAINDERS) \
        .add_symbols("0", "1") \
        .set_initial_state("S0") \
        .add_final_states(*_REMAINDERS) \
        .add_transitions([
            {("S0", "0"): "S0"},
            {("S0", "1"): "S1"},
            {("S1", "0"): "S2"},
            {("S1", "1"): "S0"},
            {("S2", "0"): "S1"},
            {("S2", "1"): "S2"},
        ]) \
        .build()


def mod_three(binary: str | Iterable[str],
              fsm: FSM | None = None) -> int:
    """
    Calculates a binary number modulo 3 using the modulo-three FSM.

    Arguments:
        binary -- The binary number, as a string of 0s and 1s

    Keyword Arguments:
        fsm -- The FSM to run, which must come from make_mod_three().
            A new one is built if not given (default: {None})

    Returns:
        The remainder, 0, 1 or 2

    Raises:
        UnknownSymbolError: If the number contains anything except 0s
            and 1s
        ValueError: If {fsm} ends in a state which is not one of the
            modulo-three states
    """
    if fsm is None:
        fsm = make_mod_three()
    fsm.process_input(binary)
    if fsm.current_state not in _REMAINDERS:
        raise ValueError(f"state {fsm.current_state} is not a "
                         f"modulo-three state, use make_mod_three()")
    return _REMAINDERS[fsm.current_state]
