"""Demo: run the modulo-three FSM on binary numbers"""

__author__ = "Callum Hynes"

import sys

from .fsm_error import FSMError
from .mod_three import make_mod_three, mod_three


def main(args: list[str]) -> int:
    """
    Prints the remainder of each binary number divided by three.

    Arguments:
        args -- The binary numbers to use, "110" and "1101" if none

    Returns:
        The exit status
    """
    try:
        fsm = make_mod_three()
    except FSMError as e:
        print("Error building FSM:", e)
        return 1
    for binary in args or ["110", "1101"]:
        try:
            remainder = mod_three(binary, fsm)
        except FSMError as e:
            print("Error processing input:", e)
            return 1
        print(f"{binary} => {fsm.current_state} (mod 3 = {remainder})")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
