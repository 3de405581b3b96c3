"""Example showing possible usecase: binary numbers modulo three"""

from fsmbuilder import UnknownSymbolError
from fsmbuilder.mod_three import make_mod_three, mod_three


def main():
    """Entrypoint"""
    fsm = make_mod_three()
    print(fsm)

    while user_input := input("Please enter a binary number: "):
        try:
            print(user_input, "modulo 3 is", mod_three(user_input, fsm))
        except UnknownSymbolError as e:
            print("That is not a binary number:", e)


if __name__ == "__main__":
    main()
