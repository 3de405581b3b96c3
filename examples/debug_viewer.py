"""Example showing the debug graph viewer"""

from fsmbuilder import FSM
from fsmbuilder.debug_graph_viewer import MultiFigureViewer, DebugGraphViewer
from fsmbuilder.mod_three import make_mod_three


def main():
    """Entrypoint"""
    mfv = MultiFigureViewer()

    def on_step(fsm: FSM, msg: str):
        # Create a figure showing where the FSM is after this step
        fig = DebugGraphViewer(fsm).render()
        fig.suptitle(msg, fontsize=8)
        fig.canvas.manager.set_window_title(msg)  # type: ignore
        mfv.add(fig)

    fsm = make_mod_three()
    # Hook into the FSM's internal logging
    # pylint: disable-next=protected-access
    FSM._debug_function = on_step
    fsm.process_input("1011")
    mfv.display()


if __name__ == "__main__":
    main()
