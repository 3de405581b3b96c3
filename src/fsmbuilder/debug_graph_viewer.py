"""
Debug utilities, such as GUI viewers for the state diagrams of FSMs
"""

__author__ = "Callum Hynes"
__all__ = ['DebugGraphViewer', 'MultiFigureViewer']

import math
from typing import Callable, Optional

try:
    import networkx
    from networkx import layout as nxlayout
    import matplotlib.pyplot
    import matplotlib.figure
    from matplotlib.widgets import Button
except ImportError as e:
    e.add_note("To display the debug graphic, `$ pip install "
               "fsmbuilder[DebugGraphViewer]`")
    raise e  # raise to user

from .fsm import FSM
from .fsmutil import State

_INITIAL_COLOR = (1.0, 0.3, 0.3)
_FINAL_COLOR = (0.3, 1.0, 0.3)
_INITIAL_FINAL_COLOR = (1.0, 0.8, 0.3)
_DEFAULT_COLOR = (0.3, 0.3, 1.0)


class DebugGraphViewer:
    """
    Uses matplotlib to create a graphical user interface with a visual
    representation of the state diagram of an FSM.
    """

    _graph: networkx.MultiDiGraph
    """Networkx representation of the state diagram"""

    _layout: dict[State, tuple[float, float]] | None
    """Cached results of the layout planner"""

    _layout_planner: Callable
    """The function which produces the layout of the nodes"""

    _color_overrides: dict[State, tuple[float, float, float]]
    """A map of the colour of each node"""

    _current: State
    """The current state of the FSM, which gets outlined"""

    def __init__(self, fsm: FSM, layout=nxlayout.kamada_kawai_layout):
        """
        Creates a visual graph of the given FSM.

        Arguments:
            fsm -- The FSM to show. The initial state is coloured red,
                final states green (orange if also initial), and the
                current state is outlined.

        Keyword Arguments:
            layout -- A function returning a layout for the graph. Many
                implementations are provided in the networkx.layout
                package (default: {networkx.layout.kamada_kawai_layout})
        """
        self._graph = networkx.MultiDiGraph()
        self._layout = None
        self._layout_planner = layout
        self._current = fsm.current_state
        final_states = fsm.get_final_states()
        self._color_overrides = {
            state: _FINAL_COLOR for state in final_states}
        self._color_overrides[fsm.initial_state] = (
            _INITIAL_FINAL_COLOR if fsm.initial_state in final_states
            else _INITIAL_COLOR)
        for state in fsm.get_states():
            self._graph.add_node(state, label=str(state))
        # One edge per pair of states, labelled with every symbol
        symbols_by_edge: dict[tuple[State, State], list[str]] = {}
        for (state, symbol), next_state in fsm.transitions.items():
            symbols_by_edge.setdefault((state, next_state), []) \
                .append(symbol)
        for (state, next_state), symbols in symbols_by_edge.items():
            self._graph.add_edge(state, next_state,
                                 label=", ".join(sorted(symbols)))

    @property
    def graph(self) -> networkx.MultiDiGraph:
        """The networkx representation of the state diagram"""
        return self._graph

    def render(self) -> matplotlib.figure.Figure:
        """
        Render the current graph to a matplotlib Figure, ready for
        displaying.

        Returns:
            The rendered Figure.
        """
        fig = matplotlib.pyplot.figure(layout='tight')
        self._layout = self._layout_planner(self._graph)
        scale = 1 / math.sqrt(max(self._graph.number_of_nodes(), 1))
        nodes = list(self._graph.nodes)
        networkx.draw_networkx_nodes(
            self._graph,
            self._layout,
            nodelist=nodes,
            node_color=[self._color_overrides.get(node, _DEFAULT_COLOR)
                        for node in nodes],  # type: ignore
            edgecolors=['black' if node == self._current else 'none'
                        for node in nodes],
            node_size=int(600 * scale))
        networkx.draw_networkx_labels(
            self._graph,
            self._layout,
            labels=dict(self._graph.nodes(data='label')),  # type: ignore
            font_size=int(20 * scale))
        # Curve edges so that x->y and y->x do not overlap
        networkx.draw_networkx_edges(
            self._graph,
            self._layout,
            connectionstyle="arc3, rad=0.2",
            node_size=int(600 * scale))
        networkx.draw_networkx_edge_labels(
            self._graph,
            self._layout,
            edge_labels={(x, y, key): label
                         for x, y, key, label in self._graph.edges(
                             keys=True, data='label')},  # type: ignore
            connectionstyle="arc3, rad=0.2",
            font_size=int(24 * scale))
        return fig

    @staticmethod
    def display():
        """
        Display all the rendered Figures at once. If many figures are
        available, this will open may windows, see {MultiFigureViewer}
        for a potential alternative showing only one window at a time.
        """
        matplotlib.pyplot.show()


class MultiFigureViewer:
    """
    Manages multiple Figures in a single-window viewer, with buttons to
    switch between views.
    """
    _current: int
    _figures: list[matplotlib.figure.Figure]
    _buttons: dict[matplotlib.figure.Figure, tuple[Button, Button]]
    _last_fig: Optional[matplotlib.figure.Figure]

    def __init__(self):
        """
        Create an empty MultiFigureViewer.
        """
        self._figures = []
        self._buttons = {}
        self._current = 0
        self._last_fig = None

    def __len__(self) -> int:
        return len(self._figures)

    def add(self, fig: matplotlib.figure.Figure) -> None:
        """
        Add a figure to the viewer.

        Arguments:
            fig -- The Figure to add.
        """
        fig.subplots_adjust(bottom=0.2)

        axprev = fig.add_axes((0.7, 0.05, 0.1, 0.075))
        axnext = fig.add_axes((0.81, 0.05, 0.1, 0.075))

        btn_next = Button(axnext, 'Next')
        btn_next.on_clicked(self.next)
        btn_prev = Button(axprev, 'Previous')
        btn_prev.on_clicked(self.prev)
        # Buttons stop responding if garbage collected
        self._buttons[fig] = btn_next, btn_prev
        self._figures.append(fig)

    def next(self, _) -> None:
        """Button press handler to go to next figure"""
        self._current = (self._current + 1) % len(self._figures)
        self._display()

    def prev(self, _) -> None:
        """Button press handler to go to previous figure"""
        self._current = (self._current - 1) % len(self._figures)
        self._display()

    def _display(self) -> None:
        """
        Hide the current figure and display the next one.
        """
        if len(self._figures) < 1:
            return  # No figures available
        if self._last_fig is not None:
            # Hacks, just hope this works
            self._last_fig.canvas.manager \
                .window.hide()  # type: ignore
        self._last_fig = self._figures[self._current]
        self._last_fig.show()

    def display(self) -> None:
        """
        Display the Figure viewer.
        """
        self._current = len(self._figures) - 1
        self._display()
        matplotlib.pyplot.show()
