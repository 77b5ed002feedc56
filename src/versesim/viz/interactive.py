"""
Animated, clickable view of the network.

NetworkView drives a MotionSimulator from a matplotlib FuncAnimation (one
tick per frame, tick_period_ms apart) and redraws the artists from the
simulator's snapshot. Clicking a node opens a modal card with the node's
text; clicking outside the card, or on its close mark, dismisses it.

The view never writes positions: it only reads current_state().
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from versesim.content import Entry, describe_node
from versesim.viz.geometry import DEFAULT_SIZES, NodeSizes, node_at
from versesim.viz.network import BACKGROUND, NODE_COLOR, NetworkArtists, setup_canvas

if TYPE_CHECKING:
    from versesim.core.motion import MotionSimulator
    from versesim.core.node import NodeView

logger = logging.getLogger(__name__)


# Modal placement in figure coordinates: [left, bottom, width, height]
MODAL_RECT = (0.08, 0.25, 0.84, 0.5)
CLOSE_MARK = "×"


@dataclass
class ModalState:
    """Which node, if any, has its card open."""

    selected: "NodeView | None" = None
    is_open: bool = field(default=False)

    def open(self, node: "NodeView"):
        self.selected = node
        self.is_open = True

    def close(self):
        self.is_open = False

    @property
    def entry(self) -> Entry | None:
        """Card for the selected node (position frozen at click time)."""
        if self.selected is None:
            return None
        return describe_node(self.selected)


class NetworkView:
    """
    Figure + animation + click handling around one simulator.

    Lifecycle: start() begins ticking, stop() cancels the timer. The
    simulator is untouched between stop() and the next start().
    """

    def __init__(
        self,
        simulator: "MotionSimulator",
        sizes: NodeSizes = DEFAULT_SIZES,
        figsize: tuple[float, float] = (4, 12),
    ):
        self.simulator = simulator
        self.sizes = sizes
        self.modal = ModalState()

        cfg = simulator.config
        self.fig, self.ax = plt.subplots(figsize=figsize)
        setup_canvas(self.ax, width=cfg.width, canvas_height=cfg.canvas_height)
        self.artists = NetworkArtists(self.ax, simulator.current_state(), sizes)

        self.animation: FuncAnimation | None = None
        self.running = False
        self._modal_ax = None
        self._close_text = None
        self._cid = self.fig.canvas.mpl_connect("button_press_event", self._on_click)

    # ─── lifecycle ───────────────────────────────────────────────────

    def start(self):
        """Start (or resume) ticking every tick_period_ms."""
        if self.running:
            return
        if self.animation is None:
            self.animation = FuncAnimation(
                self.fig,
                self._on_frame,
                init_func=self.artists.all,
                interval=self.simulator.config.tick_period_ms,
                cache_frame_data=False,
            )
            # The timer starts on the first draw; do it now so stop() owns it
            self.fig.canvas.draw()
        else:
            self.animation.resume()
        self.running = True
        logger.info("Animation started (%d ms per tick)", self.simulator.config.tick_period_ms)

    def stop(self):
        """Cancel the tick timer; no tick is interrupted halfway."""
        if not self.running:
            return
        self.animation.pause()
        self.running = False
        logger.info("Animation stopped after %d ticks", self.simulator.tick_count)

    def close(self):
        """Stop, disconnect handlers and close the figure."""
        self.stop()
        self.fig.canvas.mpl_disconnect(self._cid)
        plt.close(self.fig)

    def step(self):
        """Advance one tick and redraw."""
        state = self.simulator.tick()
        self.artists.update(state)
        return self.artists.all()

    def _on_frame(self, _frame):
        return self.step()

    # ─── interaction ─────────────────────────────────────────────────

    def handle_click(self, x: float | None, y: float | None,
                     inside_modal: bool = False, on_close: bool = False):
        """
        React to a click.

        Args:
            x, y: Click position in canvas units (None if off the canvas)
            inside_modal: The click landed on the modal card
            on_close: The click landed on the card's close mark
        """
        if self.modal.is_open:
            if on_close or not inside_modal:
                self.close_modal()
            return

        if x is None or y is None:
            return
        node = node_at(self.simulator.current_state(), x, y, self.sizes)
        if node is not None:
            self.open_modal(node)

    def _on_click(self, event):
        inside_modal = self._modal_ax is not None and event.inaxes is self._modal_ax
        on_close = self._close_text is not None and self._close_text.contains(event)[0]
        if event.inaxes is self.ax:
            self.handle_click(event.xdata, event.ydata, inside_modal, on_close)
        else:
            self.handle_click(None, None, inside_modal, on_close)

    def open_modal(self, node: "NodeView"):
        self.modal.open(node)
        self._draw_modal(self.modal.entry)
        logger.info("Opened node %d", node.id)

    def close_modal(self):
        self.modal.close()
        if self._modal_ax is not None:
            self._modal_ax.remove()
        self._modal_ax = None
        self._close_text = None
        self.fig.canvas.draw_idle()

    def _draw_modal(self, entry: Entry):
        if self._modal_ax is not None:
            self._modal_ax.remove()

        ax = self.fig.add_axes(MODAL_RECT, zorder=10)
        ax.set_facecolor(BACKGROUND)
        ax.set_xticks([])
        ax.set_yticks([])
        for spine in ax.spines.values():
            spine.set_edgecolor(NODE_COLOR)

        lines = entry.lines()
        ax.text(0.05, 0.92, lines[0], color=NODE_COLOR, fontsize=14,
                fontweight="bold", va="top", transform=ax.transAxes)
        ax.text(0.05, 0.8, "\n\n".join(lines[1:]), color=NODE_COLOR, fontsize=8,
                va="top", wrap=True, transform=ax.transAxes)
        self._close_text = ax.text(0.95, 0.97, CLOSE_MARK, color=NODE_COLOR, fontsize=14,
                                   ha="right", va="top", transform=ax.transAxes)
        self._modal_ax = ax
        self.fig.canvas.draw_idle()


def show(simulator: "MotionSimulator", sizes: NodeSizes = DEFAULT_SIZES) -> NetworkView:
    """Open an interactive window on a simulator and block until it is closed."""
    view = NetworkView(simulator, sizes=sizes)
    view.start()
    plt.show()
    view.stop()
    return view
