"""Unit tests for network plotting and the interactive view."""

import matplotlib.pyplot as plt
import pytest

from versesim.core.layout import LayoutGenerator
from versesim.core.motion import MotionSimulator
from versesim.core.node import Node
from versesim.viz import ModalState, NetworkView, node_frame, plot_network, save_figure


@pytest.fixture
def simulator(default_layout_config, rng):
    layout = LayoutGenerator(default_layout_config, rng).generate()
    return MotionSimulator.from_layout(layout)


@pytest.fixture
def view():
    sim = MotionSimulator(nodes=[
        Node(id=1, x=50.0, y=100.0),
        Node(id=2, x=30.0, y=200.0),
        Node(id=14, x=70.0, y=400.0),
    ])
    view = NetworkView(sim)
    yield view
    view.close()


class TestPlotNetwork:
    """Tests for plot_network."""

    def test_returns_figure_and_axes(self, simulator):
        fig, ax = plot_network(simulator.current_state())
        try:
            assert ax.figure is fig
            assert ax.get_ylim() == (650.0, 0.0)  # y grows downward
            assert ax.get_xlim() == (0.0, 100.0)
        finally:
            plt.close(fig)

    def test_artist_counts(self, simulator):
        state = simulator.current_state()
        fig, ax = plot_network(state)
        try:
            assert len(ax.patches) == 3 * len(state.nodes)
            assert len(ax.collections) == 1
            assert len(ax.collections[0].get_segments()) == len(state.connections)
        finally:
            plt.close(fig)

    def test_existing_axes(self, simulator):
        fig, ax = plt.subplots()
        try:
            fig2, ax2 = plot_network(simulator.current_state(), ax=ax, title="")
            assert fig2 is fig
            assert ax2 is ax
        finally:
            plt.close(fig)

    def test_save_figure(self, simulator, tmp_path):
        fig, _ = plot_network(simulator.current_state())
        path = tmp_path / "nested" / "network.png"
        try:
            save_figure(fig, path, dpi=50)
        finally:
            plt.close(fig)
        assert path.exists()


class TestModalState:
    """Tests for ModalState."""

    def test_starts_closed(self):
        modal = ModalState()
        assert not modal.is_open
        assert modal.entry is None

    def test_open_and_close(self, simulator):
        modal = ModalState()
        node = simulator.current_state().node(2)

        modal.open(node)
        assert modal.is_open
        assert modal.entry.title == "sonder"

        modal.close()
        assert not modal.is_open


class TestNetworkView:
    """Tests for NetworkView."""

    def test_step_advances_simulation(self, view):
        view.step()
        view.step()
        assert view.simulator.tick_count == 2

    def test_step_moves_artists(self, view):
        artists = view.step()
        node = view.simulator.current_state().nodes[0]
        body = view.artists.patches[node.id][0]

        assert body.get_xy() == pytest.approx(
            (node_frame(node, view.sizes).body.x, node_frame(node, view.sizes).body.y)
        )
        assert artists == view.artists.all()

    def test_click_on_node_opens_modal(self, view):
        node = view.simulator.current_state().node(1)

        view.handle_click(node.x, node.y)

        assert view.modal.is_open
        assert view.modal.selected.id == 1
        assert view.modal.entry.title == "avatar"

    def test_click_on_empty_canvas_does_nothing(self):
        sim = MotionSimulator(nodes=[Node(id=1, x=50.0, y=100.0)])
        view = NetworkView(sim)
        try:
            view.handle_click(50.0, 400.0)
            assert not view.modal.is_open
        finally:
            view.close()

    def test_click_outside_modal_closes(self, view):
        node = view.simulator.current_state().node(1)
        view.handle_click(node.x, node.y)

        view.handle_click(node.x, node.y, inside_modal=False)

        assert not view.modal.is_open

    def test_click_inside_modal_keeps_open(self, view):
        node = view.simulator.current_state().node(1)
        view.handle_click(node.x, node.y)

        view.handle_click(None, None, inside_modal=True)

        assert view.modal.is_open

    def test_close_mark_closes(self, view):
        node = view.simulator.current_state().node(1)
        view.handle_click(node.x, node.y)

        view.handle_click(None, None, inside_modal=True, on_close=True)

        assert not view.modal.is_open

    def test_fallback_card_for_uncurated_node(self):
        sim = MotionSimulator(nodes=[Node(id=14, x=50.0, y=100.0)])
        view = NetworkView(sim)
        try:
            view.handle_click(50.0, 100.0)
            assert view.modal.entry.title == "Node 14"
            assert view.modal.entry.paragraphs == ("Position: (50.00, 100.00)",)
        finally:
            view.close()

    def test_start_and_stop(self, view):
        assert not view.running
        view.start()
        assert view.running
        assert view.animation is not None

        view.stop()
        assert not view.running

        view.start()
        assert view.running

    def test_stop_before_first_redraw_holds(self, view):
        view.start()
        calls = []
        view.animation.event_source.start = lambda *args: calls.append(args)

        view.stop()
        view.fig.canvas.draw()

        assert calls == []
        assert not view.running
        assert view.simulator.tick_count == 0

