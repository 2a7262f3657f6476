"""
Tests for the GraphDisplay orchestrator.
"""

import pytest

from graph_display import (
    DisplaySnapshot,
    Graph,
    GraphDisplay,
    InvalidVertexError,
    Vector2D,
    parse_edge_list,
)

WIDTH = 800
HEIGHT = 600

EXAMPLE = "0 1\n1 2\n2 3\n3 4\n4 5\n5 0"

# =============================================================================
# Test Fixtures
# =============================================================================


def create_display(text=EXAMPLE, **kwargs):
    """Create a display for an edge-list description."""
    kwargs.setdefault("random_seed", 3)
    return GraphDisplay(parse_edge_list(text), WIDTH, HEIGHT, 20, **kwargs)


# =============================================================================
# Lifecycle Tests
# =============================================================================


class TestLifecycle:
    """Initialization, stepping and rebuilding."""

    def test_initialize(self):
        display = create_display()
        assert display.graph.n == 6
        assert display.vertex_radius == 20
        assert display.layout.size == (WIDTH, HEIGHT)
        assert len(display.snapshot().positions) == 6

    def test_step_runs_configured_iterations(self):
        ticks = []
        display = create_display(iterations_per_step=3, on_tick=ticks.append)
        display.step()
        assert ticks[0]["iterations"] == 3
        assert display.layout.iteration == 3

    def test_run_iterations(self):
        display = create_display()
        before = display.snapshot().positions
        display.run_iterations(10)
        assert display.snapshot().positions != before

    def test_stop_and_resume(self):
        display = create_display()
        display.stop()
        before = display.snapshot().positions
        display.step()
        assert display.snapshot().positions == before
        display.resume()
        display.step()
        assert display.snapshot().positions != before

    def test_rebuild_keeps_existing_vertices(self):
        display = create_display()
        display.run_iterations(10)
        display.toggle_locked(0)
        before = display.snapshot()

        display.rebuild(parse_edge_list(EXAMPLE + "\n5 6\n6 7"))
        after = display.snapshot()

        assert len(after.positions) == 8
        assert after.positions[:6] == before.positions
        assert after.locked[:6] == before.locked

    def test_rebuild_with_graph_edited_in_place(self):
        g = Graph(3, [(0, 1)])
        display = GraphDisplay(g, WIDTH, HEIGHT, random_seed=1)
        before = display.snapshot().positions

        g.add_vertex()
        g.add_edge(2, 3)
        display.rebuild(g)

        snapshot = display.snapshot()
        assert len(snapshot.positions) == 4
        assert snapshot.positions[:3] == before
        assert snapshot.edges == ((0, 1), (2, 3))

    def test_update_graph_alias(self):
        display = create_display()
        display.update_graph(Graph(2, [(0, 1)]))
        assert display.graph.n == 2
        assert display.compute_spectrum() == pytest.approx([-1, 1], abs=1e-5)

    def test_reset(self):
        display = create_display()
        initial = display.snapshot().positions
        display.run_iterations(15)
        display.reset()
        assert display.snapshot().positions == initial

    def test_empty_graph(self):
        display = create_display("")
        display.step()
        assert display.compute_spectrum() == []
        assert display.find_vertex_at(400, 300) is None


# =============================================================================
# Spectrum Tests
# =============================================================================


class TestSpectrum:
    """Lazy, cached spectrum."""

    def test_example_cycle(self):
        display = create_display()
        assert display.compute_spectrum() == pytest.approx(
            [-2, -1, -1, 1, 1, 2], abs=1e-5
        )

    def test_cached_between_frames(self):
        display = create_display()
        first = display.compute_spectrum()
        display.run_iterations(10)
        display.toggle_locked(1)
        assert display.compute_spectrum() == first
        assert display.solver.computation_count == 1

    def test_rebuild_invalidates(self):
        display = create_display()
        display.compute_spectrum()
        display.rebuild(parse_edge_list("a b"))
        assert not display.solver.is_valid
        assert display.compute_spectrum() == pytest.approx([-1, 1], abs=1e-5)
        assert display.solver.computation_count == 2

    def test_editing_returned_graph_needs_rebuild(self):
        display = GraphDisplay(Graph(2, [(0, 1)]), WIDTH, HEIGHT)
        assert display.compute_spectrum() == pytest.approx([-1, 1], abs=1e-5)

        edited = display.graph
        edited.add_vertex()
        edited.add_edge(1, 2)
        assert display.graph.n == 2
        assert display.compute_spectrum() == pytest.approx([-1, 1], abs=1e-5)

        display.rebuild(edited)
        root2 = 2 ** 0.5
        assert display.compute_spectrum() == pytest.approx(
            [-root2, 0, root2], abs=1e-5
        )

    def test_directed_toggle_keeps_layout_state(self):
        display = create_display()
        display.run_iterations(5)
        display.toggle_locked(1)
        before = display.snapshot()
        display.set_directed(True)
        after = display.snapshot()
        assert after.positions == before.positions
        assert after.locked == before.locked
        assert display.graph.directed is True

    def test_directed_toggle_keeps_cache(self):
        display = create_display()
        display.compute_spectrum()
        display.set_directed(True)
        assert display.directed is True
        assert display.snapshot().directed is True
        assert display.solver.is_valid

    def test_spectrum_not_computed_while_hidden(self):
        display = create_display()
        snapshot = display.snapshot()
        assert snapshot.eigenvalues is None
        assert display.solver.computation_count == 0

    def test_spectrum_in_snapshot_when_shown(self):
        display = create_display()
        assert display.toggle_spectrum() is True
        snapshot = display.snapshot()
        assert snapshot.eigenvalues == pytest.approx((-2, -1, -1, 1, 1, 2), abs=1e-5)

    def test_spectrum_lines(self):
        display = create_display("a b")
        assert display.spectrum_lines() == ["Eigenvalues:", "-1.0000", "1.0000"]

    def test_spectrum_lines_no_negative_zero(self):
        display = create_display("a\nb")
        assert display.spectrum_lines(precision=2) == ["Eigenvalues:", "0.00", "0.00"]


# =============================================================================
# Pointer Interaction Tests
# =============================================================================


class TestPointerInteraction:
    """Press / move / release handling."""

    def test_press_on_vertex_starts_drag(self):
        display = create_display()
        p = display.layout.position(2)
        assert display.press(p.x, p.y) == 2
        assert display.held_vertex == 2
        assert display.snapshot().dragging[2] is True

    def test_press_on_empty_space(self):
        display = create_display()
        assert display.press(WIDTH / 2, HEIGHT / 2) is None
        assert display.held_vertex is None
        display.move(100, 100)
        display.release(100, 100)

    def test_small_move_does_not_drag(self):
        display = create_display()
        p = display.layout.position(2)
        display.press(p.x, p.y)
        display.move(p.x + 2, p.y + 2)
        assert display.layout.position(2) == p

    def test_drag_moves_vertex(self):
        display = create_display()
        p = display.layout.position(2)
        display.press(p.x, p.y)
        display.move(300, 250)
        assert display.layout.position(2) == Vector2D(300, 250)

        display.run_iterations(5)
        assert display.layout.position(2) == Vector2D(300, 250)

        display.release(300, 250)
        assert display.snapshot().dragging[2] is False
        assert display.snapshot().locked[2] is False
        assert display.held_vertex is None

    def test_click_toggles_lock(self):
        display = create_display()
        p = display.layout.position(4)
        display.press(p.x, p.y)
        display.release(p.x + 1, p.y)
        assert display.snapshot().locked[4] is True

        display.press(p.x, p.y)
        display.release(p.x, p.y)
        assert display.snapshot().locked[4] is False

    def test_rebuild_cancels_hold_on_removed_vertex(self):
        display = create_display()
        p = display.layout.position(5)
        display.press(p.x, p.y)
        display.rebuild(Graph(3))
        assert display.held_vertex is None
        display.release(p.x, p.y)

    def test_out_of_range_vertex(self):
        display = create_display()
        with pytest.raises(InvalidVertexError):
            display.set_position(6, 0, 0)
        with pytest.raises(IndexError):
            display.set_dragging(-1, True)


# =============================================================================
# Snapshot Tests
# =============================================================================


class TestSnapshot:
    """Read-only frame data."""

    def test_snapshot_contents(self):
        display = create_display("x y\ny z")
        snapshot = display.snapshot()
        assert isinstance(snapshot, DisplaySnapshot)
        assert snapshot.labels == ("x", "y", "z")
        assert snapshot.edges == ((0, 1), (1, 2))
        assert snapshot.directed is False
        assert snapshot.vertex_radius == 20
        assert snapshot.locked == (False, False, False)

    def test_unlabelled_graph_uses_indices(self):
        display = GraphDisplay(Graph(3), WIDTH, HEIGHT)
        assert display.snapshot().labels == ("0", "1", "2")

    def test_snapshot_is_detached(self):
        display = create_display()
        snapshot = display.snapshot()
        display.run_iterations(10)
        assert display.snapshot().positions != snapshot.positions

    def test_snapshot_is_frozen(self):
        snapshot = create_display().snapshot()
        with pytest.raises(AttributeError):
            snapshot.directed = True  # type: ignore[misc]
