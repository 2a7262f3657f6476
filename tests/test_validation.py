"""Tests for input validation module."""

import pytest

from graph_display.validation import (
    InvalidCanvasSizeError,
    InvalidLinkError,
    InvalidVertexError,
    ValidationError,
    validate_canvas_size,
    validate_edge_indices,
    validate_iterations,
    validate_vertex_index,
)


class TestCanvasSizeValidation:
    """Tests for canvas size validation."""

    def test_valid_size(self):
        """Valid canvas size returns tuple."""
        w, h = validate_canvas_size([800, 600])
        assert w == 800.0
        assert h == 600.0

    def test_negative_width_raises(self):
        """Negative width raises InvalidCanvasSizeError."""
        with pytest.raises(InvalidCanvasSizeError, match="width must be positive"):
            validate_canvas_size([-100, 600])

    def test_zero_height_raises(self):
        """Zero height raises InvalidCanvasSizeError."""
        with pytest.raises(InvalidCanvasSizeError, match="height must be positive"):
            validate_canvas_size([800, 0])

    def test_single_element_raises(self):
        """Single element raises InvalidCanvasSizeError."""
        with pytest.raises(InvalidCanvasSizeError, match="must have 2 elements"):
            validate_canvas_size([800])

    def test_is_validation_error(self):
        """InvalidCanvasSizeError is a ValidationError and a ValueError."""
        with pytest.raises(ValidationError):
            validate_canvas_size([0, 0])
        with pytest.raises(ValueError):
            validate_canvas_size([0, 0])


class TestEdgeIndexValidation:
    """Tests for edge endpoint validation."""

    def test_valid_edges(self):
        assert validate_edge_indices([(0, 1), (1, 2)], 3) == []

    def test_out_of_bounds_strict(self):
        with pytest.raises(InvalidLinkError, match="target index 3"):
            validate_edge_indices([(0, 3)], 3)

    def test_non_strict_returns_issues(self):
        issues = validate_edge_indices([(0, 1), (-1, 5)], 3, strict=False)
        assert [i for i, _ in issues] == [1, 1]

    def test_non_integer_endpoint(self):
        issues = validate_edge_indices([(0, "a")], 3, strict=False)
        assert "not an integer" in issues[0][1]

    def test_malformed_edge(self):
        issues = validate_edge_indices([(0, 1, 2)], 3, strict=False)
        assert "expected (u, v) pair" in issues[0][1]


class TestVertexIndexValidation:
    """Tests for vertex index validation."""

    def test_valid(self):
        assert validate_vertex_index(2, 3) == 2

    def test_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            validate_vertex_index(3, 3)
        with pytest.raises(InvalidVertexError, match="out of bounds"):
            validate_vertex_index(-1, 3)

    def test_bool_rejected(self):
        with pytest.raises(InvalidVertexError):
            validate_vertex_index(True, 3)


class TestIterationValidation:
    """Tests for iteration count validation."""

    def test_zero_allowed(self):
        assert validate_iterations(0) == 0

    def test_negative_raises(self):
        with pytest.raises(ValidationError, match="iterations must be >= 0"):
            validate_iterations(-1)
