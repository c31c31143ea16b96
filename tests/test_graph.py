"""Tests for the TickerGraph widget. Needs Qt, runs on the offscreen platform."""
from __future__ import annotations

from unittest.mock import patch

import pytest
from PyQt6.QtCore import QSize, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen, QResizeEvent
from PyQt6.QtWidgets import QApplication

from tickergraph.layout.graph import TickerGraph


@pytest.fixture
def graph(qapp):
    widget = TickerGraph()
    widget.resize(200, 100)
    yield widget
    widget.deleteLater()


class TestConfiguration:

    def test_defaults(self, graph) -> None:
        assert graph.units == ""
        assert graph.range == (0.0, 100.0)
        assert graph.point_width == 1
        assert graph.reference_points == ()
        assert graph.grid_pitch == 10.0
        assert graph.background_brush.color() == QColor(0, 0, 0)
        assert graph.grid_pen.color() == QColor(0, 128, 64)
        assert graph.data_line_pen.color() == QColor(0, 255, 0)
        assert graph.axis_color == QColor(255, 255, 255)
        assert graph.label_color == QColor(255, 255, 255)
        assert graph.axis_font.pointSize() == 8
        assert graph.label_font.pointSize() == 12

    def test_range_accepts_pair(self, graph) -> None:
        graph.set_range((10, 30))
        assert graph.range == (10.0, 30.0)

    def test_degenerate_range_is_ignored(self, graph) -> None:
        with patch.object(graph, "update") as update, \
             patch("tickergraph.layout.graph.log") as log:
            graph.set_range(50, 50)
        assert graph.range == (0.0, 100.0)
        update.assert_not_called()
        log.assert_called_once()

    def test_nan_range_is_ignored_and_paints(self, graph) -> None:
        with patch("tickergraph.layout.graph.log") as log:
            graph.set_range(0, float("nan"))
        log.assert_called_once()
        assert graph.range == (0.0, 100.0)
        graph.append_point(50)
        assert not graph.grab().isNull()

    def test_repeated_fractional_point_width_does_not_redraw(
        self, graph,
    ) -> None:
        graph.append_point(1)
        graph.set_point_width(2.5)
        assert graph.point_width == 2
        with patch.object(graph, "update") as update:
            graph.set_point_width(2.5)
        update.assert_not_called()

    def test_getters_return_copies(self, graph) -> None:
        pen = graph.grid_pen
        pen.setColor(QColor(255, 0, 0))
        assert graph.grid_pen.color() == QColor(0, 128, 64)


class TestRedraw:

    @pytest.mark.parametrize("apply", [
        lambda g: g.set_range(0, 100),
        lambda g: g.set_units(""),
        lambda g: g.set_point_width(1),
        lambda g: g.set_reference_points([]),
        lambda g: g.set_grid_pitch(10),
        lambda g: g.set_background_brush(QBrush(g.background_brush)),
        lambda g: g.set_grid_pen(QPen(g.grid_pen)),
        lambda g: g.set_data_line_pen(QPen(g.data_line_pen)),
        lambda g: g.set_axis_color(QColor(g.axis_color)),
        lambda g: g.set_axis_font(QFont(g.axis_font)),
        lambda g: g.set_label_color(QColor(g.label_color)),
        lambda g: g.set_label_font(QFont(g.label_font)),
    ])
    def test_equal_values_do_not_redraw(self, graph, apply) -> None:
        graph.append_point(42)
        with patch.object(graph, "update") as update:
            apply(graph)
        update.assert_not_called()

    @pytest.mark.parametrize("apply", [
        lambda g: g.set_reference_points([15]),
        lambda g: g.set_grid_pitch(25),
        lambda g: g.set_background_brush(QBrush(QColor(255, 255, 255))),
        lambda g: g.set_grid_pen(QPen(QColor(32, 32, 32), 1, Qt.PenStyle.DotLine)),
        lambda g: g.set_axis_color(QColor(32, 32, 32)),
        lambda g: g.set_axis_font(QFont("Arial", 10)),
        lambda g: g.set_label_color(QColor(32, 32, 32)),
    ])
    def test_style_changes_always_redraw(self, graph, apply) -> None:
        with patch.object(graph, "update") as update:
            apply(graph)
        update.assert_called_once()

    @pytest.mark.parametrize("apply", [
        lambda g: g.set_units("V"),
        lambda g: g.set_range(-100, 200),
        lambda g: g.set_point_width(5),
        lambda g: g.set_data_line_pen(QPen(QColor(0, 0, 0), 2)),
        lambda g: g.set_label_font(QFont("Arial", 20)),
    ])
    def test_data_dependent_changes_skip_redraw_without_data(
        self, graph, apply,
    ) -> None:
        with patch.object(graph, "update") as update:
            apply(graph)
        update.assert_not_called()

    @pytest.mark.parametrize("apply", [
        lambda g: g.set_units("V"),
        lambda g: g.set_range(-100, 200),
        lambda g: g.set_point_width(5),
        lambda g: g.set_data_line_pen(QPen(QColor(0, 0, 0), 2)),
        lambda g: g.set_label_font(QFont("Arial", 20)),
    ])
    def test_data_dependent_changes_redraw_with_data(self, graph, apply) -> None:
        graph.append_point(1)
        graph.append_point(2)
        with patch.object(graph, "update") as update:
            apply(graph)
        update.assert_called_once()

    def test_append_and_clear_redraw(self, graph) -> None:
        with patch.object(graph, "update") as update:
            graph.append_point(1.0)
            graph.clear()
        assert update.call_count == 2


class TestData:

    def test_length_bounded_by_width(self, graph) -> None:
        graph.resize(150, 80)
        graph.set_point_width(5)
        for value in range(100):
            graph.append_point(value)
            assert len(graph.series) <= 150 // 5 + 1
        assert len(graph.series) == 31
        graph.resize(130, 80)
        graph.append_point(100)
        assert len(graph.series) <= 130 // 5 + 1

    def test_hidden_resize_keeps_bound_without_append(self, graph) -> None:
        for value in range(300):
            graph.append_point(value)
        graph.resize(150, 100)
        assert graph.width() == 150
        assert len(graph.series) == 151
        assert graph.series.last == 299.0

    def test_resize_event_trims(self, graph) -> None:
        for value in range(300):
            graph.append_point(value)
        QApplication.sendEvent(
            graph, QResizeEvent(QSize(130, 100), QSize(200, 100)),
        )
        assert len(graph._series) == 131
        assert graph._series.values[0] == 169.0

    def test_shown_widget_trims_on_shrink(self, qapp, graph) -> None:
        graph.show()
        qapp.processEvents()
        for value in range(300):
            graph.append_point(value)
        assert len(graph._series) == graph.width() + 1
        graph.resize(graph.width() - 40, 100)
        qapp.sendPostedEvents()
        qapp.processEvents()
        assert len(graph._series) <= graph.width() + 1
        graph.hide()

    def test_larger_point_width_trims(self, graph) -> None:
        for value in range(300):
            graph.append_point(value)
        assert len(graph.series) == 201
        graph.set_point_width(10)
        assert len(graph.series) == 21

    def test_clear_keeps_configuration(self, graph) -> None:
        graph.set_units("V")
        graph.set_range(-100, 200)
        graph.set_reference_points([0])
        pen = QPen(QColor(0, 0, 0), 2)
        graph.set_data_line_pen(pen)
        for value in range(10):
            graph.append_point(value)
        graph.clear()
        assert len(graph.series) == 0
        assert graph.units == "V"
        assert graph.range == (-100.0, 200.0)
        assert graph.reference_points == (0.0,)
        assert graph.data_line_pen == pen


class TestPaint:

    def test_background(self, graph) -> None:
        image = graph.grab().toImage()
        assert image.pixelColor(195, 55) == QColor(0, 0, 0)
        graph.set_background_brush(QBrush(QColor(255, 255, 255)))
        image = graph.grab().toImage()
        assert image.pixelColor(195, 55) == QColor(255, 255, 255)

    def test_data_line(self, graph) -> None:
        graph.set_data_line_pen(QPen(QColor(255, 0, 255), 3))
        for _ in range(300):
            graph.append_point(45)
        image = graph.grab().toImage()
        assert image.pixelColor(155, 55) == QColor(255, 0, 255)
        assert image.pixelColor(155, 75) == QColor(0, 0, 0)

    def test_paints_with_empty_buffer_and_reference_points(self, graph) -> None:
        graph.set_reference_points([20, 80])
        image = graph.grab().toImage()
        assert image.width() == 200
        assert image.height() == 100
