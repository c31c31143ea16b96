from typing import Iterable, Optional

import pyqtgraph as pg
from PyQt6.QtCore import QPointF, QRectF, QSize, Qt
from PyQt6.QtGui import (QBrush, QColor, QFont, QFontMetrics, QPainter, QPen,
                         QPolygonF, QResizeEvent, QTextOption)
from PyQt6.QtWidgets import QSizePolicy, QWidget

from .. import theme
from ..series import GraphSeries
from ..tools import log

LABEL_MARGIN = 2


def _text_option(alignment: Qt.AlignmentFlag) -> QTextOption:
    option = QTextOption(alignment)
    option.setWrapMode(QTextOption.WrapMode.NoWrap)
    return option


class TickerGraph(QWidget):
    """Scrolling line graph for a live value such as a voltage or a price.

    New points enter on the right edge and old ones scroll out on the left.
    The vertical axis is fixed to ``range``, labelled with its min and max
    and with any ``reference_points``. The latest value is printed in the
    top right corner.

    Setters only schedule a repaint when the value actually changes, so
    re-applying the same configuration on every tick is free.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._series = GraphSeries()
        self._background_brush = pg.mkBrush(theme.GRAPH_BG)
        self._grid_pen = pg.mkPen(theme.GRAPH_GRID)
        self._data_line_pen = pg.mkPen(theme.GRAPH_LINE)
        self._axis_color = pg.mkColor(theme.GRAPH_TEXT)
        self._axis_font = QFont(theme.AXIS_FONT_FAMILY, theme.AXIS_FONT_SIZE)
        self._label_color = pg.mkColor(theme.GRAPH_TEXT)
        self._label_font = QFont(theme.LABEL_FONT_FAMILY, theme.LABEL_FONT_SIZE)
        self.setSizePolicy(
            QSizePolicy.Policy.Expanding,
            QSizePolicy.Policy.Expanding,
        )
        self.setMinimumSize(QSize(120, 60))

    @property
    def series(self) -> GraphSeries:
        self._series.trim(self.width())
        return self._series

    def _update_if_data(self) -> None:
        if len(self._series) > 0:
            self.update()

    # data related parameters

    @property
    def units(self) -> str:
        return self._series.units

    def set_units(self, units: str) -> None:
        """Units printed after every value, e.g. ``graph.set_units("V")``."""
        if self._series.set_units(units):
            self._update_if_data()

    @property
    def range(self) -> tuple[float, float]:
        return self._series.range

    def set_range(
        self,
        min_: float | tuple[float, float],
        max_: Optional[float] = None,
    ) -> None:
        """Visible data range. A point equal to ``max`` is drawn at the top.

        Accepts either two numbers or a ``(min, max)`` pair. Ranges with
        ``max <= min`` are ignored.
        """
        if max_ is None:
            min_, max_ = min_  # type: ignore
        if not max_ > min_:  # type: ignore
            log(f"Ignoring empty range [{min_}, {max_}]",
                color=theme.LOG_WARNING)
            return
        if self._series.set_range(min_, max_):  # type: ignore
            self._update_if_data()

    @property
    def point_width(self) -> int:
        return self._series.point_width

    def set_point_width(self, width: int) -> None:
        """Horizontal distance in pixels between consecutive points."""
        if width < 1:
            log(f"Ignoring point width {width}, must be at least 1",
                color=theme.LOG_WARNING)
            return
        if self._series.set_point_width(width):
            self._series.trim(self.width())
            self._update_if_data()

    @property
    def reference_points(self) -> tuple[float, ...]:
        return self._series.reference_points

    def set_reference_points(self, points: Iterable[float]) -> None:
        """Levels besides min and max that get a label and a grid line."""
        if self._series.set_reference_points(points):
            self.update()

    @property
    def grid_pitch(self) -> float:
        return self._series.grid_pitch

    def set_grid_pitch(self, pitch: float) -> None:
        """Grid spacing in data units, used both ways. Default is 10."""
        if self._series.set_grid_pitch(pitch):
            self.update()

    # style related parameters

    @property
    def background_brush(self) -> QBrush:
        return QBrush(self._background_brush)

    def set_background_brush(self, brush: QBrush) -> None:
        if brush != self._background_brush:
            self._background_brush = QBrush(brush)
            self.update()

    @property
    def grid_pen(self) -> QPen:
        return QPen(self._grid_pen)

    def set_grid_pen(self, pen: QPen) -> None:
        if pen != self._grid_pen:
            self._grid_pen = QPen(pen)
            self.update()

    @property
    def data_line_pen(self) -> QPen:
        return QPen(self._data_line_pen)

    def set_data_line_pen(self, pen: QPen) -> None:
        if pen != self._data_line_pen:
            self._data_line_pen = QPen(pen)
            self._update_if_data()

    @property
    def axis_color(self) -> QColor:
        return QColor(self._axis_color)

    def set_axis_color(self, color: QColor) -> None:
        """Color of the min, max and reference labels."""
        if color != self._axis_color:
            self._axis_color = QColor(color)
            self.update()

    @property
    def axis_font(self) -> QFont:
        return QFont(self._axis_font)

    def set_axis_font(self, font: QFont) -> None:
        if font != self._axis_font:
            self._axis_font = QFont(font)
            self.update()

    @property
    def label_color(self) -> QColor:
        return QColor(self._label_color)

    def set_label_color(self, color: QColor) -> None:
        """Color of the current value in the top right corner."""
        if color != self._label_color:
            self._label_color = QColor(color)
            self.update()

    @property
    def label_font(self) -> QFont:
        return QFont(self._label_font)

    def set_label_font(self, font: QFont) -> None:
        if font != self._label_font:
            self._label_font = QFont(font)
            self._update_if_data()

    # adding and clearing data points

    def append_point(self, value: float) -> None:
        self._series.append(value, self.width())
        self.update()

    def clear(self) -> None:
        self._series.clear()
        self.update()

    def resizeEvent(self, event: QResizeEvent) -> None:
        self._series.trim(event.size().width())
        super().resizeEvent(event)

    def paintEvent(self, event) -> None:
        w, h = self.width(), self.height()
        series = self.series
        p = QPainter(self)
        p.setRenderHint(
            QPainter.RenderHint.Antialiasing,
            bool(pg.getConfigOption("antialias")),
        )
        p.fillRect(self.rect(), self._background_brush)

        p.setPen(self._grid_pen)
        for x in series.vertical_grid(w, h):
            p.drawLine(QPointF(x, 0), QPointF(x, h))
        for y in series.horizontal_grid(h):
            p.drawLine(QPointF(0, y), QPointF(w, y))

        if len(series) > 1:
            xs, ys = series.polyline(w, h)
            p.setPen(self._data_line_pen)
            p.setBrush(Qt.BrushStyle.NoBrush)
            p.drawPolyline(QPolygonF([
                QPointF(float(x), float(y)) for x, y in zip(xs, ys)
            ]))

        inner = QRectF(self.rect().adjusted(
            LABEL_MARGIN, LABEL_MARGIN, -LABEL_MARGIN, -LABEL_MARGIN,
        ))
        min_, max_ = series.range
        p.setPen(self._axis_color)
        p.setFont(self._axis_font)
        p.drawText(
            inner,
            series.format_value(max_),
            _text_option(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft),
        )
        p.drawText(
            inner,
            series.format_value(min_),
            _text_option(
                Qt.AlignmentFlag.AlignBottom | Qt.AlignmentFlag.AlignLeft
            ),
        )

        label_height = QFontMetrics(self._axis_font).height()
        for point in series.reference_points:
            y = float(series.to_pixels(point, h))
            p.drawText(
                QRectF(
                    LABEL_MARGIN, y - label_height / 2,
                    w - LABEL_MARGIN, label_height,
                ),
                series.format_value(point),
                _text_option(
                    Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft
                ),
            )

        current = series.format_current()
        if current is not None:
            p.setPen(self._label_color)
            p.setFont(self._label_font)
            p.drawText(
                inner,
                current,
                _text_option(
                    Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignRight
                ),
            )
        p.end()
