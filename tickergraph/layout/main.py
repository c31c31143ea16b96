import pyqtgraph as pg
from PyQt6.QtCore import QCoreApplication, Qt, QTimer
from PyQt6.QtWidgets import QApplication, QMainWindow

from .. import settings, theme
from ..data.simulation import DemoFeed, Sample
from ..tools import log
from .ui import UI_MainWindow


def restart() -> None:
    QCoreApplication.exit(settings.get("app/restart_exit_code"))


class MainWindow(QMainWindow):

    def __init__(self) -> None:
        super().__init__()

        self.ui = UI_MainWindow()
        self.ui.setup_UI(self)

        seed = settings.get("simulation/seed")
        self.feed = DemoFeed(seed if seed >= 0 else None)

        self.configure_graphs()
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.tick)
        self.setup_connections()
        self.setup_sync()

        self.timer.start(self.ui.spinbox_period.value())
        self.update_statusbar()
        log("Welcome to the ticker graph demo", color=theme.LOG_WELCOME)

    @property
    def graphs(self):
        return (
            self.ui.voltage_graph,
            self.ui.temperature_graph,
            self.ui.speed_graph,
        )

    def configure_graphs(self) -> None:
        # The voltage graph is heavily customized, the temperature graph
        # keeps almost every default.
        voltage = self.ui.voltage_graph
        voltage.set_units("V")
        voltage.set_range(-100, 200)
        voltage.set_data_line_pen(pg.mkPen(theme.PAPER_INK, width=2))
        voltage.set_background_brush(pg.mkBrush(theme.PAPER_BG))
        voltage.set_grid_pitch(50)
        voltage.set_grid_pen(
            pg.mkPen(theme.PAPER_GRID, width=1, style=Qt.PenStyle.DotLine)
        )
        voltage.set_axis_color(pg.mkColor(theme.PAPER_GRID))
        voltage.set_label_color(pg.mkColor(theme.PAPER_GRID))
        voltage.set_point_width(5)
        voltage.set_reference_points([0])

        temperature = self.ui.temperature_graph
        temperature.set_units("°C")
        temperature.set_range(10, 30)
        temperature.set_reference_points([15])

        speed = self.ui.speed_graph
        speed.set_units("km/h")
        speed.set_range(0, 200)
        speed.set_point_width(10)
        speed.set_background_brush(pg.mkBrush(theme.NAVY_BG))
        speed.set_data_line_pen(pg.mkPen(theme.RUST_LINE, width=5))
        speed.set_grid_pitch(35)

    def setup_connections(self) -> None:
        self.ui.button_pause.toggled.connect(self.set_paused)
        self.ui.action_pause.toggled.connect(self.set_paused)
        self.ui.button_clear.clicked.connect(self.clear)
        self.ui.action_clear.triggered.connect(self.clear)
        self.ui.action_restart.triggered.connect(restart)
        self.ui.action_quit.triggered.connect(self.close)
        self.ui.spinbox_period.valueChanged.connect(self.set_period)

    def setup_sync(self) -> None:
        settings.connect_sync(
            self.ui.spinbox_period.valueChanged,
            self.ui.spinbox_period.value,
            self.ui.spinbox_period.setValue,
            "timer/update_period_ms",
        )

    def closeEvent(self, event) -> None:
        self.timer.stop()
        self.save_settings()
        event.accept()

    def save_settings(self) -> None:
        screen_geometry = QApplication.primaryScreen().availableGeometry()
        settings.set(
            "window/relative_size",
            min(1.0, self.width() / screen_geometry.width()),
        )
        settings.write_all()

    def tick(self) -> None:
        sample: Sample = self.feed.step()
        self.ui.voltage_graph.append_point(sample.voltage)
        self.ui.temperature_graph.append_point(sample.temperature)
        self.ui.speed_graph.append_point(sample.speed)
        self.update_statusbar()

    @property
    def paused(self) -> bool:
        return not self.timer.isActive()

    def set_paused(self, paused: bool) -> None:
        if paused == self.paused:
            return
        for control in (self.ui.button_pause, self.ui.action_pause):
            control.blockSignals(True)
            control.setChecked(paused)
            control.blockSignals(False)
        self.ui.button_pause.setText("Resume" if paused else "Pause")
        if paused:
            self.timer.stop()
            log("Feed paused")
        else:
            self.timer.start(self.ui.spinbox_period.value())
            log("Feed resumed")
        self.update_statusbar()

    def set_period(self, period_ms: int) -> None:
        self.timer.setInterval(period_ms)
        log(f"Update period set to {period_ms} ms")

    def clear(self) -> None:
        for graph in self.graphs:
            graph.clear()
        log("Cleared all graphs")

    def update_statusbar(self) -> None:
        self.ui.tick_label.setText(f"Ticks: {self.feed.ticks}")
        self.ui.state_label.setText("Paused" if self.paused else "Running")
