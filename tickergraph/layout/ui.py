from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (QApplication, QGridLayout, QLabel, QMenu,
                             QMenuBar, QPushButton, QSpinBox, QStatusBar,
                             QVBoxLayout, QWidget)
from pyqtgraph.dockarea import Dock, DockArea

from .. import __version__, settings, theme
from ..tools import LoggingTextEdit, setup_logger
from .graph import TickerGraph

TITLE = f"Ticker Graph Demo [{__version__}]"


class UI_MainWindow(QWidget):

    def setup_UI(self, form: QWidget) -> None:
        form.setWindowTitle(TITLE)

        screen_geometry = QApplication.primaryScreen().availableGeometry()
        relative_size = settings.get("window/relative_size")
        width = int(screen_geometry.width() * relative_size)
        height = int(screen_geometry.height() * relative_size)
        form.setGeometry(
            (screen_geometry.width() - width) // 2,
            (screen_geometry.height() - height) // 2,
            width,
            height,
        )

        self.dock_area = DockArea()
        self.setup_docks(width, height)
        form.setCentralWidget(self.dock_area)

        self.setup_logger()
        self.setup_graphs()
        self.setup_controls()
        self.setup_menu_and_status_bar()
        form.setMenuBar(self.menubar)
        form.setStatusBar(self.statusbar)
        self.assign_tooltips()

    def setup_docks(self, width: int, height: int) -> None:
        side_size = int(0.25 * width)
        self.dock_graphs = Dock(
            "Graphs",
            size=(width - side_size, height),
            hideTitle=True,
        )
        self.dock_controls = Dock(
            "Controls",
            size=(side_size, 0.3 * height),
            hideTitle=True,
        )
        self.dock_log = Dock(
            "Log",
            size=(side_size, 0.7 * height),
            hideTitle=True,
        )
        self.dock_area.addDock(self.dock_graphs, 'left')
        self.dock_area.addDock(self.dock_controls, 'right', self.dock_graphs)
        self.dock_area.addDock(self.dock_log, 'bottom', self.dock_controls)

    def setup_logger(self) -> None:
        logger = LoggingTextEdit(settings.get("viewer/font_size_log"))
        container = QWidget()
        layout = QVBoxLayout()
        layout.addWidget(logger)
        container.setLayout(layout)
        self.dock_log.addWidget(container)
        self.logger = logger
        setup_logger(logger)

    def _add_graph(self, layout: QVBoxLayout, title: str) -> TickerGraph:
        label = QLabel(title)
        label.setStyleSheet(theme.STYLE_GRAPH_TITLE)
        layout.addWidget(label)
        graph = TickerGraph()
        layout.addWidget(graph, 1)
        return graph

    def setup_graphs(self) -> None:
        container = QWidget()
        layout = QVBoxLayout()
        self.voltage_graph = self._add_graph(layout, "Voltage")
        self.temperature_graph = self._add_graph(layout, "Temperature")
        self.speed_graph = self._add_graph(layout, "Speed")
        container.setLayout(layout)
        self.dock_graphs.addWidget(container)

    def setup_controls(self) -> None:
        container = QWidget()
        layout = QGridLayout()

        heading = QLabel("Feed")
        heading.setStyleSheet(theme.STYLE_HEADING)
        layout.addWidget(heading, 0, 0, 1, 2)

        self.button_pause = QPushButton("Pause")
        self.button_pause.setCheckable(True)
        layout.addWidget(self.button_pause, 1, 0)
        self.button_clear = QPushButton("Clear")
        layout.addWidget(self.button_clear, 1, 1)

        layout.addWidget(QLabel("Update period:"), 2, 0)
        self.spinbox_period = QSpinBox()
        self.spinbox_period.setRange(10, 5000)
        self.spinbox_period.setSingleStep(10)
        self.spinbox_period.setSuffix(" ms")
        self.spinbox_period.setValue(settings.get("timer/update_period_ms"))
        layout.addWidget(self.spinbox_period, 2, 1)

        layout.setRowStretch(3, 1)
        container.setLayout(layout)
        self.dock_controls.addWidget(container)

    def setup_menu_and_status_bar(self) -> None:
        self.menubar = QMenuBar()

        file_menu = QMenu("File", self)
        file_menu.setToolTipsVisible(True)
        self.action_clear = file_menu.addAction("Clear")
        file_menu.addSeparator()
        self.action_restart = file_menu.addAction("Restart")
        self.action_quit = file_menu.addAction("Quit")
        self.menubar.addMenu(file_menu)

        view_menu = QMenu("View", self)
        view_menu.setToolTipsVisible(True)
        self.action_pause = view_menu.addAction("Pause")
        self.action_pause.setCheckable(True)
        self.menubar.addMenu(view_menu)

        font_status = QFont()
        font_status.setPointSize(settings.get("viewer/font_size_status_bar"))

        self.statusbar = QStatusBar()
        self.tick_label = QLabel("")
        self.tick_label.setFont(font_status)
        self.statusbar.addPermanentWidget(self.tick_label)
        self.state_label = QLabel("")
        self.state_label.setFont(font_status)
        self.statusbar.addWidget(self.state_label)

    def assign_tooltips(self) -> None:
        self.button_pause.setToolTip("Stop or resume feeding new points")
        self.button_clear.setToolTip("Remove all points from every graph")
        self.spinbox_period.setToolTip(
            "Time between two new points, applies to all graphs"
        )
        self.action_clear.setToolTip("Remove all points from every graph")
        self.action_restart.setToolTip("Rebuild the window from the settings file")
