import sys

import pyqtgraph as pg
import qdarkstyle
from PyQt6.QtCore import QCoreApplication
from PyQt6.QtWidgets import QApplication

from . import settings
from .layout.main import MainWindow


def run() -> int:
    pg.setConfigOptions(antialias=True)
    exit_code = 0
    restart_exit_code = settings.get("app/restart_exit_code")
    app = QApplication(sys.argv)
    app.setStyleSheet(qdarkstyle.load_stylesheet(qt_api='pyqt6'))
    while True:
        app = QCoreApplication.instance()
        main_window = MainWindow()
        main_window.show()
        exit_code = app.exec()
        if exit_code != restart_exit_code:
            break
        main_window.deleteLater()
    return exit_code
