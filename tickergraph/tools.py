from typing import Any

from PyQt6.QtGui import QColor, QTextCharFormat
from PyQt6.QtWidgets import QTextEdit

LOGGER: Any = None


def log(message: str, color: str | tuple[int, int, int] = "white") -> None:
    if LOGGER is None:
        print(message)
    else:
        LOGGER.log(message, color=color)


def setup_logger(logger: Any) -> None:
    global LOGGER
    LOGGER = logger


class LoggingTextEdit(QTextEdit):

    def __init__(self, font_size: int = 9, parent=None) -> None:
        super().__init__(parent)
        self.font_size = font_size
        self.setReadOnly(True)

    def log(
        self,
        message: Any,
        color: str | tuple[int, int, int] = "white",
    ) -> None:
        cursor = self.textCursor()
        cursor.movePosition(cursor.MoveOperation.End)
        format = QTextCharFormat()
        if isinstance(color, tuple):
            format.setForeground(QColor(*color))
        else:
            format.setForeground(QColor(color))
        format.setFontPointSize(self.font_size)
        cursor.mergeCharFormat(format)
        if message != "\n":
            cursor.insertText(f"> {message}\n")
        self.setTextCursor(cursor)
        self.ensureCursorVisible()
