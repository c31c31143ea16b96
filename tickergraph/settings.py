from pathlib import Path
from typing import Any, Callable, Optional

from PyQt6.QtCore import QSettings

from . import theme
from .tools import log

SETTINGS: "_Settings" = None  # type: ignore


_default_settings = {
    "window/relative_size": 0.6,

    "viewer/font_size_status_bar": 10,
    "viewer/font_size_log": 9,

    "timer/update_period_ms": 100,

    "simulation/seed": -1,

    "app/restart_exit_code": -12341234,
}


class _Settings:

    def __init__(self, file: Optional[Path] = None) -> None:
        if file is None:
            file = Path.cwd() / "_cache.tickergraph"
        self._file = file
        self.select_ini()

    @property
    def file(self) -> Path:
        return self._file

    @file.setter
    def file(self, file: Path) -> None:
        self._file = file
        self.select_ini()

    def select_ini(self) -> None:
        self.settings = QSettings(
            str(self._file),
            QSettings.Format.IniFormat,
        )

    def write_all(self) -> None:
        self.settings.sync()
        for key in _default_settings.keys():
            self.settings.setValue(
                key,
                self.settings.value(
                    key,
                    _default_settings[key],
                    type(_default_settings[key]),
                ),
            )
        self.settings.sync()

    def __getitem__(self, setting: str) -> Any:
        self.settings.sync()
        return self.settings.value(
            setting,
            _default_settings[setting],
            type(_default_settings[setting]),
        )

    def __setitem__(self, setting: str, value: Any) -> None:
        type_ = type(_default_settings[setting])
        if type(value) != type_:
            try:
                value = type_(value)
            except (TypeError, ValueError):
                raise ValueError(
                    f"Setting '{setting}' of type {type_} was given as "
                    f"incorrect type {type(value)}"
                )
        self.settings.setValue(setting, value)


def get(setting: str) -> Any:
    global SETTINGS

    if SETTINGS is None:
        SETTINGS = _Settings()

    return SETTINGS[setting]


def set(setting: str, value: Any) -> None:
    global SETTINGS

    if SETTINGS is None:
        SETTINGS = _Settings()

    SETTINGS[setting] = value


def write_all() -> None:
    global SETTINGS

    if SETTINGS is None:
        SETTINGS = _Settings()

    SETTINGS.write_all()


def new_settings(file: Optional[Path] = None) -> None:
    global SETTINGS
    if SETTINGS is None or file is None:
        SETTINGS = _Settings(file)
    else:
        SETTINGS.file = file


def connect_sync(
    signal,
    value_getter: Callable,
    value_setter: Callable,
    setting: str,
) -> None:
    signal.connect(lambda: set(setting, value_getter()))
    if ((get(setting) != _default_settings[setting])
            or get(setting) != value_getter()):
        try:
            value_setter(get(setting))
        except (TypeError, ValueError):
            log(f"Failed to load setting {setting!r} from the settings file",
                color=theme.LOG_ERROR)
