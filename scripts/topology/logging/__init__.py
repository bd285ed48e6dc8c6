import logging
import sys
from typing import Union

LEVEL_COLORS = {
    "DEBUG": "\x1b[36m",
    "INFO": "\x1b[32m",
    "WARNING": "\x1b[33m",
    "ERROR": "\x1b[31m",
    "CRITICAL": "\x1b[41m",
}
RESET = "\x1b[0m"


class ColoredFormatter(logging.Formatter):
    def __init__(self, fmt: str, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        color = LEVEL_COLORS.get(levelname, "") if self.use_color else ""
        record.levelname = f"{color}{levelname}{RESET}" if color else levelname
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class Logger:
    """Console logger writing to stderr, so stdout stays free for output."""

    def __init__(self, name: str, level: Union[str, int] = "INFO"):
        self.name = name
        self.logger = logging.getLogger(name)
        self._set_level(level)
        self._setup_handlers()

    def _set_level(self, level: Union[str, int]) -> None:
        if isinstance(level, int):
            level_value = level
        else:
            level_value = logging.getLevelName(level.upper())
            if isinstance(level_value, str):
                level_value = logging.INFO
        self.logger.setLevel(level_value)

    def _setup_handlers(self) -> None:
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)

        console_format = "[%(levelname)s] %(name)s: %(message)s"
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(ColoredFormatter(console_format, use_color=sys.stderr.isatty()))
        self.logger.addHandler(console_handler)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self.logger.info(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self.logger.error(msg, *args, **kwargs)


__all__ = ["Logger", "ColoredFormatter"]
