""" Provides a logging formatter that understands the style tags used in log messages (e.g. `<subj>` and `<val>`)
and renders them with the cleo formatter. """

from __future__ import annotations

import logging

import typing_extensions as te
from cleo.formatters.formatter import Formatter  # type: ignore[import]
from cleo.formatters.style import Style  # type: ignore[import]


def get_default_formatter(decorated: bool = True) -> Formatter:
    formatter = Formatter(decorated)
    formatter.set_style("subj", Style("blue"))
    formatter.set_style("obj", Style("yellow"))
    formatter.set_style("val", Style("cyan"))
    return formatter


class TerminalColorFormatter(logging.Formatter):
    """A formatter that renders the style tags in log messages as ANSI terminal colors. If *colored* is disabled,
    the tags are removed instead."""

    def __init__(self, fmt: str, colored: bool = True) -> None:
        super().__init__(fmt)
        self.colored = colored
        self.formatter = get_default_formatter(colored)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if not self.colored:
            return self.formatter.remove_format(message)
        return self.formatter.format(message)

    def install(self, target: te.Literal["tty", "notty"] | None = None) -> None:
        """Install the formatter on all stream handlers of the root logger that are attached to a TTY, or otherwise
        on all that are not attached to a TTY based on the *target* value. If no value is specified, it will install
        into TTY-attached stream handlers if #colored is set."""

        if target is None:
            target = "tty" if self.colored else "notty"

        for handler in logging.root.handlers:
            if isinstance(handler, logging.StreamHandler) and handler.stream.isatty():
                if target == "tty":
                    handler.setFormatter(self)
            elif target == "notty":
                handler.setFormatter(self)
