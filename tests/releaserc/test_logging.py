import logging

from releaserc.util.logging import TerminalColorFormatter


def _record(message: str, *args) -> logging.LogRecord:
    return logging.LogRecord("releaserc", logging.INFO, __file__, 1, message, args, None)


def test__TerminalColorFormatter__strips_tags_when_not_colored():
    formatter = TerminalColorFormatter("%(levelname)s %(message)s", colored=False)
    record = _record("Reading configuration for <subj>%s</subj> from <val>%s</val>", "repo", ".releaserc.json")
    assert formatter.format(record) == "INFO Reading configuration for repo from .releaserc.json"


def test__TerminalColorFormatter__renders_ansi_colors():
    formatter = TerminalColorFormatter("%(message)s")
    output = formatter.format(_record("<subj>main</subj>"))
    assert "\x1b[" in output
    assert "main" in output
    assert "<subj>" not in output
