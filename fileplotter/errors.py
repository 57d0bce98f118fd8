from __future__ import annotations


class PlotterError(Exception):
    """Base class for unrecoverable plotter failures."""


class ArgumentError(PlotterError):
    pass


class FileAccessError(PlotterError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class ParseError(PlotterError):
    """Raised for any malformed record; carries the offending raw text."""

    def __init__(self, message: str = "malformed file", *, record: str | None = None, line: int | None = None) -> None:
        self.message = message
        self.record = record
        self.line = line
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.record is None:
            return self.message
        where = f" at line {self.line}" if self.line is not None else ""
        return f"{self.message}: {self.record!r}{where}"
