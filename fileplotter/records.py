"""Text-to-point parsing.

Two grammars are supported:

* the default token grammar, where the whole body is a whitespace separated
  stream of ``x y [{R,G,B} [[S]]]`` records, and
* a line grammar driven by a record template (``##FORMAT: (%y...%x)``), where
  each line is one record and specifiers may follow the template anywhere.

Header directives (``##KEY: value``) at the very top of a file adjust the
parser configuration before the body is read.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import math
import re
from typing import NoReturn, Sequence

from fileplotter.errors import ParseError
from fileplotter.points import BLACK, DEFAULT_POINT_SIZE, RGB, PlotPoint

LOGGER = logging.getLogger(__name__)

COLOR_PATTERN = re.compile(r"\{(\d{1,3}),(\d{1,3}),(\d{1,3})\}")
SIZE_PATTERN = re.compile(r"\[(\d+)\]")
REAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
HEADER_PATTERN = re.compile(r"##\s*(?P<key>[^:]+?)\s*:\s*(?P<value>.+)")
TOKEN_PATTERN = re.compile(r"\S+")

_TEMPLATE_FIELD = re.compile(r"(%[xy])")


@dataclass(frozen=True)
class ParserConfig:
    default_color: RGB = BLACK
    default_size: int = DEFAULT_POINT_SIZE
    record_pattern: str | None = None

    def __post_init__(self) -> None:
        if len(self.default_color) != 3 or any(c < 0 for c in self.default_color):
            raise ValueError("default_color must be three non-negative integers")
        if self.default_size < 0:
            raise ValueError("default_size must be >= 0")
        if self.record_pattern is not None:
            compile_record_template(self.record_pattern)


@dataclass(frozen=True)
class Token:
    text: str
    line: int


def parse_points(text: str, config: ParserConfig | None = None) -> list[PlotPoint]:
    """Parse a whole document into points, all or nothing.

    Raises ParseError on the first malformed record; no partial result is returned.
    """
    lines = text.splitlines()
    config, body_start = parse_header(lines, config or ParserConfig())
    body = lines[body_start:]
    if config.record_pattern is None:
        points = parse_tokens(tokenize(body, first_line=body_start + 1), config)
    else:
        points = parse_template_records(body, config, first_line=body_start + 1)
    LOGGER.info("parsed %d point(s)", len(points))
    return points


def tokenize(lines: Sequence[str], *, first_line: int = 1) -> list[Token]:
    tokens: list[Token] = []
    for offset, line in enumerate(lines):
        for match in TOKEN_PATTERN.finditer(line):
            tokens.append(Token(text=match.group(0), line=first_line + offset))
    return tokens


def parse_header(lines: Sequence[str], config: ParserConfig) -> tuple[ParserConfig, int]:
    """Apply leading ``##KEY: value`` directives.

    Returns the resulting config and the index of the first body line. Blank
    lines between directives are skipped; the first other line ends the header.
    """
    index = 0
    while index < len(lines):
        stripped = lines[index].strip()
        if not stripped:
            index += 1
            continue
        match = HEADER_PATTERN.fullmatch(stripped)
        if match is None:
            break
        try:
            config = apply_directive(config, match.group("key"), match.group("value"))
        except ValueError as exc:
            LOGGER.error("malformed header directive at line %d: %r (%s)", index + 1, stripped, exc)
            raise ParseError("malformed header directive", record=stripped, line=index + 1) from exc
        index += 1
    return config, index


def apply_directive(config: ParserConfig, key: str, value: str) -> ParserConfig:
    name = key.strip().upper()
    value = value.strip()
    if name == "FORMAT":
        return replace(config, record_pattern=value)
    if name == "SIZEDEFAULT":
        if not value.isdigit():
            raise ValueError(f"SIZEDEFAULT must be a non-negative integer: {value!r}")
        return replace(config, default_size=int(value))
    if name == "COLORDEFAULT":
        match = COLOR_PATTERN.fullmatch(value)
        if match is None:
            raise ValueError(f"COLORDEFAULT must use {{R,G,B}} format: {value!r}")
        return replace(config, default_color=_color_from_match(match))
    LOGGER.warning("ignoring unknown header directive %r", key.strip())
    return config


def parse_tokens(tokens: Sequence[Token], config: ParserConfig) -> list[PlotPoint]:
    points: list[PlotPoint] = []
    i = 0
    count = len(tokens)
    while i < count:
        if i + 1 >= count:
            _fail(tokens[i].text, tokens[i].line, "token stream ends mid-pair")
        x_token = tokens[i]
        y_token = tokens[i + 1]
        try:
            x = parse_real(x_token.text)
            y = parse_real(y_token.text)
        except ValueError as exc:
            _fail(f"{x_token.text} {y_token.text}", x_token.line, str(exc), cause=exc)
        i += 2

        color = config.default_color
        size = config.default_size
        color_match = COLOR_PATTERN.fullmatch(tokens[i].text) if i < count else None
        if color_match is not None:
            color = _color_from_match(color_match)
            i += 1
            # a size specifier is only recognized right after a color specifier
            size_match = SIZE_PATTERN.fullmatch(tokens[i].text) if i < count else None
            if size_match is not None:
                size = int(size_match.group(1))
                i += 1

        points.append(PlotPoint(x=x, y=y, color=color, size=size))
    return points


def parse_template_records(lines: Sequence[str], config: ParserConfig, *, first_line: int = 1) -> list[PlotPoint]:
    if config.record_pattern is None:
        raise ValueError("record_pattern is required for template parsing")
    pattern = compile_record_template(config.record_pattern)
    points: list[PlotPoint] = []
    for offset, raw in enumerate(lines):
        line_no = first_line + offset
        text = raw.strip()
        if not text:
            continue
        match = pattern.match(text)
        if match is None:
            LOGGER.debug("skipping line %d: does not match record template", line_no)
            continue
        try:
            x = parse_real(match.group("x").strip())
            y = parse_real(match.group("y").strip())
        except ValueError as exc:
            _fail(text, line_no, str(exc), cause=exc)

        trailer = match.group("spec") or ""
        color = config.default_color
        color_match = COLOR_PATTERN.search(trailer)
        if color_match is not None:
            color = _color_from_match(color_match)
        size = config.default_size
        size_match = SIZE_PATTERN.search(trailer)
        if size_match is not None:
            size = int(size_match.group(1))
        points.append(PlotPoint(x=x, y=y, color=color, size=size))
    return points


def compile_record_template(template: str) -> re.Pattern[str]:
    """Turn a ``%x``/``%y`` template into a regex; other text is literal.

    Only the first occurrence of each placeholder captures.
    """
    if "%x" not in template or "%y" not in template:
        raise ValueError(f"record template must contain %x and %y: {template!r}")
    parts: list[str] = []
    seen: set[str] = set()
    for piece in _TEMPLATE_FIELD.split(template):
        if piece in ("%x", "%y") and piece not in seen:
            seen.add(piece)
            parts.append(f"(?P<{piece[1]}>.+?)")
        else:
            parts.append(re.escape(piece))
    parts.append(r"(?:\s+(?P<spec>.*)|$)")
    return re.compile("".join(parts))


def parse_real(text: str) -> float:
    if REAL_PATTERN.fullmatch(text) is None:
        raise ValueError(f"not a real number: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"coordinate out of range: {text!r}")
    return value


def _color_from_match(match: re.Match[str]) -> RGB:
    return (int(match.group(1)), int(match.group(2)), int(match.group(3)))


def _fail(record: str, line: int, reason: str, *, cause: Exception | None = None) -> NoReturn:
    LOGGER.error("malformed record at line %d: %r (%s)", line, record, reason)
    raise ParseError("malformed file", record=record, line=line) from cause
