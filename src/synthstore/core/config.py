"""
URI descriptor parsing.

A workload URI looks like::

    workload:///csv/<generator>/<table>?version=<v>&row-start=<n>&row-end=<m>&<flag>=<value>

and is turned into an immutable GenerationRequest. Nothing here touches the
generator registry: all errors raised are ConfigError subclasses.
"""
import re
from dataclasses import dataclass
from typing import Tuple
from urllib.parse import parse_qs, quote, unquote, urlencode, urlsplit

from synthstore.core.errors import (
    BadRowBound,
    MalformedPath,
    MissingVersion,
    UnsupportedFormat,
)

SCHEME = "workload"
SUPPORTED_FORMATS = ("csv",)

VERSION_PARAM = "version"
ROW_START_PARAM = "row-start"
ROW_END_PARAM = "row-end"
RESERVED_PARAMS = (VERSION_PARAM, ROW_START_PARAM, ROW_END_PARAM)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class GenerationRequest:
    """
    Fully validated, versioned generation request.
    row_end == 0 means "up to the table's row count".
    """
    format: str
    generator_name: str
    generator_version: str
    table_name: str
    row_start: int = 0
    row_end: int = 0
    flags: Tuple[str, ...] = ()

    @property
    def bounded(self) -> bool:
        return self.row_end != 0

    def to_uri(self) -> str:
        """
        Re-encode the request as a workload URI that parses back to an equal request.
        """
        path = "/".join(quote(p, safe="") for p in
                        (self.format, self.generator_name, self.table_name))
        query = [(VERSION_PARAM, self.generator_version)]
        if self.row_start:
            query.append((ROW_START_PARAM, str(self.row_start)))
        if self.row_end:
            query.append((ROW_END_PARAM, str(self.row_end)))
        for flag in self.flags:
            key, _, value = flag[2:].partition("=")
            query.append((key, value))
        return f"{SCHEME}:///{path}?{urlencode(query)}"


def _parse_int64(param: str, raw: str) -> int:
    if not _INT_RE.fullmatch(raw):
        raise BadRowBound(param, raw)
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise BadRowBound(param, raw, "out of 64-bit range")
    if value < 0:
        raise BadRowBound(param, raw, "must not be negative")
    return value


def parse_uri(uri: str) -> GenerationRequest:
    """
    Parses a workload URI (scheme optional) into a GenerationRequest.

    Raises:
        MalformedPath: path is not exactly /<format>/<generator>/<table>.
        MissingVersion: no version query parameter.
        BadRowBound: row-start / row-end not a non-negative 64-bit integer,
            or row-end below row-start.
        UnsupportedFormat: format other than csv (case-insensitive).
    """
    parts = urlsplit(uri)
    segments = parts.path.strip("/").split("/")
    if len(segments) != 3 or not all(segments):
        raise MalformedPath(parts.path)
    fmt, generator, table = (unquote(s) for s in segments)

    query = parse_qs(parts.query, keep_blank_values=True)
    if VERSION_PARAM not in query:
        raise MissingVersion()
    version = query.pop(VERSION_PARAM)[0]

    bounds = {}
    for param in (ROW_START_PARAM, ROW_END_PARAM):
        values = query.pop(param, None)
        raw = values[0] if values else ""
        bounds[param] = _parse_int64(param, raw) if raw else 0

    row_start, row_end = bounds[ROW_START_PARAM], bounds[ROW_END_PARAM]
    if row_end and row_end < row_start:
        raise BadRowBound(ROW_END_PARAM, str(row_end),
                          f"must not be below {ROW_START_PARAM} {row_start}")

    flags = tuple(f"--{key}={value}"
                  for key, values in query.items() for value in values)

    if fmt.lower() not in SUPPORTED_FORMATS:
        raise UnsupportedFormat(fmt)

    return GenerationRequest(
        format=fmt,
        generator_name=generator,
        generator_version=version,
        table_name=table,
        row_start=row_start,
        row_end=row_end,
        flags=flags,
    )
