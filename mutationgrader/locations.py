"""Location range parsing

A graded unit names the source regions it covers with the same notation the
mutation tool uses for its ``mutate`` globs::

    src/lib/Controller.ts:42          a single line
    src/lib/Controller.ts:42-57       an inclusive line range

Column-qualified locations (``file:line:column``) are not supported.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from mutationgrader.exceptions import UnsupportedLocationFormat


@dataclass(frozen=True)
class LocationRange:
    """File-and-line interval used to attribute mutants to a graded unit"""
    file_name: str  # substring matched against report file paths
    start_line: int  # 1-based, inclusive
    end_line: int  # 1-based, inclusive

    def contains_line(self, line: int) -> bool:
        return self.start_line <= line <= self.end_line


def _parse_line(location: str, text: str) -> int:
    digits = text.strip()
    # ASCII digits only; int() would also take "1_0" and non-Latin numerals
    if not (digits.isascii() and digits.isdigit()):
        raise UnsupportedLocationFormat(location, f"'{text}' is not a line number")
    return int(digits)


def parse_location(location: str) -> LocationRange:
    """
    Parse a location string into a LocationRange.

    Args:
        location: "<file>:<line>" or "<file>:<start>-<end>"

    Returns:
        LocationRange with inclusive start/end lines

    Raises:
        UnsupportedLocationFormat: more than one ':' (column mutators), no
            file or line part, a non-numeric line, or an end line before the start line
    """
    parts = location.split(":")
    if len(parts) > 2:
        raise UnsupportedLocationFormat(location, "no support for column mutators right now")
    if len(parts) < 2 or not parts[0].strip() or not parts[1].strip():
        raise UnsupportedLocationFormat(location, "expected <file>:<line> or <file>:<start>-<end>")

    file_name, line_spec = parts
    if "-" in line_spec:
        start_text, end_text = line_spec.split("-", 1)
        start_line = _parse_line(location, start_text)
        end_line = _parse_line(location, end_text)
    else:
        start_line = end_line = _parse_line(location, line_spec)

    if end_line < start_line:
        raise UnsupportedLocationFormat(location, f"end line {end_line} is before start line {start_line}")

    return LocationRange(file_name=file_name, start_line=start_line, end_line=end_line)


def parse_locations(locations: Iterable[str]) -> Tuple[LocationRange, ...]:
    """Parse every location of a graded unit, preserving order"""
    return tuple(parse_location(location) for location in locations)
