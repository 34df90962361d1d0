"""
Source Normalizer
=================

First stage of the pipeline: strips ``//`` comments and surrounding
whitespace, and drops lines that end up empty. No line is rejected
here; malformed instructions are reported by the encoder.

>>> normalize(["// Adds 1", "  @i   // counter", "", "M=M+1"])
['@i', 'M=M+1']
"""

from typing import Iterable, Iterator


COMMENT_MARKER = "//"


def normalize_line(line: str) -> str:
    """Remove a trailing comment and surrounding whitespace from one line."""
    return line.split(COMMENT_MARKER, 1)[0].strip()


def numbered(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """
    Yield (line_number, text) for every non-blank normalized line.

    Line numbers are 1-based and refer to the raw input, so they can be
    used to point error messages at the raw source.
    """
    for line_number, line in enumerate(lines, start=1):
        text = normalize_line(line)
        if text:
            yield line_number, text


def normalize(lines: Iterable[str]) -> list[str]:
    """Normalize raw source lines, keeping only non-blank instruction texts."""
    return [text for _, text in numbered(lines)]
