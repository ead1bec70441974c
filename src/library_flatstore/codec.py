"""
Delimited text codec used by every entity.

A record is a sequence of text fields joined by ``SEPARATOR``. A field is
wrapped in double quotes when it contains the separator, a quote or a
newline; quotes inside a quoted field are doubled. Absent values encode
as the empty string.
"""

from collections.abc import Callable, Iterable, Iterator, Sequence
from datetime import date
from uuid import UUID

from .errors import MalformedRecordError

SEPARATOR = ","
QUOTE = '"'

_NEEDS_QUOTING = (SEPARATOR, QUOTE, "\n")


def escape(value: str | None) -> str:
    """Return ``value`` ready to be placed between separators."""
    if not value:
        return ""
    if any(marker in value for marker in _NEEDS_QUOTING):
        return QUOTE + value.replace(QUOTE, QUOTE * 2) + QUOTE
    return value


def encode(fields: Iterable[str | None]) -> str:
    """Join ``fields`` into one record line."""
    return SEPARATOR.join(escape(field) for field in fields)


def decode(line: str) -> list[str]:
    """Split one record line back into its fields.

    A quote toggles quoting, except that two quotes in a row inside a
    quoted field stand for one literal quote. The separator only splits
    fields outside quotes, and the last field ends at end of line.
    """
    fields: list[str] = []
    current: list[str] = []
    inside_quotes = False
    index = 0

    while index < len(line):
        char = line[index]
        if char == QUOTE:
            if inside_quotes and index + 1 < len(line) and line[index + 1] == QUOTE:
                current.append(QUOTE)
                index += 1
            else:
                inside_quotes = not inside_quotes
        elif char == SEPARATOR and not inside_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        index += 1

    fields.append("".join(current))
    return fields


def _strip_cr(record: str) -> str:
    return record[:-1] if record.endswith("\r") else record


def split_records(
    text: str, is_complete: Callable[[str], bool] | None = None
) -> Iterator[str]:
    """Yield the logical records in a file's text.

    Newlines inside quoted fields belong to the field, not the record
    boundary. A ``\\r`` right before a record boundary is dropped.

    A record that spans lines but is still inside quotes at end of text,
    or that ``is_complete`` rejects, was opened by a stray quote. Its first
    line is yielded on its own and scanning resumes on the next line, so
    one bad row cannot absorb the rows after it.
    """
    start = 0
    index = 0
    inside_quotes = False

    while index <= len(text):
        at_end = index == len(text)
        if not at_end and text[index] == QUOTE:
            # Doubled quotes flip twice, so the state stays correct.
            inside_quotes = not inside_quotes
        elif at_end or (text[index] == "\n" and not inside_quotes):
            record = _strip_cr(text[start:index])
            spans_lines = "\n" in record
            rejected = is_complete is not None and not is_complete(record)
            if spans_lines and (inside_quotes or rejected):
                line_end = text.index("\n", start)
                yield _strip_cr(text[start:line_end])
                start = index = line_end + 1
                inside_quotes = False
                continue
            if record or not at_end:
                yield record
            start = index + 1
        index += 1
