"""Indented text rendering of JSON trees and person profiles."""

from collections.abc import Mapping
import math
import sys

from models import RELATIONSHIP_FIELDS, PersonProfile


INDENT_STRING = "    "

ESCAPES = {
    "\b": "\\b",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\\": "\\\\",
    '"': '\\"',
}


def escape_string(value: str | None) -> str:
    """Double-quote a string, backslash-escaping the usual suspects; None gives "null"."""
    if value is None:
        return "null"

    out = ['"']
    for c in value:
        if c in ESCAPES:
            out.append(ESCAPES[c])
        elif c < " ":
            out.append(f"\\u{ord(c):04x}")
        else:
            out.append(c)
    out.append('"')
    return "".join(out)


def _scalar(value) -> str:
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return escape_string(value)
    if isinstance(value, float) and not math.isfinite(value):
        # Spelled the way json.dumps and json.loads spell them
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    return repr(value)


class _Lines:
    """Accumulates output lines; a comma is only ever added to a finished line."""

    def __init__(self, indent_string: str):
        self.indent_string = indent_string
        self.lines: list[str] = []

    def add(self, indent: int, text: str):
        self.lines.append(self.indent_string * indent + text)

    def comma(self):
        self.lines[-1] += ","


def _format(lines: _Lines, indent: int, name, thing, show_provenance: bool):
    prefix = ""
    if show_provenance and isinstance(thing, PersonProfile):
        prefix = f"{thing.provenance.name} "
    if name is not None:
        prefix += f"{escape_string(str(name))} : "

    if isinstance(thing, Mapping):
        lines.add(indent, prefix + "{")
        for position, (key, value) in enumerate(thing.items()):
            if position:
                lines.comma()
            if isinstance(thing, PersonProfile) and key in RELATIONSHIP_FIELDS:
                relatives = thing.relatives(key)
                if relatives is not None:
                    value = list(relatives)
            _format(lines, indent + 1, key, value, show_provenance)
        lines.add(indent, "}")
    elif isinstance(thing, (list, tuple)):
        lines.add(indent, prefix + "[")
        for position, value in enumerate(thing):
            if position:
                lines.comma()
            _format(lines, indent + 1, None, value, show_provenance)
        lines.add(indent, "]")
    else:
        lines.add(indent, prefix + _scalar(thing))


def pretty_format(
    thing,
    name: str | None = None,
    indent: int = 0,
    show_provenance: bool = False,
    indent_string: str = INDENT_STRING,
) -> str:
    """
    Render a JSON value or a PersonProfile as indented text, one value per line.

    Objects and arrays open on the line of their name and close on a line of
    their own; siblings are separated by commas. A PersonProfile prints as the
    object it was built from, except that its Parents, Children, Spouses and
    Siblings come from the profile's own accessors whenever those are
    available, so a printed profile shows the same relatives as the profile.

    Without ``show_provenance`` the output of a valid JSON value parses back as
    JSON.
    """
    lines = _Lines(indent_string)
    _format(lines, indent, name, thing, show_provenance)
    return "\n".join(lines.lines) + "\n"


def pretty_print(thing, name: str | None = None, file=None, **kwargs):
    """Write pretty_format() output to ``file`` (stdout by default)."""
    out = file if file is not None else sys.stdout
    out.write(pretty_format(thing, name, **kwargs))
    out.flush()
