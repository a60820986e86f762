"""Parser and serializer for the section/key=value text format."""

from typing import Iterable, Mapping

from .text import trim

Sections = dict[str, dict[str, str]]


def parse(lines: Iterable[str]) -> Sections:
    """Build a section mapping from lines of text.

    Empty lines and ``;`` comments are skipped. ``[name]`` opens a
    section; entries before the first header land in the ``""``
    section. ``key = value`` lines split at the first ``=``. Anything
    else is ignored.
    """
    sections: Sections = {}
    current = ""
    for raw in lines:
        line = raw.rstrip("\n")
        if not line or line[0] == ";":
            continue

        if line[0] == "[" and line[-1] == "]":
            current = line[1:-1]
            continue

        key, eq, value = line.partition("=")
        if eq:
            sections.setdefault(current, {})[trim(key)] = trim(value)
    return sections


def dumps(sections: Mapping[str, Mapping[str, str]]) -> str:
    """Serialize sections, sorted by name then key."""
    chunks: list[str] = []
    for name in sorted(sections):
        chunks.append(f"[{name}]\n")
        entries = sections[name]
        for key in sorted(entries):
            chunks.append(f"{key} = {entries[key]}\n")
        chunks.append("\n")
    return "".join(chunks)
