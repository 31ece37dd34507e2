"""Adapt desktop GLSL shader source for OpenGL ES 3.0."""

from __future__ import annotations

__all__ = ["FRAGMENT_SHADER", "VERTEX_SHADER", "translate_shader"]

FRAGMENT_SHADER = 0x8B30
VERTEX_SHADER = 0x8B31

_HEADER = "#version 300 es\n\nprecision mediump float;\n"
_WHITESPACE = " \t\n\v\f\r"


def _remove_layout(line: str) -> str:
    position = line.find("in")
    if position > 0:
        return line[position:]
    return line


def _source_lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def translate_shader(source: str, shader_type: int | None = None) -> str:
    """Return ``source`` rewritten for OpenGL ES 3.0.

    The version line is replaced by an ES header, leading whitespace is
    stripped, layout qualifiers are dropped and ``texture2D`` becomes
    ``texture``. ``shader_type`` is accepted for either shader stage.
    """
    parts = [_HEADER]
    for line in _source_lines(source):
        line = line.lstrip(_WHITESPACE)
        if line.startswith("layout"):
            line = _remove_layout(line)
        elif line.startswith("#version"):
            line = ""
        line = line.replace("texture2D", "texture")
        parts.append(line + "\n")
    return "".join(parts)