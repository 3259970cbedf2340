"""Shader source preprocessing: expansion of #include directives."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

__all__ = ["PreprocessorConfig", "preprocess_shader"]

_DIRECTIVE = "#include"


@dataclass
class PreprocessorConfig:
    """Named snippets that ``#include "name"`` directives may refer to."""

    includes: List[Tuple[str, str]] = field(default_factory=list)

    def lookup(self, filename: str) -> str:
        """Content of the first include called ``filename``."""
        for name, content in self.includes:
            if name == filename:
                return content
        raise ValueError(f'Include file {filename} is not on "includes" list')


def preprocess_shader(source: str, config: PreprocessorConfig) -> str:
    """Replace every ``#include "name"`` in ``source`` with the named snippet."""
    text = source
    position = 0
    while (start := text.find(_DIRECTIVE, position)) != -1:
        after = text[start + len(_DIRECTIVE):]
        rest = after.lstrip(" ")
        if not rest.startswith('"'):
            raise ValueError(f"malformed #include directive at offset {start}")
        name_start = start + len(_DIRECTIVE) + (len(after) - len(rest)) + 1
        name_end = text.find('"', name_start)
        if name_end == -1:
            raise ValueError(f"unterminated #include file name at offset {start}")
        content = config.lookup(text[name_start:name_end])
        text = text[:start] + content + text[name_end + 1:]
        position = start + len(content)
    return text