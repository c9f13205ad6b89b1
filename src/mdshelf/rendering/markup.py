"""Markdown to HTML conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

import markdown

DEFAULT_EXTENSIONS: tuple[str, ...] = (
    "nl2br",
    "fenced_code",
    "tables",
    "sane_lists",
    "pymdownx.tilde",
    "pymdownx.magiclink",
)
# Subscript is not part of GitHub Markdown; only ``~~text~~`` is special.
DEFAULT_EXTENSION_CONFIGS: Mapping[str, Mapping[str, Any]] = {
    "pymdownx.tilde": {"subscript": False},
}


@dataclass(slots=True)
class MarkdownRenderer:
    """Thin wrapper around Python-Markdown with line breaks and GFM-style blocks."""

    extensions: Sequence[str] = DEFAULT_EXTENSIONS
    extension_configs: Mapping[str, Mapping[str, Any]] = field(
        default_factory=lambda: DEFAULT_EXTENSION_CONFIGS
    )
    _converter: markdown.Markdown = field(init=False, repr=False)

    def __post_init__(self) -> None:
        configs = {
            name: dict(options)
            for name, options in self.extension_configs.items()
            if name in self.extensions
        }
        self._converter = markdown.Markdown(
            extensions=list(self.extensions),
            extension_configs=configs,
            output_format="html",
        )

    def render(self, text: str) -> str:
        # Reset so footnotes and similar state never leak between documents.
        self._converter.reset()
        return self._converter.convert(text)
