"""Markdown renderers used by the field converter."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from markdown_it import MarkdownIt

from pydgen._constants import DEFAULT_MARKDOWN_PRESET

Renderer = Callable[[str], str]
"""Callable that turns markdown text into HTML."""

PRESETS = ("commonmark", "default", "gfm-like", "zero")


class MarkdownRenderer:
    """Render markdown to HTML with markdown-it.

    The output ends with a newline, so a single paragraph renders as
    ``"<p>...</p>\\n"``.
    """

    def __init__(
        self,
        preset: str = DEFAULT_MARKDOWN_PRESET,
        *,
        options: dict[str, Any] | None = None,
    ) -> None:
        if preset not in PRESETS:
            raise ValueError(
                f"unknown markdown preset: {preset!r}. "
                f"Available: {', '.join(PRESETS)}"
            )
        self.preset = preset
        self._md = MarkdownIt(preset, options)

    def render(self, text: str) -> str:
        if not isinstance(text, str):
            raise TypeError(
                f"markdown renderer expects str, got {type(text).__name__}"
            )
        return self._md.render(text)

    def __call__(self, text: str) -> str:
        return self.render(text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(preset={self.preset!r})"


_REGISTRY: dict[str, MarkdownRenderer] = {}


def get_renderer(name: str = DEFAULT_MARKDOWN_PRESET) -> MarkdownRenderer:
    """Get a shared renderer instance by preset name.

    Args:
        name: Preset name ("commonmark", "default", "gfm-like", "zero").

    Returns:
        A MarkdownRenderer configured with that preset.

    Raises:
        ValueError: If the preset name is unknown.
    """
    renderer = _REGISTRY.get(name)
    if renderer is None:
        renderer = MarkdownRenderer(name)
        _REGISTRY[name] = renderer
    return renderer
