"""pydgen - Scaffold project trees, render templates and convert markdown fields."""

from __future__ import annotations

try:
    from pydgen._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from pydgen._converter import convert_markdown, get_props_deep
from pydgen._errors import (
    DataFileError,
    PydgenError,
    SourceNotFoundError,
    TargetExistsError,
    TemplateRenderError,
)
from pydgen._renderer import MarkdownRenderer, Renderer, get_renderer
from pydgen.datafile import load_data
from pydgen.files import CopyDirOptions, copy_dir, copy_file
from pydgen.template import TemplateOptions, load_partials, process_template
from pydgen.tree import create_directory_tree

__all__ = [
    "convert_markdown",
    "copy_dir",
    "copy_file",
    "create_directory_tree",
    "get_props_deep",
    "get_renderer",
    "load_data",
    "load_partials",
    "process_template",
    "CopyDirOptions",
    "MarkdownRenderer",
    "Renderer",
    "TemplateOptions",
    "DataFileError",
    "PydgenError",
    "SourceNotFoundError",
    "TargetExistsError",
    "TemplateRenderError",
]
