"""Template processing with jinja2."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jinja2

from pydgen._errors import SourceNotFoundError, TemplateRenderError
from pydgen.datafile import (
    find_files,
    load_text_file,
    merge_text_files_by_file_name,
    save_text_file,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemplateOptions:
    """Options of a :func:`process_template` call.

    ``target`` defaults to the template name. Values are HTML-escaped unless
    ``autoescape`` is turned off; use the ``safe`` filter for fields that
    already hold HTML, such as converted markdown.
    """

    source_base_dir: str | Path
    template: str
    target_base_dir: str | Path
    target: str | None = None
    autoescape: bool = True
    strict_undefined: bool = False


def load_partials(base_path: str | Path) -> dict[str, str]:
    """Load every file below ``base_path`` keyed by its bare file name.

    Files are visited in sorted order, so when two files share a name the
    one visited last wins.
    """
    merged = merge_text_files_by_file_name(find_files(base_path))
    partials: dict[str, str] = {}
    for key, content in merged.items():
        partials[Path(key).name] = content
    return partials


def _environment(partials: Mapping[str, str], opts: TemplateOptions) -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.DictLoader(dict(partials)),
        autoescape=opts.autoescape,
        undefined=jinja2.StrictUndefined if opts.strict_undefined else jinja2.Undefined,
        keep_trailing_newline=True,
    )


def render_template(
    raw_template: str,
    context: Mapping[str, Any],
    partials: Mapping[str, str],
    opts: TemplateOptions,
) -> str:
    """Render ``raw_template`` against ``context`` with ``partials`` includable by name."""
    env = _environment(partials, opts)
    try:
        return env.from_string(raw_template).render(context)
    except jinja2.TemplateError as e:
        raise TemplateRenderError(
            "template rendering failed",
            f"failed to render {opts.template}: {e}",
            wrapped=e,
        ) from e


def process_template(context: Mapping[str, Any], opts: TemplateOptions) -> Path:
    """Render a template file against ``context`` and write the result.

    Every file in ``opts.source_base_dir`` is registered as a partial under
    its file name, so templates can ``{% include "header.html" %}``.

    Returns:
        The path of the written file.

    Raises:
        SourceNotFoundError: If the template file does not exist.
        TemplateRenderError: If jinja2 fails to compile or render.
    """
    template_file = Path(opts.source_base_dir, opts.template).resolve()
    result_file = Path(opts.target_base_dir, opts.target or opts.template).resolve()

    if not template_file.is_file():
        raise SourceNotFoundError(
            "template not found",
            f"no such template: {template_file}",
            path=template_file,
        )

    raw_template = load_text_file(template_file)
    partials = load_partials(opts.source_base_dir)

    logger.debug("Render %s with %d partial(s)", template_file, len(partials))
    save_text_file(result_file, render_template(raw_template, context, partials, opts))
    logger.info("Write %s", result_file)
    return result_file
