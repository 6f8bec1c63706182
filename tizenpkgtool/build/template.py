"""config.xml / .project template rendering for tizenpkgtool.

The Tizen platform repo ships its configuration files as templates
(config.xml.tmpl, project.tmpl). After the platform files are copied into
the build directory, each template is rendered with the application
metadata and replaced by the rendered file.

Private Helpers:
    - _result_name: Compute the output file name for a template

Design Principles:
    - Templates are rendered in place, inside the build directory
    - Rendered text is written to <template>.tmp, then moved to its final
      name, then the template is deleted
    - Placeholders are {{name}}, {{id}}, {{version}}, {{description}}
    - Values are XML-escaped; unknown placeholders render empty

Example:
    from pathlib import Path
    from tizenpkgtool.build.template import render_template_file

    rendered = render_template_file(
        Path("build/tizen"), "project.tmpl", metadata, hidden=True
    )
    print(rendered)  # build/tizen/.project
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, TemplateError

from tizenpkgtool.exceptions import TemplateRenderError
from tizenpkgtool.metadata import ApplicationMetadata

TEMPLATE_SUFFIX = ".tmpl"

_ENV = Environment(autoescape=True, keep_trailing_newline=True)


def _result_name(filename: str, hidden: bool) -> str:
    """Strip the .tmpl suffix and add a leading dot for hidden files.

    Example:
        >>> _result_name("config.xml.tmpl", False)
        'config.xml'
        >>> _result_name("project.tmpl", True)
        '.project'
    """
    if not filename.endswith(TEMPLATE_SUFFIX):
        raise TemplateRenderError(f"Template name must end with {TEMPLATE_SUFFIX}: {filename}")

    result = filename[: -len(TEMPLATE_SUFFIX)]
    if hidden:
        result = "." + result
    return result


def render_template(text: str, data: dict[str, Any]) -> str:
    """Substitute {{placeholders}} in text.

    Raises:
        TemplateRenderError: If the template has invalid syntax.
    """
    try:
        return _ENV.from_string(text).render(**data)
    except TemplateError as err:
        raise TemplateRenderError(f"Failed to render template: {err}") from err


def render_template_file(
    build_dir: Path,
    filename: str,
    metadata: ApplicationMetadata,
    hidden: bool = False,
) -> Path:
    """Render a template in build_dir and replace it with the result.

    Args:
        build_dir: Build directory containing the template.
        filename: Template file name relative to build_dir.
        metadata: Values for the placeholders.
        hidden: Prefix the result name with "." (e.g. project.tmpl -> .project).

    Returns:
        Path to the rendered file.

    Raises:
        TemplateRenderError: If the template is missing, cannot be rendered,
            or the rendered file cannot be moved into place.
    """
    from tizenpkgtool.logging import get_global_logger

    logger = get_global_logger()
    template_path = build_dir / filename
    result_path = template_path.with_name(_result_name(template_path.name, hidden))
    tmp_path = template_path.with_name(template_path.name + ".tmp")

    if not template_path.is_file():
        raise TemplateRenderError(f"Template not found: {template_path}")

    logger.verbose("TEMPLATE", f"Rendering {filename} -> {result_path.name}")

    try:
        text = template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise TemplateRenderError(f"Failed to read template {template_path}: {err}") from err

    rendered = render_template(text, metadata.to_dict())

    try:
        tmp_path.write_text(rendered, encoding="utf-8")
        tmp_path.replace(result_path)
        template_path.unlink()
    except OSError as err:
        raise TemplateRenderError(
            f"Failed to install rendered {result_path.name}: {err}"
        ) from err

    logger.debug("TEMPLATE", f"[OK] Wrote {result_path}")
    return result_path
