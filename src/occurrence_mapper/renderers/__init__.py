"""Pure rendering functions: structured data -> HTML strings.

Renderers take a prepared GeoDataFrame (or values derived from it) and
return HTML. No side effects, no I/O, no Prefect decorators; writing the
page to disk happens in ``flows/occurrence_map.py``.

Public API:
  - species_palette: SpeciesStyle, build_species_palette, UNKNOWN_SPECIES
  - occurrence_map: build_occurrence_map_html, render_page

Templates live in ``templates/`` and produce HTML fragments, except
``page.html.j2`` which is the standalone document.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
