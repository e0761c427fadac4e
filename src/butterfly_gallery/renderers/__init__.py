"""Pure rendering functions: observations -> HTML / GeoJSON.

All renderers follow the same pattern:
  - Input: ``GalleryObservation`` records or a ``SightingsState``
  - Output: str (HTML fragment) or a JSON-ready dict
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py which writes the results to the site directory.
Drawing the map itself is left to whatever consumes the GeoJSON.

Public API:
  - popup: build_popup_html
  - geojson: build_feature_collection, observation_feature
  - sightings_table: build_sightings_table_html

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function that calls
   ``render_template("{name}.html.j2", ...)``.
2. Create the template in ``templates/``. Templates produce fragments;
   the page shell and CSS live in ``templates/base.html.j2``.
3. Wire into ``flows/build.py`` and add tests asserting on the output.
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
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
