"""Pure rendering functions: data source -> display strings.

All renderers follow the same pattern:
  - Input: WeatherDataSource or the dataclasses built from it
  - Output: str (plain text or an HTML fragment)
  - No side effects, no I/O

Public API:
  - watch_face: WatchFace, build_watch_face, render_watch_face_text,
    render_watch_face_html

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function::

       from wrist_weather.renderers import render_template

       def render_mywidget(face: WatchFace) -> str:
           return render_template("mywidget.txt.j2", face=face)

2. Create a Jinja2 template in ``templates/``. Templates ending in
   ``.html.j2`` are autoescaped, anything else is rendered verbatim.

3. Add tests: render sample data and assert the output contains the
   expected labels.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=jinja2.select_autoescape(enabled_extensions=("html.j2",)),
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
