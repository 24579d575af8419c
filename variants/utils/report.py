"""
Naming Report Rendering.

This module renders a human-readable report of the naming artifacts of a
table using Jinja2 templates. It is used by the ``variants-info`` command.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from jinja2 import Environment, StrictUndefined, TemplateError

from .string_utils import quote_name

REPORT_TEMPLATE = """\
{{ title }}
{{ "=" * title|length }}
rename: {{ table.type_primary_policy.value if table.type_primary_policy else "-" }}
rename_abbr: {{ table.type_abbr_policy.value if table.type_abbr_policy else "-" }}
display: {{ table.emit_display|lower }}  from_str: {{ table.emit_from_str|lower }}

{% for name in resolved.names %}
{{ "%-*s"|format(width, name.identifier) }}  {{ "%-*s"|format(primary_width, name.primary|quote) }}  {{ name.abbreviated|quote }}{% if name.symbol.skip %}  (skipped){% endif %}

{% endfor %}

iterable: {{ listing.count }}
primary: [{{ listing.primary_listing }}]
abbreviated: [{{ listing.abbr_listing }}]
{% if collisions %}
collisions:
{% for key, symbols in collisions.items() %}
  {{ key|quote }} -> {{ symbols|map(attribute="identifier")|join(", ") }}
{% endfor %}
{% endif %}
"""


class ReportRenderer:
    """Jinja2-based renderer for naming reports."""

    def __init__(self, template: Optional[str] = None):
        """Initialize the renderer with an optional custom template."""
        self._env = Environment(
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._env.filters["quote"] = quote_name
        self._template_source = template or REPORT_TEMPLATE

    def render(self, context: Dict[str, Any]) -> str:
        """Render the report template with the given context."""
        try:
            template = self._env.from_string(self._template_source)
            return template.render(**context)
        except TemplateError as e:
            raise ValueError(f"Template rendering failed: {e}")

    def render_artifacts(self, artifacts) -> str:
        """
        Render the report for one table's naming artifacts.

        Args:
            artifacts: ``NamingArtifacts`` produced by ``run_naming``

        Returns:
            The report text
        """
        resolved = artifacts.resolved
        names = resolved.names
        context = {
            "title": artifacts.table.name or "<anonymous>",
            "table": artifacts.table,
            "resolved": resolved,
            "listing": artifacts.listing,
            "collisions": artifacts.reverse_map.collisions(),
            "width": max((len(name.identifier) for name in names), default=0),
            "primary_width": max((len(name.primary) + 2 for name in names), default=0),
        }
        return self.render(context)


def render_report(artifacts) -> str:
    """Render a naming report with the default template."""
    return ReportRenderer().render_artifacts(artifacts)
