"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

from typing import Dict, Any, Optional
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    DictLoader,
    select_autoescape,
)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Optional[Path] = None, newline_sequence: str = "\n"):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
            newline_sequence: Line ending used for template source lines
        """
        self.template_dir = template_dir
        self.newline_sequence = newline_sequence
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            # Use in-memory templates
            loader = DictLoader({})

        self._env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            newline_sequence=self.newline_sequence,
        )

        # Add custom filters for code generation
        self._env.filters["indent"] = self._indent_filter
        self._env.filters["comment"] = self._comment_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {str(e)}")

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        if not isinstance(self._env.loader, DictLoader):
            # Convert to DictLoader to support in-memory templates
            self._env.loader = DictLoader({})

        self._env.loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return template_name in self._env.list_templates()

    # Template filters for code generation

    def _indent_filter(self, value: str, spaces: int = 4) -> str:
        """Indent all lines in a string."""
        indent = " " * spaces
        lines = str(value).split("\n")
        return "\n".join(indent + line if line.strip() else line for line in lines)

    def _comment_filter(self, value: str, style: str = "//") -> str:
        """Add comment markers to each line."""
        lines = str(value).split("\n")
        return "\n".join(f"{style} {line}" if line.strip() else line for line in lines)


# Built-in template for a generated TypeScript module
TYPESCRIPT_MODULE_TEMPLATE = """{% if header %}
{{ header | comment }}

{% endif %}
{% for block in blocks %}
{% if not loop.first %}

{% endif %}
{% if block.namespace %}
export namespace {{ block.namespace }} {
{{ block.body | indent(indent_size) }}
}
{% else %}
{{ block.body }}
{% endif %}
{% endfor %}
"""


def create_template_engine(
    template_dir: Optional[Path] = None, newline_sequence: str = "\n"
) -> TemplateEngine:
    """
    Create a template engine with the built-in templates registered.

    Args:
        template_dir: Optional directory with template overrides
        newline_sequence: Line ending used for template source lines

    Returns:
        Configured TemplateEngine
    """
    engine = TemplateEngine(template_dir, newline_sequence)
    if not engine.template_exists("module.ts.j2"):
        engine.add_template("module.ts.j2", TYPESCRIPT_MODULE_TEMPLATE)
    return engine
