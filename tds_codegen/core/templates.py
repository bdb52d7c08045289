"""
Template engine wrapper for code generation.

Provides a Jinja2 environment in which the name resolver's operations
are available as globals and filters, so generation templates can
derive names the same way the Python API does.
"""

from typing import Dict, Any, Optional
from pathlib import Path

from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError as JinjaTemplateError,
)

from .errors import CodegenError
from .naming import as_class_name, as_parameter_name, NameSanitizer, NamingCase
from .resolver import NameResolver
from ..logging_config import get_logger

logger = get_logger(__name__)


class TemplateError(CodegenError):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with resolver helpers."""

    def __init__(self, resolver: Optional[NameResolver] = None,
                 template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            resolver: Resolver whose operations are exposed to templates
            template_dir: Directory containing template files
        """
        self.resolver = resolver or NameResolver()
        self.template_dir = template_dir
        self._sanitizer = NameSanitizer()
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation helpers."""
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            # Use in-memory templates
            loader = DictLoader({})

        self._env = Environment(
            loader=loader,
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            lstrip_blocks=True,
            trim_blocks=True,
        )

        resolver = self.resolver

        self._env.filters["interface_name"] = resolver.interface_name_func
        self._env.filters["class_name"] = as_class_name
        self._env.filters["parameter_name"] = as_parameter_name
        self._env.filters["property_name"] = self._property_name_filter
        self._env.filters["pascal_case"] = self._pascal_case_filter

        self._env.globals.update(
            fully_qualified_name=resolver.get_fully_qualified_name,
            namespace_of=resolver.get_namespace,
            join_namespaces=resolver.join_namespaces,
            inheritance_chain=resolver.get_inheritance_chain,
            fields_for=resolver.get_fields_for_template,
            field_property_name=resolver.get_property_name,
            is_field_plural=resolver.is_field_plural,
            custom_property=resolver.get_custom_property,
        )

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
        except JinjaTemplateError as e:
            logger.error("Failed to render template %s: %s", template_name, e)
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """
        Render a template string with the given context.

        Args:
            template_string: Template content as string
            context: Variables to pass to template

        Returns:
            Rendered content
        """
        try:
            template = self._env.from_string(template_string)
            return template.render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render template string: {e}") from e

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
        """Check if a template can be loaded."""
        return template_name in self._env.loader.list_templates()

    # Template filters for code generation

    def _property_name_filter(self, value: str, plural: bool = False) -> str:
        return self.resolver.property_name_func(str(value), plural)

    def _pascal_case_filter(self, value: str) -> str:
        """Convert string to PascalCase."""
        return self._sanitizer.sanitize_name(str(value), NamingCase.PASCAL_CASE)


# Built-in templates
CSHARP_INTERFACE_TEMPLATE = """\
namespace {{ namespace_of(default_namespace, template) }}
{
    /// <summary>
    /// Represents the {{ template.name }} template.
    /// </summary>
    public partial interface {{ template.name | interface_name }} : {{ base_interface | default("IStandardTemplateItem") }}{{ inheritance_chain(default_namespace, template) }}
    {
{% for field in fields_for(template, include_bases) %}
        {{ "IEnumerable<Guid>" if is_field_plural(field) else "string" }} {{ field_property_name(field) }} { get; }
{% endfor %}
    }
}
"""


def create_template_engine(resolver: Optional[NameResolver] = None,
                           template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine with the built-in templates registered."""
    engine = TemplateEngine(resolver, template_dir)
    if template_dir is None:
        engine.add_template("csharp_interface", CSHARP_INTERFACE_TEMPLATE)
    return engine


def render_interface(template, resolver: Optional[NameResolver] = None,
                     include_bases: bool = False,
                     default_namespace: str = "") -> str:
    """
    Convenience function to render a C# interface for a template.

    Args:
        template: Template to render
        resolver: Resolver to use for names
        include_bases: Repeat inherited fields on the interface
        default_namespace: Passed through to namespace resolution

    Returns:
        Rendered interface code
    """
    engine = create_template_engine(resolver)
    return engine.render_template(
        "csharp_interface",
        {
            "template": template,
            "include_bases": include_bases,
            "default_namespace": default_namespace,
        },
    )
