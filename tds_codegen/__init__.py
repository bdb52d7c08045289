"""
TDS code generation helpers.

Derives type names, namespaces, interface inheritance lists and property
names for code generated from content-model template metadata.
"""

from .core import (
    CodegenError,
    InheritanceCycleError,
    Item,
    Template,
    Field,
    TemplateSet,
    SchemaError,
    load_templates,
    load_templates_file,
    ResolverConfig,
    ConfigError,
    load_config,
    NameResolver,
    TemplateEngine,
    TemplateError,
    create_template_engine,
)
from .core.resolver import (
    get_inheritance_chain,
    get_fully_qualified_name,
    get_namespace,
    join_namespaces,
    get_fields_for_template,
    get_property_name,
    is_field_plural,
    get_custom_property,
)

# Version info
__version__ = "0.1.0"

__all__ = [
    "CodegenError",
    "InheritanceCycleError",
    "Item",
    "Template",
    "Field",
    "TemplateSet",
    "SchemaError",
    "load_templates",
    "load_templates_file",
    "ResolverConfig",
    "ConfigError",
    "load_config",
    "NameResolver",
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    "get_inheritance_chain",
    "get_fully_qualified_name",
    "get_namespace",
    "join_namespaces",
    "get_fields_for_template",
    "get_property_name",
    "is_field_plural",
    "get_custom_property",
]
