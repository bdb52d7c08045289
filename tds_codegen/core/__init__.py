"""
Core name resolution components.

Provides the template metadata model, naming strategies, configuration
and the resolver used by generation templates.
"""

from .errors import CodegenError, InheritanceCycleError
from .schema import (
    Item,
    Template,
    Field,
    TemplateSet,
    SchemaError,
    load_templates,
    load_templates_file,
)
from .naming import (
    NameSanitizer,
    NamingCase,
    as_namespace,
    as_class_name,
    as_interface_name,
    as_property_name,
    as_parameter_name,
)
from .config import ResolverConfig, ConfigManager, ConfigError, load_config
from .resolver import NameResolver, get_default_resolver
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Errors
    "CodegenError",
    "InheritanceCycleError",
    # Metadata model
    "Item",
    "Template",
    "Field",
    "TemplateSet",
    "SchemaError",
    "load_templates",
    "load_templates_file",
    # Naming strategies
    "NameSanitizer",
    "NamingCase",
    "as_namespace",
    "as_class_name",
    "as_interface_name",
    "as_property_name",
    "as_parameter_name",
    # Configuration system
    "ResolverConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Resolver
    "NameResolver",
    "get_default_resolver",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
