"""
Name and namespace resolution for generated code.

Called from code-generation templates to turn template metadata into
qualified type names, namespaces, interface inheritance lists and
property names. Every operation is a pure function of its inputs.
"""

from typing import Callable, Iterable, Iterator, List, Optional

from .config import ResolverConfig, load_config
from .errors import InheritanceCycleError
from .naming import as_interface_name, as_namespace, as_property_name
from .schema import Field, Item, Template
from ..logging_config import get_logger

logger = get_logger(__name__)

NameFunc = Callable[[str], str]
PropertyNameFunc = Callable[[str, bool], str]
NamespaceJoiner = Callable[[Iterable[str]], str]


def _identity(name: str) -> str:
    return name


class NameResolver:
    """Derives names for generated code from template metadata."""

    def __init__(
        self,
        config: Optional[ResolverConfig] = None,
        property_name_func: Optional[PropertyNameFunc] = None,
        interface_name_func: Optional[NameFunc] = None,
        namespace_joiner: Optional[NamespaceJoiner] = None,
    ):
        """
        Initialize resolver.

        Args:
            config: Resolver settings (defaults from load_config())
            property_name_func: Converts a field name to a property name,
                given whether the field holds multiple values
            interface_name_func: Converts a template name to an interface name
            namespace_joiner: Joins namespace fragments into one namespace
        """
        self.config = config or load_config()
        self.property_name_func = property_name_func or as_property_name
        self.interface_name_func = interface_name_func or self._default_interface_name
        self.namespace_joiner = namespace_joiner or as_namespace
        self._plural_types = frozenset(t.lower() for t in self.config.plural_field_types)

    def _default_interface_name(self, name: str) -> str:
        return as_interface_name(name, prefix=self.config.interface_prefix)

    # Qualified names

    def get_namespace(
        self, default_namespace: str, item: Item, include_global: bool = False
    ) -> str:
        """
        Get the calculated namespace for an item.

        ``default_namespace`` is part of the calling convention of generation
        templates but does not contribute to the result.
        """
        namespace = self.namespace_joiner([item.namespace])
        if self.config.template_suffix:
            namespace = namespace.replace(self.config.template_suffix, "")

        if include_global:
            return f"{self.config.global_prefix}{namespace}"
        return namespace

    def get_fully_qualified_name(
        self,
        default_namespace: str,
        item: Item,
        name_func: Optional[NameFunc] = None,
    ) -> str:
        """Get the global-rooted, fully qualified name of an item."""
        name_func = name_func or _identity
        namespace = self.get_namespace(default_namespace, item, include_global=True)
        return f"{namespace}.{name_func(item.name)}"

    def join_namespaces(self, *namespaces: str) -> str:
        """Join several dotted namespaces, skipping empty ones."""
        return self.namespace_joiner(namespaces)

    # Inheritance

    def iter_base_templates(self, template: Template) -> Iterator[Template]:
        """
        Walk all ancestors of a template depth-first, in pre-order.

        Ancestors reachable along several paths are yielded once per path.

        Raises:
            InheritanceCycleError: If a template is its own ancestor
        """
        return self._walk_bases(template, [])

    def _walk_bases(self, template: Template, path: List[Template]) -> Iterator[Template]:
        path.append(template)
        try:
            for base in template.base_templates:
                if any(base is seen for seen in path):
                    names = [t.name for t in path] + [base.name]
                    logger.error("Inheritance cycle: %s", " -> ".join(names))
                    raise InheritanceCycleError(names)
                yield base
                yield from self._walk_bases(base, path)
        finally:
            path.pop()

    def get_inherited_interfaces(self, namespace: str, template: Template) -> List[str]:
        """
        Get qualified interface names for every ancestor of a template.

        Each base template contributes its interface, immediately followed
        by the interfaces of its own ancestors.
        """
        interfaces = []
        for base in self.iter_base_templates(template):
            qualified_name = self.get_fully_qualified_name(namespace, base)
            containing = qualified_name[: qualified_name.rfind(".")]
            interfaces.append(f"{containing}.{self.interface_name_func(base.name)}")

        logger.debug(
            "Template '%s' inherits %d interfaces", template.name, len(interfaces)
        )
        return interfaces

    def get_inheritance_chain(self, namespace: str, template: Template) -> str:
        """
        Get the interface list to append after a generated type's own interface.

        Returns an empty string when there are no base templates, otherwise
        the interfaces joined by ``", "`` with a leading ``", "``.
        """
        interfaces = self.get_inherited_interfaces(namespace, template)
        return ", " + ", ".join(interfaces) if interfaces else ""

    # Fields

    def is_field_ignored(self, field: Field) -> bool:
        """Check whether a field was excluded from generation via ``ignore=true``."""
        return self.get_custom_property(field.data, "ignore") == "true"

    def get_fields_for_template(
        self, template: Template, include_bases: Optional[bool] = None
    ) -> List[Field]:
        """
        Get the fields of a template that aren't ignored.

        Args:
            template: The template
            include_bases: Also include fields of all base templates
                (defaults to the configured include_base_fields)

        Returns:
            Direct fields followed by inherited fields in discovery order
        """
        if include_bases is None:
            include_bases = self.config.include_base_fields

        fields = [f for f in template.fields if not self.is_field_ignored(f)]

        if not include_bases:
            return fields

        for base in self.iter_base_templates(template):
            fields.extend(f for f in base.fields if not self.is_field_ignored(f))

        return fields

    def is_field_plural(self, field: Field) -> bool:
        """Determine whether the field holds multiple values."""
        return (field.type or "").lower() in self._plural_types

    def get_property_name(self, field: Field) -> str:
        """
        Get the property name for a field.

        A custom ``name=`` in the field data wins and is returned as is.
        """
        custom_name = self.get_custom_property(field.data, "name")
        if custom_name:
            return custom_name

        return self.property_name_func(field.name, self.is_field_plural(field))

    # Field data

    @staticmethod
    def get_custom_property(data: Optional[str], key: str) -> str:
        """
        Get a value from query-string formatted field data.

        Keys match case-insensitively. A key with an empty value
        (``key=``) counts as missing.

        Returns:
            The value, or an empty string
        """
        if not data:
            return ""

        prefix = f"{key}="
        length = len(prefix)

        for pair in data.split("&"):
            if len(pair) > length and pair[:length].lower() == prefix.lower():
                return pair[length:]

        return ""


# Default resolver instance
_default_resolver = None


def get_default_resolver() -> NameResolver:
    """Get the resolver used by the module-level functions."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = NameResolver()
    return _default_resolver


# Convenience functions


def get_inheritance_chain(namespace: str, template: Template) -> str:
    """Comma-prefixed list of the interfaces a template inherits."""
    return get_default_resolver().get_inheritance_chain(namespace, template)


def get_fully_qualified_name(
    default_namespace: str, item: Item, name_func: Optional[NameFunc] = None
) -> str:
    """Fully qualified name of an item."""
    return get_default_resolver().get_fully_qualified_name(
        default_namespace, item, name_func
    )


def get_namespace(default_namespace: str, item: Item, include_global: bool = False) -> str:
    """Namespace of an item."""
    return get_default_resolver().get_namespace(default_namespace, item, include_global)


def join_namespaces(*namespaces: str) -> str:
    """Join dotted namespaces."""
    return get_default_resolver().join_namespaces(*namespaces)


def get_fields_for_template(template: Template, include_bases: bool) -> List[Field]:
    """Non-ignored fields of a template, optionally with inherited ones."""
    return get_default_resolver().get_fields_for_template(template, include_bases)


def get_property_name(field: Field) -> str:
    """Property name for a field."""
    return get_default_resolver().get_property_name(field)


def is_field_plural(field: Field) -> bool:
    """Whether a field holds multiple values."""
    return get_default_resolver().is_field_plural(field)


def get_custom_property(data: Optional[str], key: str) -> str:
    """Value for ``key`` in query-string formatted data."""
    return NameResolver.get_custom_property(data, key)
