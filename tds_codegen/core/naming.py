"""
Naming utilities for generated C# code.

Handles name sanitization, case conversion and C# keyword conflicts,
and provides the default naming strategies used by the resolver:
namespace joining, class, interface and property names.
"""

import re
from typing import Iterable, Optional, Set, Dict
from enum import Enum


class NamingCase(Enum):
    """Different naming case styles."""
    PASCAL_CASE = "pascal"    # PageTitle
    CAMEL_CASE = "camel"      # pageTitle


# C# reserved keywords (contextual keywords excluded)
CSHARP_RESERVED_WORDS = {
    "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
    "char", "checked", "class", "const", "continue", "decimal", "default",
    "delegate", "do", "double", "else", "enum", "event", "explicit",
    "extern", "false", "finally", "fixed", "float", "for", "foreach",
    "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
    "lock", "long", "namespace", "new", "null", "object", "operator",
    "out", "override", "params", "private", "protected", "public",
    "readonly", "ref", "return", "sbyte", "sealed", "short", "sizeof",
    "stackalloc", "static", "string", "struct", "switch", "this", "throw",
    "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe",
    "ushort", "using", "virtual", "void", "volatile", "while",
}

NAMESPACE_SEPARATOR = "."


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(self, reserved_words: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
        """
        self.reserved_words = reserved_words or set()
        self._name_cache: Dict[str, str] = {}

    def sanitize_name(self, name: str, target_case: NamingCase = NamingCase.PASCAL_CASE,
                      suffix_on_conflict: str = "_") -> str:
        """
        Sanitize a name for safe use as a C# identifier.

        Results are cached per input, so repeated calls always agree.

        Args:
            name: Original name to sanitize
            target_case: Desired case style
            suffix_on_conflict: Suffix added to names that collide with keywords

        Returns:
            Sanitized name safe for use
        """
        cache_key = f"{name}_{target_case.value}_{suffix_on_conflict}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        cleaned = self._clean_basic(name)
        converted = self._convert_case(cleaned, target_case)
        final_name = self._resolve_conflicts(converted, suffix_on_conflict)

        self._name_cache[cache_key] = final_name
        return final_name

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - remove invalid characters."""
        cleaned = re.sub(r'[^a-zA-Z0-9_]', '_', name or "")
        cleaned = cleaned.strip('_')

        if not cleaned:
            cleaned = "field"

        return cleaned

    def _split_words(self, name: str) -> list:
        """Split on underscores and lower-to-upper case boundaries."""
        name = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', name)
        return [part for part in name.split('_') if part]

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.PASCAL_CASE:
            converted = self._to_pascal_case(name)
        elif target_case == NamingCase.CAMEL_CASE:
            converted = self._to_camel_case(name)
        else:
            converted = name

        # Identifiers can't start with a digit
        if converted and converted[0].isdigit():
            converted = f"_{converted}"
        return converted

    def _to_pascal_case(self, name: str) -> str:
        """Convert to PascalCase, keeping acronyms such as SEO intact."""
        return ''.join(word[0].upper() + word[1:] for word in self._split_words(name))

    def _to_camel_case(self, name: str) -> str:
        """Convert to camelCase."""
        pascal = self._to_pascal_case(name)
        if not pascal:
            return name
        return pascal[0].lower() + pascal[1:]

    def _resolve_conflicts(self, name: str, suffix: str) -> str:
        """Suffix names that collide with reserved words (C# is case-sensitive)."""
        if name in self.reserved_words:
            return f"{name}{suffix}"
        return name


def create_csharp_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for C#."""
    return NameSanitizer(CSHARP_RESERVED_WORDS)


_default_sanitizer: Optional[NameSanitizer] = None


def _get_sanitizer() -> NameSanitizer:
    global _default_sanitizer
    if _default_sanitizer is None:
        _default_sanitizer = create_csharp_sanitizer()
    return _default_sanitizer


def as_namespace(parts: Iterable[str]) -> str:
    """
    Join namespace fragments into a single dotted namespace.

    Every fragment may itself be dotted. Segments are trimmed, inner
    whitespace is removed and empty segments are skipped. Casing is kept.
    """
    segments = []
    for part in parts:
        if not part:
            continue
        for segment in part.split(NAMESPACE_SEPARATOR):
            segment = re.sub(r'\s+', '', segment)
            if segment:
                segments.append(segment)
    return NAMESPACE_SEPARATOR.join(segments)


def as_class_name(name: str) -> str:
    """Convert a raw item name into a C# class name."""
    return _get_sanitizer().sanitize_name(name, NamingCase.PASCAL_CASE)


def as_interface_name(name: str, prefix: str = "I") -> str:
    """Convert a raw template name into a C# interface name."""
    return f"{prefix}{as_class_name(name)}"


def as_property_name(name: str, plural: bool = False) -> str:
    """
    Convert a raw field name into a C# property name.

    Plural names get a trailing ``s`` unless they already end with one.
    """
    property_name = _get_sanitizer().sanitize_name(name, NamingCase.PASCAL_CASE)
    if plural and not property_name.lower().endswith("s"):
        property_name = f"{property_name}s"
    return property_name


def as_parameter_name(name: str) -> str:
    """Convert a raw name into a camelCase C# parameter or local name."""
    return _get_sanitizer().sanitize_name(name, NamingCase.CAMEL_CASE)
