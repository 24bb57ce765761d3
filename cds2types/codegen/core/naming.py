"""
Naming utilities for safe code generation.

Turns CDS names (which may be namespace qualified or contain separators)
into identifiers that can be concatenated into larger TypeScript names.
"""

import re
from typing import Set, Dict, Tuple


_SEPARATORS = re.compile(r"[^a-zA-Z0-9]+")


def split_namespace(qualified_name: str) -> Tuple[str, str]:
    """
    Split a dot-qualified CDS name into namespace and local name.

    Args:
        qualified_name: Name such as ``my.bookshop.Books``

    Returns:
        Tuple of (namespace, local name); namespace is "" for bare names
    """
    if "." not in qualified_name:
        return "", qualified_name
    namespace, _, local = qualified_name.rpartition(".")
    return namespace, local


def sanitize_target(qualified_name: str) -> str:
    """Return the last segment of a dot-qualified name."""
    return split_namespace(qualified_name)[1]


class NameSanitizer:
    """Handles name sanitization for generated identifiers."""

    def __init__(self, reserved_words: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Declaration names that must not be emitted as is
        """
        self.reserved_words = reserved_words or set()
        self._name_cache: Dict[str, str] = {}

    def sanitize_name(self, name: str) -> str:
        """
        Sanitize a name into a PascalCase identifier fragment.

        Separators are removed and every segment gets an upper-case first
        letter; the remaining casing is kept, so ``submitOrder`` becomes
        ``SubmitOrder`` and ``order_id`` becomes ``OrderId``.

        Fragments are concatenated into larger names, so reserved words are
        not checked here; see ``resolve_conflicts``.

        Args:
            name: Original name to sanitize

        Returns:
            Sanitized name fragment
        """
        if name in self._name_cache:
            return self._name_cache[name]

        converted = self._to_pascal_case(name)
        self._name_cache[name] = converted
        return converted

    def sanitize_target(self, qualified_name: str) -> str:
        """Return the local segment of a namespace-qualified name."""
        return sanitize_target(qualified_name)

    def resolve_conflicts(self, name: str, suffix: str = "_") -> str:
        """Append the suffix when a complete name collides with a reserved word."""
        if name in self.reserved_words:
            return f"{name}{suffix}"
        return name

    def _to_pascal_case(self, name: str) -> str:
        """Join separator-delimited parts, upper-casing each first letter."""
        parts = [part for part in _SEPARATORS.split(name) if part]
        if not parts:
            return "Unnamed"

        converted = "".join(part[0].upper() + part[1:] for part in parts)

        # Ensure doesn't start with number
        if converted[0].isdigit():
            converted = f"_{converted}"

        return converted
