"""
TypeScript-specific naming utilities and sanitization.

Generated declarations live next to the TypeScript globals, so a CDS entity
called ``Date`` must not shadow the ``Date`` type used for date fields.
"""

from ...core.naming import NameSanitizer


# Global types a generated declaration could shadow
TS_GLOBAL_TYPES = {
    "Array",
    "ArrayBuffer",
    "Boolean",
    "Date",
    "Error",
    "Function",
    "Map",
    "Number",
    "Object",
    "Partial",
    "Promise",
    "Readonly",
    "Record",
    "RegExp",
    "Set",
    "String",
    "Symbol",
}


def create_typescript_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for TypeScript."""
    return NameSanitizer(TS_GLOBAL_TYPES)
