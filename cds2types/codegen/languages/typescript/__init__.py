"""
TypeScript translators.

Turns CDS entities, enum types, scalar types, actions and functions
into TypeScript interfaces, enums and type aliases.
"""

from .base import BaseTranslator
from .entity import EntityTranslator
from .enumeration import EnumTranslator
from .action_func import ActionFunctionTranslator
from .type_alias import TypeAliasTranslator
from .naming import create_typescript_sanitizer
from .types import TypeScriptTypeConfig, TypeScriptTypeMapper

__all__ = [
    "BaseTranslator",
    "EntityTranslator",
    "EnumTranslator",
    "ActionFunctionTranslator",
    "TypeAliasTranslator",
    "create_typescript_sanitizer",
    "TypeScriptTypeConfig",
    "TypeScriptTypeMapper",
]
