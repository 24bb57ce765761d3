"""
Core code generation components.

Provides the definition model and utilities shared by the translators.
"""

from .cds import (
    CDSCardinality,
    CDSKind,
    CDSType,
    CSNError,
    Definition,
    Element,
    KeyRef,
    convert_csn,
)
from .naming import NameSanitizer, sanitize_target, split_namespace
from .tokens import Token
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Definition model
    "CDSCardinality",
    "CDSKind",
    "CDSType",
    "CSNError",
    "Definition",
    "Element",
    "KeyRef",
    "convert_csn",
    # Naming utilities
    "NameSanitizer",
    "sanitize_target",
    "split_namespace",
    "Token",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
