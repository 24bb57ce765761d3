"""
Base translator shared by all TypeScript translators.

Defines the ``to_type`` contract and the line builders every translator
uses, so emitted syntax stays uniform across entities, enums and operations.
"""

import json
from abc import ABC, abstractmethod
from typing import List, Optional

from ...core.cds import CDSCardinality, CDSType, Definition, Element, EnumLiteral
from ...core.config import GeneratorConfig
from ...core.naming import sanitize_target, split_namespace
from ...core.tokens import Token
from .naming import create_typescript_sanitizer
from .types import TypeScriptTypeConfig, TypeScriptTypeMapper


class BaseTranslator(ABC):
    """Abstract base class for all CDS to TypeScript translators."""

    def __init__(
        self,
        name: str,
        definition: Definition,
        interface_prefix: str = "",
        namespace: str = "",
        config: Optional[GeneratorConfig] = None,
    ):
        """
        Initialize translator.

        Args:
            name: Qualified CDS name of the definition
            definition: CDS definition to translate
            interface_prefix: Prefix for every emitted declaration name
            namespace: Namespace used when composing qualified names
            config: Generator configuration
        """
        self.name = name
        self.definition = definition
        self.prefix = interface_prefix or ""
        self.namespace = namespace or ""
        self.config = config or GeneratorConfig()

        self.joiner = self.config.line_ending
        self.indent = self.config.indent
        self.sanitizer = create_typescript_sanitizer()
        self.type_mapper = TypeScriptTypeMapper(
            TypeScriptTypeConfig.from_generator_config(self.config)
        )

    @abstractmethod
    def to_type(self, *args, **kwargs) -> str:
        """
        Translate the definition into TypeScript declarations.

        Returns:
            Declarations joined with the configured line ending
        """
        pass

    # Naming helpers

    def sanitize_name(self, name: str) -> str:
        """Sanitize a CDS name into an identifier fragment."""
        return self.sanitizer.sanitize_name(name)

    def sanitize_target(self, qualified_name: str) -> str:
        """Strip the namespace from a qualified CDS name."""
        return sanitize_target(qualified_name)

    def get_sanitized_name(
        self, with_prefix: bool = False, with_namespace: bool = False
    ) -> str:
        """
        Returns the sanitized name of the definition.

        Args:
            with_prefix: Prepend the interface prefix
            with_namespace: Qualify with the namespace, if there is one

        Returns:
            Sanitized, optionally prefixed and qualified name
        """
        name = self.sanitize_name(self.sanitize_target(self.name))

        if with_prefix:
            name = self.sanitizer.resolve_conflicts(self.prefix + name)

        if with_namespace and self.namespace:
            name = self.namespace + Token.DOT + name

        return name

    def declared_name(self, prefix: str = "", suffix: str = "") -> str:
        """Complete name of a declaration emitted for this definition."""
        return self.sanitizer.resolve_conflicts(
            self.prefix + prefix + self.get_sanitized_name() + suffix
        )

    def qualify(self, qualified_name: str) -> str:
        """
        Render a reference to another declaration.

        The prefix is always applied; the namespace only when it differs
        from this translator's namespace.
        """
        namespace, local = split_namespace(qualified_name)
        name = self.sanitizer.resolve_conflicts(self.prefix + self.sanitize_name(local))

        if self.config.use_namespaces and namespace and namespace != self.namespace:
            name = namespace + Token.DOT + name

        return name

    # Type helpers

    def cds_type_to_type(self, cds_type: Optional[str]) -> str:
        """Map a built-in CDS type to TypeScript, falling back to the unknown type."""
        return self.type_mapper.map_type(cds_type)

    def resolve_type(self, element: Element) -> str:
        """Render the TypeScript type of an element."""
        if CDSType.is_association(element.type) and element.target:
            result = self.qualify(element.target)
            if element.cardinality == CDSCardinality.MANY:
                result += Token.SQUARE_BRACKETS
        elif element.type and not CDSType.is_builtin(element.type):
            result = self.qualify(element.type)
        else:
            result = self.cds_type_to_type(element.type)

        if element.is_array:
            result += Token.SQUARE_BRACKETS

        return result

    # Line builders

    def create_enum(self, prefix: str = "") -> str:
        """Opening line of an enum declaration."""
        name = self.declared_name(prefix)
        return f"{Token.EXPORT} {Token.ENUM} {name} {Token.CURLY_BRACE_LEFT}"

    def create_enum_field(
        self, name: str, value: EnumLiteral, quoted: bool = True
    ) -> str:
        """Single enum member line."""
        member = name if name.isidentifier() else json.dumps(name)
        literal = _literal_text(value)
        if quoted:
            literal = json.dumps(literal)
        return f"{self.indent}{member} {Token.EQUAL_SIGN} {literal}{Token.COMMA}"

    def create_interface(
        self,
        ext: Optional[List[str]] = None,
        prefix: str = "",
        suffix: str = "",
    ) -> str:
        """Opening line of an interface declaration with an optional extends list."""
        name = self.declared_name(prefix, suffix)
        line = f"{Token.EXPORT} {Token.INTERFACE} {name}"

        if ext:
            line += f" {Token.EXTENDS} " + f"{Token.COMMA} ".join(ext)

        return f"{line} {Token.CURLY_BRACE_LEFT}"

    def create_interface_field(
        self, name: str, type_text: str, optional: bool = True
    ) -> str:
        """Single interface property line."""
        field_name = name if name.isidentifier() else json.dumps(name)
        marker = Token.QUESTION_MARK if optional else ""
        return (
            f"{self.indent}{field_name}{marker}{Token.COLON} {type_text}{Token.SEMI_COLON}"
        )

    def create_association_ref_field(
        self, name: str, suffix: str, key_name: str, type_text: str
    ) -> str:
        """Optional back-reference property for a to-one association key."""
        return self.create_interface_field(f"{name}{suffix}{key_name}", type_text)

    def close_block(self) -> str:
        """Closing line of an enum or interface declaration."""
        return Token.CURLY_BRACE_RIGHT

    def join(self, lines: List[str]) -> str:
        """Join lines with the configured line ending."""
        return self.joiner.join(lines)



def _literal_text(value: EnumLiteral) -> str:
    """Enum values in their JSON spelling, e.g. ``true`` and ``null``."""
    return value if isinstance(value, str) else json.dumps(value)
