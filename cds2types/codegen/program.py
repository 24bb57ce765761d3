"""
Generation driver.

Creates one translator per CDS definition, runs them in source order and
renders the resulting fragments, grouped by namespace, into one module.
"""

from typing import Dict, List, Any, Optional

from ..logging_config import get_logger
from .core.cds import CDSKind, CDSType, Definition, Element
from .core.config import GeneratorConfig
from .core.naming import split_namespace
from .core.templates import TemplateEngine, create_template_engine
from .languages.typescript.action_func import ActionFunctionTranslator
from .languages.typescript.base import BaseTranslator
from .languages.typescript.entity import EntityTranslator
from .languages.typescript.enumeration import EnumTranslator
from .languages.typescript.type_alias import TypeAliasTranslator
from .languages.typescript.types import TypeScriptTypeConfig, TypeScriptTypeMapper

logger = get_logger(__name__)

MODULE_TEMPLATE = "module.ts.j2"

ENTITY_KINDS = (CDSKind.ENTITY, CDSKind.ASPECT)
OPERATION_KINDS = (CDSKind.ACTION, CDSKind.FUNCTION)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class Program:
    """Translates a set of CDS definitions into one TypeScript module."""

    language_name = "typescript"
    file_extension = ".ts"

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize program with optional configuration."""
        self.config = config or GeneratorConfig()
        self.template_engine: TemplateEngine = create_template_engine(
            newline_sequence=self.config.line_ending
        )
        self.type_mapper = TypeScriptTypeMapper(
            TypeScriptTypeConfig.from_generator_config(self.config)
        )

    def get_namespace(self, name: str) -> str:
        """Namespace a definition is emitted in ("" when namespaces are off)."""
        if not self.config.use_namespaces:
            return ""
        return split_namespace(name)[0]

    def is_entity_like(self, definition: Definition) -> bool:
        """Entities, aspects and structured types become interfaces."""
        if definition.kind in ENTITY_KINDS:
            return True
        return definition.kind == CDSKind.TYPE and definition.is_structured

    def create_entity_translators(
        self, definitions: Dict[str, Definition]
    ) -> List[EntityTranslator]:
        """Create the sibling collection used for cross-reference resolution."""
        return [
            EntityTranslator(
                name,
                definition,
                self.config.interface_prefix,
                self.get_namespace(name),
                self.config,
            )
            for name, definition in definitions.items()
            if self.is_entity_like(definition)
        ]

    def create_translator(
        self, name: str, definition: Definition
    ) -> Optional[BaseTranslator]:
        """
        Create the translator matching a definition's kind.

        Returns:
            Translator instance, or None for kinds that produce no output
        """
        prefix = self.config.interface_prefix
        namespace = self.get_namespace(name)

        if self.is_entity_like(definition):
            return EntityTranslator(name, definition, prefix, namespace, self.config)

        if definition.kind in OPERATION_KINDS:
            return ActionFunctionTranslator(
                name, definition, definition.kind, prefix, namespace, self.config
            )

        if definition.kind == CDSKind.TYPE:
            if definition.enum:
                return EnumTranslator(name, definition, prefix, namespace, self.config)
            if definition.type:
                return TypeAliasTranslator(
                    name, definition, prefix, namespace, self.config
                )

        return None

    def generate(self, definitions: Dict[str, Definition]) -> str:
        """
        Generate the TypeScript module for all definitions.

        Args:
            definitions: Ordered mapping of qualified names to definitions

        Returns:
            Generated module source
        """
        entities = self.create_entity_translators(definitions)
        blocks: Dict[str, List[str]] = {}

        for name, definition in definitions.items():
            fragment = self.generate_single_definition(name, definition, entities)
            if fragment is None:
                continue
            blocks.setdefault(self.get_namespace(name), []).append(fragment)

        separator = self.config.line_ending * 2
        context = {
            "header": self.config.header if self.config.add_header else None,
            "indent_size": self.config.indent_size,
            "blocks": [
                {"namespace": namespace, "body": separator.join(fragments)}
                for namespace, fragments in blocks.items()
            ],
        }

        logger.info(
            "Generated %d fragments in %d namespace block(s)",
            sum(len(fragments) for fragments in blocks.values()),
            len(blocks),
        )
        return self.template_engine.render_template(MODULE_TEMPLATE, context)

    def generate_single_definition(
        self,
        name: str,
        definition: Definition,
        entities: Optional[List[EntityTranslator]] = None,
    ) -> Optional[str]:
        """
        Generate code for a single definition.

        Args:
            name: Qualified CDS name
            definition: Definition to translate
            entities: Sibling entity translators for cross-references

        Returns:
            Generated fragment, or None if the kind produces no output
        """
        translator = self.create_translator(name, definition)
        if translator is None:
            logger.debug("No output for %s (%s)", name, definition.kind.value)
            return None

        if isinstance(translator, EntityTranslator):
            return translator.to_type(entities or [])
        return translator.to_type()

    def validate_definitions(self, definitions: Dict[str, Definition]) -> List[str]:
        """
        Report cross-references the translators will silently omit.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        entity_names = {
            name for name, d in definitions.items() if self.is_entity_like(d)
        }

        for name, definition in definitions.items():
            for include in definition.includes:
                if include not in entity_names:
                    warnings.append(f"Include '{include}' of {name} not found")

            if definition.kind == CDSKind.TYPE and not (
                definition.enum or definition.elements or definition.type
            ):
                warnings.append(f"Type {name} has no enum, elements or base type")

            members = list(definition.elements.items()) + list(
                definition.params.items()
            )
            for member_name, element in members:
                location = f"{name}.{member_name}"
                warnings.extend(
                    self._validate_element(location, element, definitions)
                )

        return warnings

    def _validate_element(
        self, location: str, element: Element, definitions: Dict[str, Definition]
    ) -> List[str]:
        """Check one element's type and association references."""
        warnings = []

        if CDSType.is_association(element.type):
            if not element.target:
                warnings.append(f"Association {location} has no target")
                return warnings

            target = definitions.get(element.target)
            if target is None or not self.is_entity_like(target):
                warnings.append(
                    f"Association target '{element.target}' of {location} not found"
                )
                return warnings

            if element.is_to_one:
                for key in element.keys:
                    if not key.ref or key.ref[0] not in target.elements:
                        warnings.append(
                            f"Key {'.'.join(key.ref)} of {location} not found "
                            f"on {element.target}"
                        )
        elif CDSType.is_builtin(element.type):
            if not self.type_mapper.is_known(element.type):
                warnings.append(
                    f"Unknown type {element.type} in {location}, "
                    f"using {self.config.unknown_type}"
                )
        elif element.type:
            if element.type not in definitions:
                warnings.append(
                    f"Type reference '{element.type}' of {location} not found"
                )
        elif not element.enum:
            warnings.append(
                f"Element {location} has no type, using {self.config.unknown_type}"
            )

        return warnings


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    program: Program, definitions: Dict[str, Definition]
) -> GenerationResult:
    """
    Generate code with the given program, collecting warnings and metadata.

    Args:
        program: Configured program
        definitions: Definitions to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = program.validate_definitions(definitions)
        for warning in warnings:
            logger.debug("Validation: %s", warning)

        code = program.generate(definitions)

        kinds: Dict[str, int] = {}
        for definition in definitions.values():
            kinds[definition.kind.value] = kinds.get(definition.kind.value, 0) + 1

        metadata = {
            "language": program.language_name,
            "file_extension": program.file_extension,
            "definition_count": len(definitions),
            "namespaces": sorted(
                {program.get_namespace(name) for name in definitions} - {""}
            ),
            **{f"{kind}_count": count for kind, count in kinds.items()},
        }

        return GenerationResult(code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e, exc_info=True)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
