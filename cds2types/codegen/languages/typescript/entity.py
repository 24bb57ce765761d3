"""
Entity translator.

Turns a CDS entity into a TypeScript interface. Included entities become
the ``extends`` list, inline enums are hoisted into standalone enums and
to-one associations get flat foreign key properties.
"""

from typing import List, Optional

from ...core.cds import CDSKind, Definition, Element
from ....logging_config import get_logger
from .base import BaseTranslator
from .enumeration import EnumTranslator

logger = get_logger(__name__)


class EntityTranslator(BaseTranslator):
    """Translates a CDS entity into a TypeScript interface."""

    def to_type(self, types: List["EntityTranslator"]) -> str:
        """
        Converts the entity to a TypeScript interface.

        Args:
            types: All entity translators of the current generation pass,
                used to resolve includes and association targets

        Returns:
            Hoisted enums followed by the interface declaration
        """
        ext = self._get_extension_interfaces(types)
        ext_fields = self._get_extension_interface_fields(types)

        code = [self.create_interface(ext)]
        enum_code = []

        for key, value in self.definition.elements.items():
            if value.enum:
                enum_name = self.sanitize_name(
                    self.sanitize_target(self.name)
                ) + self.sanitize_name(key)
                enum_type = EnumTranslator(
                    enum_name,
                    Definition(kind=CDSKind.TYPE, type=value.type, enum=value.enum),
                    self.prefix,
                    self.namespace,
                    self.config,
                )
                enum_code.append(enum_type.to_type())
                code.append(
                    self.create_interface_field(
                        key, enum_type.get_sanitized_name(with_prefix=True)
                    )
                )
            elif key not in ext_fields:
                code.append(self.create_interface_field(key, self.resolve_type(value)))

                if value.is_to_one:
                    code.extend(
                        self._get_association_ref_fields(
                            types, key, self.config.association_ref_suffix, value
                        )
                    )

        code.append(self.close_block())

        return self.join(enum_code + code)

    def get_model_name(self) -> str:
        """Returns the CDS name of the entity."""
        return self.name

    def get_fields(self) -> List[str]:
        """Returns the declared field names in order."""
        return list(self.definition.elements.keys())

    def _get_included(self, types: List["EntityTranslator"]) -> List["EntityTranslator"]:
        """Entities named in this entity's includes, in sibling order."""
        if not self.definition.includes:
            return []
        return [e for e in types if e.name in self.definition.includes]

    def _get_extension_interfaces(
        self, types: List["EntityTranslator"]
    ) -> Optional[List[str]]:
        """Qualified interface names this entity extends."""
        entities = self._get_included(types)

        missing = set(self.definition.includes) - {e.name for e in entities}
        for name in sorted(missing):
            logger.debug("Include %s of %s not found, omitting", name, self.name)

        if not entities:
            return None
        return [e.get_sanitized_name(True, True) for e in entities]

    def _get_extension_interface_fields(
        self, types: List["EntityTranslator"]
    ) -> List[str]:
        """Field names contributed by included entities."""
        result = []
        for entity in self._get_included(types):
            result.extend(entity.get_fields())
        return result

    def _get_association_ref_fields(
        self,
        types: List["EntityTranslator"],
        name: str,
        suffix: str,
        element: Element,
    ) -> List[str]:
        """Foreign key properties for a to-one association."""
        result = []

        if not (element.target and element.keys):
            return result

        entity = next((t for t in types if t.get_model_name() == element.target), None)
        if entity is None:
            logger.debug(
                "Association target %s of %s.%s not found, omitting keys",
                element.target,
                self.name,
                name,
            )
            return result

        for key in element.keys:
            if not key.ref:
                continue
            key_element = entity.definition.get_element(key.ref[0])
            if key_element is None:
                logger.debug(
                    "Key %s not found on %s, omitting", key.ref[0], element.target
                )
                continue
            result.append(
                self.create_association_ref_field(
                    name,
                    suffix,
                    key.ref[0],
                    self.cds_type_to_type(key_element.type),
                )
            )

        return result
