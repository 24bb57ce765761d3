"""
Enum translator.

Turns a CDS type with enum values into a TypeScript enum.
"""

from ...core.cds import EnumLiteral
from ....logging_config import get_logger
from .base import BaseTranslator

logger = get_logger(__name__)


class EnumTranslator(BaseTranslator):
    """Translates a CDS enum type into a TypeScript enum."""

    def to_type(self) -> str:
        """Converts the enum type to a TypeScript enum."""
        code = [self.create_enum()]

        for key, value in self.definition.enum.items():
            code.append(self.create_enum_field(key, value, _is_string(value)))

        if not self.definition.enum:
            logger.debug("Enum %s has no values", self.name)

        code.append(self.close_block())
        return self.join(code)


def _is_string(value: EnumLiteral) -> bool:
    """Numeric literals are emitted unquoted."""
    return isinstance(value, bool) or not isinstance(value, (int, float))
