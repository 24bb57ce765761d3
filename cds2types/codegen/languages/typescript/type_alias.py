"""
Type alias translator.

Turns a scalar or arrayed CDS type definition (``type Price : Decimal``,
``type Tags : many String``) into a TypeScript type alias so that
references to it resolve.
"""

from ...core.cds import Element
from ...core.tokens import Token
from .base import BaseTranslator


class TypeAliasTranslator(BaseTranslator):
    """Translates a scalar CDS type into a TypeScript type alias."""

    def to_type(self) -> str:
        """Converts the type definition to ``export type X = Y;``."""
        target = self.resolve_type(
            Element(type=self.definition.type, is_array=self.definition.is_array)
        )
        name = self.get_sanitized_name(with_prefix=True)
        return (
            f"{Token.EXPORT} {Token.TYPE} {name} {Token.EQUAL_SIGN} "
            f"{target}{Token.SEMI_COLON}"
        )
