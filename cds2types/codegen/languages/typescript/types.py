"""
TypeScript type system for code generation.

Maps built-in CDS types to TypeScript type text with configuration-driven
overrides and a safe fallback for anything unrecognized.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from ...core.cds import CDSType
from ...core.config import GeneratorConfig


@dataclass
class TypeScriptTypeConfig:
    """Configuration for TypeScript type mapping behavior."""

    string_type: str = "string"
    number_type: str = "number"
    boolean_type: str = "boolean"
    date_type: str = "Date"  # or "string" for ISO strings on the wire

    # Fallback for unknown types
    unknown_type: str = "any"  # or "unknown"

    # Custom type overrides, keyed by CDS type name
    type_overrides: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_generator_config(cls, config: GeneratorConfig) -> "TypeScriptTypeConfig":
        """Build a type configuration from the generator configuration."""
        return cls(
            string_type=config.string_type,
            number_type=config.number_type,
            boolean_type=config.boolean_type,
            date_type=config.date_type,
            unknown_type=config.unknown_type,
            type_overrides=dict(config.type_overrides),
        )


class TypeScriptTypeMapper:
    """Maps built-in CDS types to TypeScript primitive types."""

    def __init__(self, config: Optional[TypeScriptTypeConfig] = None):
        """Initialize with type configuration."""
        self.config = config or TypeScriptTypeConfig()
        self._primitive_types = self._build_primitive_type_map()

    def _build_primitive_type_map(self) -> Dict[str, str]:
        """Build mapping of CDS types to TypeScript types."""
        string_types = (
            CDSType.UUID,
            CDSType.STRING,
            CDSType.LARGE_STRING,
            CDSType.BINARY,
            CDSType.LARGE_BINARY,
        )
        number_types = (
            CDSType.INTEGER,
            CDSType.INTEGER64,
            CDSType.INT16,
            CDSType.INT32,
            CDSType.INT64,
            CDSType.UINT8,
            CDSType.DECIMAL,
            CDSType.DECIMAL_FLOAT,
            CDSType.DOUBLE,
        )
        date_types = (
            CDSType.DATE,
            CDSType.TIME,
            CDSType.DATE_TIME,
            CDSType.TIMESTAMP,
        )

        mapping = {t.value: self.config.string_type for t in string_types}
        mapping.update({t.value: self.config.number_type for t in number_types})
        mapping.update({t.value: self.config.date_type for t in date_types})
        mapping[CDSType.BOOLEAN.value] = self.config.boolean_type
        return mapping

    def map_type(self, cds_type: Optional[str]) -> str:
        """
        Map a CDS type name to TypeScript type text.

        Args:
            cds_type: CDS type name such as ``cds.String``

        Returns:
            TypeScript type text, or the unknown type for unrecognized input
        """
        if cds_type in self.config.type_overrides:
            return self.config.type_overrides[cds_type]
        return self._primitive_types.get(cds_type, self.config.unknown_type)

    def is_known(self, cds_type: Optional[str]) -> bool:
        """Check whether a CDS type has a dedicated mapping."""
        return cds_type in self.config.type_overrides or cds_type in self._primitive_types
