"""
Core CDS definition model for code generation.

Converts compiled CSN (the JSON form of a CDS model) into a normalized
internal format that translators can work with consistently.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union, Any
from enum import Enum

from ...logging_config import get_logger

logger = get_logger(__name__)

EnumLiteral = Union[str, int, float, bool, None]


class CSNError(Exception):
    """Exception raised when a CSN document cannot be converted."""

    pass


class CDSKind(Enum):
    """Kinds of CDS definitions known to the generator."""

    ENTITY = "entity"
    ASPECT = "aspect"
    TYPE = "type"
    ACTION = "action"
    FUNCTION = "function"
    SERVICE = "service"
    CONTEXT = "context"


class CDSCardinality(Enum):
    """Association cardinality."""

    ONE = "one"
    MANY = "many"


class CDSType(Enum):
    """Built-in CDS types."""

    UUID = "cds.UUID"
    STRING = "cds.String"
    LARGE_STRING = "cds.LargeString"
    BINARY = "cds.Binary"
    LARGE_BINARY = "cds.LargeBinary"
    BOOLEAN = "cds.Boolean"
    INTEGER = "cds.Integer"
    INTEGER64 = "cds.Integer64"
    INT16 = "cds.Int16"
    INT32 = "cds.Int32"
    INT64 = "cds.Int64"
    UINT8 = "cds.UInt8"
    DECIMAL = "cds.Decimal"
    DECIMAL_FLOAT = "cds.DecimalFloat"
    DOUBLE = "cds.Double"
    DATE = "cds.Date"
    TIME = "cds.Time"
    DATE_TIME = "cds.DateTime"
    TIMESTAMP = "cds.Timestamp"
    ASSOCIATION = "cds.Association"
    COMPOSITION = "cds.Composition"

    @classmethod
    def is_builtin(cls, type_name: Optional[str]) -> bool:
        """Check whether a type name lives in the ``cds.`` namespace."""
        return bool(type_name) and type_name.startswith("cds.")

    @classmethod
    def is_association(cls, type_name: Optional[str]) -> bool:
        """Check whether a type name is an association or composition."""
        return type_name in (cls.ASSOCIATION.value, cls.COMPOSITION.value)


@dataclass
class KeyRef:
    """Foreign key of an association, e.g. ``{"ref": ["ID"]}``."""

    ref: List[str]
    alias: Optional[str] = None


@dataclass
class Element:
    """Represents a single field of an entity or parameter of an operation."""

    type: Optional[str] = None
    cardinality: Optional[CDSCardinality] = None
    target: Optional[str] = None
    keys: List[KeyRef] = field(default_factory=list)
    enum: Dict[str, EnumLiteral] = field(default_factory=dict)
    is_array: bool = False

    @property
    def is_to_one(self) -> bool:
        """Check whether the element is a to-one association."""
        return self.cardinality == CDSCardinality.ONE


@dataclass
class Definition:
    """Represents one CDS construct (entity, type, action or function)."""

    kind: CDSKind
    elements: Dict[str, Element] = field(default_factory=dict)
    params: Dict[str, Element] = field(default_factory=dict)
    includes: List[str] = field(default_factory=list)
    enum: Dict[str, EnumLiteral] = field(default_factory=dict)
    type: Optional[str] = None
    is_array: bool = False

    def get_element(self, name: str) -> Optional[Element]:
        """Get element by name."""
        return self.elements.get(name)

    @property
    def is_structured(self) -> bool:
        """Check whether the definition declares its own elements."""
        return bool(self.elements)


def convert_csn(csn: Dict[str, Any]) -> Dict[str, Definition]:
    """
    Convert compiled CSN to the internal definition model.

    Args:
        csn: Parsed CSN document with a top level ``definitions`` object

    Returns:
        Dict mapping qualified definition names to Definition objects,
        in declaration order

    Raises:
        CSNError: If the document has no definitions object
    """
    raw_definitions = csn.get("definitions") if isinstance(csn, dict) else None
    if not isinstance(raw_definitions, dict):
        raise CSNError("CSN document must contain a 'definitions' object")

    known_kinds = {kind.value: kind for kind in CDSKind}
    definitions: Dict[str, Definition] = {}

    for name, raw in raw_definitions.items():
        kind = known_kinds.get(raw.get("kind"))
        if kind is None:
            logger.debug("Skipping %s of unsupported kind %s", name, raw.get("kind"))
            continue

        # Arrayed types (`type Tags : many String`) describe their item type
        is_array = "items" in raw
        source = raw["items"] if is_array else raw

        definitions[name] = Definition(
            kind=kind,
            elements=_convert_elements(source.get("elements")),
            params=_convert_elements(raw.get("params")),
            includes=list(raw.get("includes", [])),
            enum=_convert_enum(source.get("enum")),
            type=source.get("type"),
            is_array=is_array,
        )

    logger.debug("Converted %d CSN definitions", len(definitions))
    return definitions


def _convert_elements(raw_elements: Optional[Dict[str, Any]]) -> Dict[str, Element]:
    """Convert a CSN elements/params object."""
    elements: Dict[str, Element] = {}
    for name, raw in (raw_elements or {}).items():
        elements[name] = _convert_element(raw)
    return elements


def _convert_element(raw: Dict[str, Any]) -> Element:
    """Convert a single CSN element."""
    is_array = "items" in raw
    source = raw["items"] if is_array else raw

    element_type = source.get("type")
    keys = [
        KeyRef(ref=list(key.get("ref", [])), alias=key.get("as"))
        for key in source.get("keys", [])
    ]

    return Element(
        type=element_type,
        cardinality=_convert_cardinality(element_type, source.get("cardinality")),
        target=source.get("target"),
        keys=keys,
        enum=_convert_enum(source.get("enum")),
        is_array=is_array,
    )


def _convert_cardinality(
    element_type: Optional[str], raw: Optional[Dict[str, Any]]
) -> Optional[CDSCardinality]:
    """Map CSN cardinality; unqualified associations are to-one."""
    if raw is None or "max" not in raw:
        return CDSCardinality.ONE if CDSType.is_association(element_type) else None

    maximum = raw["max"]
    if maximum == "*":
        return CDSCardinality.MANY
    try:
        return CDSCardinality.MANY if int(maximum) > 1 else CDSCardinality.ONE
    except (TypeError, ValueError):
        logger.debug("Unrecognized cardinality max %r", maximum)
        return None


def _convert_enum(raw_enum: Optional[Dict[str, Any]]) -> Dict[str, EnumLiteral]:
    """Map ``{"A": {"val": x}}`` to ``{"A": x}``; missing values default to the name."""
    result: Dict[str, EnumLiteral] = {}
    for name, raw in (raw_enum or {}).items():
        if isinstance(raw, dict) and "val" in raw:
            result[name] = raw["val"]
        else:
            result[name] = name
    return result
