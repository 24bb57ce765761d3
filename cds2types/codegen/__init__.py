"""
CDS to TypeScript code generation.

Generates TypeScript declarations from compiled CDS models.
"""

from typing import Any, Dict, Optional, Union

from .program import Program, GeneratorError, GenerationResult, generate_code
from .core.cds import Definition, Element, CDSKind, convert_csn
from .core.config import GeneratorConfig, ConfigManager, load_config


def generate_from_csn(
    csn: Dict[str, Any],
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> GenerationResult:
    """
    Generate TypeScript from a compiled CSN document.

    Args:
        csn: Parsed CSN document
        config: Generator configuration or dict of overrides

    Returns:
        GenerationResult with generated code
    """
    if not isinstance(config, GeneratorConfig):
        config = load_config(custom_config=config)

    definitions = convert_csn(csn)
    return generate_code(Program(config), definitions)


def quick_generate(csn, **options) -> str:
    """
    Quick code generation from CSN.

    Args:
        csn: CSN document (dict or JSON string)
        **options: Generator options

    Returns:
        Generated code string
    """
    if isinstance(csn, str):
        import json

        csn = json.loads(csn)

    result = generate_from_csn(csn, options)

    if result.success:
        return result.code
    else:
        raise GeneratorError(f"Code generation failed: {result.error_message}")


__all__ = [
    "Program",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    "Definition",
    "Element",
    "CDSKind",
    "convert_csn",
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    "generate_from_csn",
    "quick_generate",
]
