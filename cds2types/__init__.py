"""
cds2types

Generates TypeScript interfaces and enums from compiled CDS models.
"""

from .codegen import generate_from_csn, quick_generate, Program, GeneratorConfig

__version__ = "0.1.0"

__all__ = ["generate_from_csn", "quick_generate", "Program", "GeneratorConfig"]
