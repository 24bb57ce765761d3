"""
Language-specific translators.

TypeScript is the only target language.
"""
