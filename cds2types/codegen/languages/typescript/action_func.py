"""
Action and function translator.

Turns a CDS action or function into a discriminant enum holding the
operation name and its parameter names, plus a parameter interface.
"""

from typing import Optional

from ...core.cds import CDSKind, Definition
from ...core.config import GeneratorConfig
from .base import BaseTranslator

FUNC_PREFIX = "Func"
ACTION_PREFIX = "Action"
PARAMS_SUFFIX = "Params"


class ActionFunctionTranslator(BaseTranslator):
    """Translates a CDS action/function into a TypeScript enum and interface."""

    def __init__(
        self,
        name: str,
        definition: Definition,
        kind: CDSKind,
        interface_prefix: str = "",
        namespace: str = "",
        config: Optional[GeneratorConfig] = None,
    ):
        """
        Initialize translator.

        Args:
            name: Qualified CDS name of the operation
            definition: CDS action/function definition
            kind: Either CDSKind.ACTION or CDSKind.FUNCTION
            interface_prefix: Prefix for emitted declaration names
            namespace: Namespace used when composing qualified names
            config: Generator configuration
        """
        super().__init__(name, definition, interface_prefix, namespace, config)
        self.kind = kind

    @property
    def kind_prefix(self) -> str:
        """Name prefix for the emitted declarations."""
        return FUNC_PREFIX if self.kind == CDSKind.FUNCTION else ACTION_PREFIX

    def to_type(self) -> str:
        """Converts the action/function to a TypeScript enum and params interface."""
        prefix = self.kind_prefix
        params = self.definition.params

        enum_code = [self.create_enum(prefix)]
        enum_code.append(
            self.create_enum_field("name", self.sanitize_target(self.name))
        )
        for key in params:
            enum_code.append(
                self.create_enum_field("param" + self.sanitize_name(key), key)
            )
        enum_code.append(self.close_block())

        interface_code = []
        if params:
            interface_code.append(self.create_interface(None, prefix, PARAMS_SUFFIX))
            for key, value in params.items():
                interface_code.append(
                    self.create_interface_field(
                        key, self.resolve_type(value), optional=False
                    )
                )
            interface_code.append(self.close_block())

        return self.join(enum_code + interface_code)
