"""Tests for the CDS to TypeScript type mapping."""

import pytest

from cds2types.codegen.core.config import GeneratorConfig
from cds2types.codegen.languages.typescript.types import (
    TypeScriptTypeConfig,
    TypeScriptTypeMapper,
)


class TestTypeScriptTypeMapper:
    """Test primitive mapping and fallbacks."""

    def setup_method(self):
        self.mapper = TypeScriptTypeMapper()

    @pytest.mark.parametrize(
        "cds_type, expected",
        [
            ("cds.String", "string"),
            ("cds.UUID", "string"),
            ("cds.Integer", "number"),
            ("cds.Decimal", "number"),
            ("cds.Boolean", "boolean"),
            ("cds.Timestamp", "Date"),
            ("cds.Date", "Date"),
        ],
    )
    def test_primitives(self, cds_type, expected):
        assert self.mapper.map_type(cds_type) == expected

    def test_unknown_falls_back(self):
        assert self.mapper.map_type("cds.Vector") == "any"
        assert self.mapper.map_type(None) == "any"

    def test_is_known(self):
        assert self.mapper.is_known("cds.String")
        assert not self.mapper.is_known("cds.Vector")

    def test_overrides(self):
        mapper = TypeScriptTypeMapper(
            TypeScriptTypeConfig(type_overrides={"cds.Decimal": "string"})
        )
        assert mapper.map_type("cds.Decimal") == "string"
        assert mapper.map_type("cds.Integer") == "number"

    def test_from_generator_config(self):
        config = GeneratorConfig(date_type="string", unknown_type="unknown")
        mapper = TypeScriptTypeMapper(TypeScriptTypeConfig.from_generator_config(config))
        assert mapper.map_type("cds.DateTime") == "string"
        assert mapper.map_type("cds.Nope") == "unknown"
