"""Shared fixtures: a small bookshop model as definitions and as CSN."""

from __future__ import annotations

from typing import Dict, List

import pytest

from cds2types.codegen.core.cds import (
    CDSCardinality,
    CDSKind,
    Definition,
    Element,
    KeyRef,
)
from cds2types.codegen.languages.typescript.entity import EntityTranslator


@pytest.fixture
def bookshop() -> Dict[str, Definition]:
    """Managed aspect, Books including it, Authors referenced by Books."""
    return {
        "Managed": Definition(
            kind=CDSKind.ASPECT,
            elements={"createdAt": Element(type="cds.Timestamp")},
        ),
        "Books": Definition(
            kind=CDSKind.ENTITY,
            includes=["Managed"],
            elements={
                "ID": Element(type="cds.Integer"),
                "title": Element(type="cds.String"),
                "genre": Element(
                    type="cds.String",
                    enum={"Fiction": "Fiction", "NonFiction": "NonFiction"},
                ),
                "author": Element(
                    type="cds.Association",
                    cardinality=CDSCardinality.ONE,
                    target="Authors",
                    keys=[KeyRef(ref=["ID"])],
                ),
                "createdAt": Element(type="cds.Timestamp"),
            },
        ),
        "Authors": Definition(
            kind=CDSKind.ENTITY,
            elements={
                "ID": Element(type="cds.Integer"),
                "name": Element(type="cds.String"),
                "books": Element(
                    type="cds.Association",
                    cardinality=CDSCardinality.MANY,
                    target="Books",
                ),
            },
        ),
    }


@pytest.fixture
def bookshop_entities(bookshop) -> List[EntityTranslator]:
    """Entity translators for the bookshop model, without namespaces."""
    return [EntityTranslator(name, d) for name, d in bookshop.items()]


@pytest.fixture
def bookshop_csn() -> dict:
    """Compiled CSN of a namespaced bookshop with a service."""
    return {
        "definitions": {
            "my.bookshop.Genre": {
                "kind": "type",
                "type": "cds.Integer",
                "enum": {"Fiction": {"val": 1}, "Poetry": {"val": 2}},
            },
            "my.bookshop.Price": {"kind": "type", "type": "cds.Decimal"},
            "my.bookshop.Books": {
                "kind": "entity",
                "elements": {
                    "ID": {"key": True, "type": "cds.UUID"},
                    "title": {"type": "cds.String", "length": 111},
                    "price": {"type": "my.bookshop.Price"},
                    "status": {
                        "type": "cds.String",
                        "enum": {"open": {}, "closed": {"val": "C"}},
                    },
                    "author": {
                        "type": "cds.Association",
                        "target": "my.bookshop.Authors",
                        "keys": [{"ref": ["ID"]}],
                    },
                    "tags": {"items": {"type": "cds.String"}},
                },
            },
            "my.bookshop.Authors": {
                "kind": "entity",
                "elements": {
                    "ID": {"key": True, "type": "cds.UUID"},
                    "books": {
                        "type": "cds.Association",
                        "cardinality": {"max": "*"},
                        "target": "my.bookshop.Books",
                    },
                },
            },
            "CatalogService": {"kind": "service"},
            "CatalogService.submitOrder": {
                "kind": "action",
                "params": {
                    "book": {"type": "cds.UUID"},
                    "quantity": {"type": "cds.Integer"},
                },
            },
            "CatalogService.ping": {"kind": "function"},
            "some.Annotation": {"kind": "annotation"},
        }
    }
