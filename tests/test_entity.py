"""Tests for the entity translator."""

from cds2types.codegen.core.cds import (
    CDSCardinality,
    CDSKind,
    Definition,
    Element,
    KeyRef,
)
from cds2types.codegen.core.config import GeneratorConfig
from cds2types.codegen.languages.typescript.entity import EntityTranslator


def _get(entities, name):
    return next(e for e in entities if e.name == name)


class TestEntityTranslator:
    """Test interface generation for entities."""

    def test_books(self, bookshop_entities):
        books = _get(bookshop_entities, "Books")
        assert books.to_type(bookshop_entities) == (
            "export enum BooksGenre {\n"
            '    Fiction = "Fiction",\n'
            '    NonFiction = "NonFiction",\n'
            "}\n"
            "export interface Books extends Managed {\n"
            "    ID?: number;\n"
            "    title?: string;\n"
            "    genre?: BooksGenre;\n"
            "    author?: Authors;\n"
            "    author_ID?: number;\n"
            "}"
        )

    def test_inherited_field_is_skipped(self, bookshop_entities):
        output = _get(bookshop_entities, "Books").to_type(bookshop_entities)
        assert "extends Managed" in output
        assert "title?: string;" in output
        assert "createdAt" not in output

    def test_included_entity_keeps_its_fields(self, bookshop_entities):
        output = _get(bookshop_entities, "Managed").to_type(bookshop_entities)
        assert output == "export interface Managed {\n    createdAt?: Date;\n}"

    def test_to_many_association(self, bookshop_entities):
        output = _get(bookshop_entities, "Authors").to_type(bookshop_entities)
        assert "    books?: Books[];" in output
        assert "books_" not in output

    def test_field_order(self):
        definition = Definition(
            kind=CDSKind.ENTITY,
            elements={
                "c": Element(type="cds.String"),
                "a": Element(type="cds.String"),
                "b": Element(type="cds.String"),
            },
        )
        lines = EntityTranslator("Letters", definition).to_type([]).split("\n")
        assert lines[1:4] == [
            "    c?: string;",
            "    a?: string;",
            "    b?: string;",
        ]

    def test_missing_target_is_omitted(self):
        definition = Definition(
            kind=CDSKind.ENTITY,
            elements={
                "author": Element(
                    type="cds.Association",
                    cardinality=CDSCardinality.ONE,
                    target="Authors",
                    keys=[KeyRef(ref=["ID"])],
                )
            },
        )
        books = EntityTranslator("Books", definition)
        assert books.to_type([books]) == (
            "export interface Books {\n    author?: Authors;\n}"
        )

    def test_missing_key_field_is_omitted(self, bookshop):
        bookshop["Authors"].elements.pop("ID")
        entities = [EntityTranslator(n, d) for n, d in bookshop.items()]
        output = _get(entities, "Books").to_type(entities)
        assert "    author?: Authors;" in output
        assert "author_ID" not in output

    def test_association_without_keys(self, bookshop):
        bookshop["Books"].elements["author"].keys = []
        entities = [EntityTranslator(n, d) for n, d in bookshop.items()]
        output = _get(entities, "Books").to_type(entities)
        assert "author_ID" not in output

    def test_multiple_keys(self):
        target = Definition(
            kind=CDSKind.ENTITY,
            elements={
                "ID": Element(type="cds.UUID"),
                "version": Element(type="cds.Integer"),
            },
        )
        source = Definition(
            kind=CDSKind.ENTITY,
            elements={
                "doc": Element(
                    type="cds.Association",
                    cardinality=CDSCardinality.ONE,
                    target="Docs",
                    keys=[KeyRef(ref=["ID"]), KeyRef(ref=["version"])],
                )
            },
        )
        entities = [EntityTranslator("Docs", target), EntityTranslator("Refs", source)]
        lines = entities[1].to_type(entities).split("\n")
        assert lines[1:4] == [
            "    doc?: Docs;",
            "    doc_ID?: string;",
            "    doc_version?: number;",
        ]

    def test_missing_include_has_no_extends(self):
        definition = Definition(
            kind=CDSKind.ENTITY,
            includes=["cuid"],
            elements={"ID": Element(type="cds.UUID")},
        )
        output = EntityTranslator("Books", definition).to_type([])
        assert output == "export interface Books {\n    ID?: string;\n}"

    def test_empty_entity_is_closed(self):
        output = EntityTranslator("Empty", Definition(kind=CDSKind.ENTITY)).to_type([])
        assert output == "export interface Empty {\n}"

    def test_prefix_and_namespace(self):
        managed = EntityTranslator(
            "sap.common.Managed",
            Definition(kind=CDSKind.ASPECT, elements={"by": Element(type="cds.String")}),
            "I",
            "sap.common",
        )
        books = EntityTranslator(
            "my.bookshop.Books",
            Definition(
                kind=CDSKind.ENTITY,
                includes=["sap.common.Managed"],
                elements={
                    "by": Element(type="cds.String"),
                    "state": Element(type="cds.String", enum={"New": "N"}),
                    "author": Element(
                        type="cds.Association",
                        cardinality=CDSCardinality.ONE,
                        target="my.bookshop.Authors",
                    ),
                    "currency": Element(
                        type="cds.Association",
                        cardinality=CDSCardinality.ONE,
                        target="sap.common.Currencies",
                    ),
                },
            ),
            "I",
            "my.bookshop",
        )
        output = books.to_type([managed, books])
        assert "export enum IBooksState {" in output
        assert "export interface IBooks extends sap.common.IManaged {" in output
        assert "    state?: IBooksState;" in output
        assert "    author?: IAuthors;" in output
        assert "    currency?: sap.common.ICurrencies;" in output

    def test_custom_ref_suffix(self, bookshop):
        config = GeneratorConfig(association_ref_suffix="__")
        entities = [EntityTranslator(n, d, config=config) for n, d in bookshop.items()]
        output = _get(entities, "Books").to_type(entities)
        assert "    author__ID?: number;" in output

    def test_block_closure(self, bookshop_entities):
        for entity in bookshop_entities:
            output = entity.to_type(bookshop_entities)
            assert output.count("{") == output.count("}")

    def test_deterministic(self, bookshop_entities):
        books = _get(bookshop_entities, "Books")
        assert books.to_type(bookshop_entities) == books.to_type(bookshop_entities)

    def test_queries(self, bookshop_entities):
        books = _get(bookshop_entities, "Books")
        assert books.get_model_name() == "Books"
        assert books.get_fields() == ["ID", "title", "genre", "author", "createdAt"]
        assert books.get_sanitized_name() == "Books"

    def test_inline_enum_field_starting_with_digit(self):
        definition = Definition(
            kind=CDSKind.ENTITY,
            elements={"2ndGenre": Element(type="cds.String", enum={"Drama": "D"})},
        )
        output = EntityTranslator("Books", definition).to_type([])
        assert "export enum Books2ndGenre {" in output
        assert '    "2ndGenre"?: Books2ndGenre;' in output

    def test_inline_enum_on_inherited_field(self, bookshop):
        bookshop["Managed"].elements["status"] = Element(type="cds.String")
        bookshop["Books"].elements["status"] = Element(
            type="cds.String", enum={"Open": "O"}
        )
        entities = [EntityTranslator(n, d) for n, d in bookshop.items()]
        output = _get(entities, "Books").to_type(entities)
        assert output.startswith(
            "export enum BooksGenre {\n"
            '    Fiction = "Fiction",\n'
            '    NonFiction = "NonFiction",\n'
            "}\n"
            "export enum BooksStatus {\n"
            '    Open = "O",\n'
            "}\n"
            "export interface Books extends Managed {\n"
        )
        assert "    status?: BooksStatus;" in output
        assert "createdAt" not in output

    def test_global_type_names_are_not_shadowed(self):
        day = EntityTranslator(
            "Date",
            Definition(kind=CDSKind.ENTITY, elements={"ID": Element(type="cds.Date")}),
        )
        events = EntityTranslator(
            "Events",
            Definition(
                kind=CDSKind.ENTITY,
                elements={
                    "at": Element(type="cds.Timestamp"),
                    "day": Element(
                        type="cds.Association",
                        cardinality=CDSCardinality.ONE,
                        target="Date",
                        keys=[KeyRef(ref=["ID"])],
                    ),
                },
            ),
        )
        assert day.to_type([day, events]).startswith("export interface Date_ {")
        output = events.to_type([day, events])
        assert "    at?: Date;" in output
        assert "    day?: Date_;" in output
        assert "    day_ID?: Date;" in output

    def test_prefixed_global_type_name_is_kept(self):
        day = EntityTranslator("Date", Definition(kind=CDSKind.ENTITY), "I")
        assert day.to_type([day]).startswith("export interface IDate {")
