"""Tests for the short and block relationship forms."""

from __future__ import annotations

import pytest

from dbml import parse
from dbml.core import ir
from dbml.core.errors import ParseError
from dbml.core.grammar import RELATIONSHIP, RELATIONSHIP_KIND, RELATIONSHIP_PART


class TestRelationshipParts:
    def test_kinds(self) -> None:
        assert RELATIONSHIP_KIND.parse(">") == ir.RelationshipKind.MANY_TO_ONE
        assert RELATIONSHIP_KIND.parse("<") == ir.RelationshipKind.ONE_TO_MANY
        assert RELATIONSHIP_KIND.parse("-") == ir.RelationshipKind.ONE_TO_ONE

    def test_single_field(self) -> None:
        assert RELATIONSHIP_PART.parse("users.id") == ("users", ["id"])

    def test_composite_fields(self) -> None:
        assert RELATIONSHIP_PART.parse("users.(id, region)") == ("users", ["id", "region"])

    def test_quoted_names(self) -> None:
        assert RELATIONSHIP_PART.parse('"user table"."user id"') == ("user table", ["user id"])


class TestShortForm:
    def test_many_to_one(self) -> None:
        assert RELATIONSHIP.parse("Ref: posts.user_id > users.id") == ir.Relationship(
            name=None,
            left_table="posts",
            left_fields=["user_id"],
            kind=ir.RelationshipKind.MANY_TO_ONE,
            right_table="users",
            right_fields=["id"],
            settings={},
        )

    def test_named(self) -> None:
        ref = RELATIONSHIP.parse("Ref fk_orders: orders.customer_id < customers.id")
        assert ref.name == "fk_orders"
        assert ref.kind == ir.RelationshipKind.ONE_TO_MANY
        assert not ref.is_inline

    def test_settings(self) -> None:
        ref = RELATIONSHIP.parse("Ref: a.b - c.d [delete: cascade, update: no action]")
        assert ref.kind == ir.RelationshipKind.ONE_TO_ONE
        assert ref.settings == {
            "delete": ir.Keyword(name="cascade"),
            "update": ir.Keyword(name="no action"),
        }


class TestBlockForm:
    def test_block(self) -> None:
        ref = RELATIONSHIP.parse(
            "Ref {\n  merchant_periods.(merchant_id, country_code) > merchants.(id, country_code)\n}"
        )
        assert ref.name is None
        assert ref.left_table == "merchant_periods"
        assert ref.left_fields == ["merchant_id", "country_code"]
        assert ref.right_table == "merchants"
        assert ref.right_fields == ["id", "country_code"]

    def test_named_block_with_settings(self) -> None:
        ref = RELATIONSHIP.parse("Ref name {\n  a.b > c.d [delete: set null]\n}")
        assert ref.name == "name"
        assert ref.settings == {"delete": ir.Keyword(name="set null")}

    def test_block_and_short_forms_agree(self) -> None:
        assert RELATIONSHIP.parse("Ref { a.b > c.d }") == RELATIONSHIP.parse("Ref: a.b > c.d")


class TestOperatorSpacing:
    def test_one_to_one_without_spaces(self) -> None:
        assert RELATIONSHIP.parse("Ref: a.b-c.d") == RELATIONSHIP.parse("Ref: a.b - c.d")
        assert RELATIONSHIP.parse("Ref: a.b-c.d").kind == ir.RelationshipKind.ONE_TO_ONE

    def test_all_operators_without_spaces(self) -> None:
        for operator in (">", "<", "-"):
            ref = RELATIONSHIP.parse(f"Ref: a.b{operator}c.d")
            assert (ref.left_fields, ref.kind, ref.right_table) == (
                ["b"],
                ir.RelationshipKind(operator),
                "c",
            )

    def test_quoted_field_with_hyphen(self) -> None:
        ref = RELATIONSHIP.parse('Ref: orders."order-id" > items."order-id"')
        assert ref.left_fields == ["order-id"]
        assert ref.right_fields == ["order-id"]

    def test_inline_ref_without_spaces(self) -> None:
        column = parse("Table t { a int [ref:-u.id] }").tables[0].columns[0]
        (ref,) = column.inline_refs
        assert ref.kind == ir.RelationshipKind.ONE_TO_ONE
        assert (ref.right_table, ref.right_fields) == ("u", ["id"])


class TestInvalidRelationships:
    def test_unknown_operator(self) -> None:
        with pytest.raises(ParseError):
            RELATIONSHIP.parse("Ref: a.b <> c.d")

    def test_missing_field(self) -> None:
        with pytest.raises(ParseError):
            RELATIONSHIP.parse("Ref: a > c.d")

    def test_empty_field_list(self) -> None:
        with pytest.raises(ParseError):
            RELATIONSHIP.parse("Ref: a.() > c.d")
