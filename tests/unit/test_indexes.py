"""Tests for index definitions and indexes blocks."""

from __future__ import annotations

import pytest

from dbml.core import ir
from dbml.core.errors import ParseError
from dbml.core.grammar import INDEX, INDEXES


class TestIndex:
    def test_single_field(self) -> None:
        assert INDEX.parse("id") == ir.Index(fields=["id"], settings={})

    def test_composite_fields(self) -> None:
        assert INDEX.parse("(id, country)") == ir.Index(fields=["id", "country"])

    def test_expression(self) -> None:
        assert INDEX.parse("(`id*2`)") == ir.Index(fields=[ir.Expression(text="id*2")])

    def test_expressions(self) -> None:
        assert INDEX.parse("(`id*2`,`id*3`)") == ir.Index(
            fields=[ir.Expression(text="id*2"), ir.Expression(text="id*3")]
        )

    def test_expression_mixed_with_field(self) -> None:
        assert INDEX.parse("(`id*3`,id)") == ir.Index(
            fields=[ir.Expression(text="id*3"), "id"]
        )

    def test_naked_field_with_settings(self) -> None:
        assert INDEX.parse("test_col [type: 'hash']") == ir.Index(
            fields=["test_col"], settings={"type": "hash"}
        )

    def test_composite_with_settings(self) -> None:
        assert INDEX.parse("(country, booking_date) [unique]") == ir.Index(
            fields=["country", "booking_date"], settings={"unique": ir.ABSENT}
        )

    def test_bare_and_parenthesized_single_field_match(self) -> None:
        assert INDEX.parse("(created_at)") == INDEX.parse("created_at")
        assert INDEX.parse("created_at").fields == ["created_at"]

    def test_settings_default_to_empty_mapping(self) -> None:
        assert INDEX.parse("(a, b)").settings == {}

    def test_empty_field_list_is_rejected(self) -> None:
        with pytest.raises(ParseError):
            INDEX.parse("()")


class TestIndexes:
    def test_empty_block(self) -> None:
        assert INDEXES.parse("indexes { }") == []

    def test_single_index(self) -> None:
        assert INDEXES.parse("indexes {\ncolumn_name\n}") == [ir.Index(fields=["column_name"])]

    def test_multiple_indexes(self) -> None:
        assert INDEXES.parse("indexes {\n(composite) [pk]\ntest_index [unique]\n}") == [
            ir.Index(fields=["composite"], settings={"pk": ir.ABSENT}),
            ir.Index(fields=["test_index"], settings={"unique": ir.ABSENT}),
        ]
