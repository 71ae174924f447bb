"""Tests for enum and TableGroup definitions."""

from __future__ import annotations

from dbml.core import ir
from dbml.core.grammar import ENUM, ENUM_CHOICE, TABLE_GROUP


class TestEnum:
    def test_empty_block(self) -> None:
        assert ENUM.parse("enum empty {\n}") == ir.Enum(name="empty", choices=[])

    def test_settings(self) -> None:
        assert ENUM.parse("enum setting {\none [note: 'something']\n}") == ir.Enum(
            name="setting",
            choices=[ir.EnumChoice(name="one", settings={"note": "something"})],
        )

    def test_filled_block(self) -> None:
        assert ENUM.parse("enum filled {\none\ntwo}") == ir.Enum(
            name="filled",
            choices=[ir.EnumChoice(name="one"), ir.EnumChoice(name="two")],
        )

    def test_choices_keep_order(self) -> None:
        assert ENUM.parse("enum status { created\n running }") == ir.Enum(
            name="status",
            choices=[
                ir.EnumChoice(name="created", settings={}),
                ir.EnumChoice(name="running", settings={}),
            ],
        )

    def test_quoted_choice(self) -> None:
        assert ENUM_CHOICE.parse('"in progress"') == ir.EnumChoice(name="in progress")


class TestTableGroup:
    def test_name(self) -> None:
        assert TABLE_GROUP.parse("TableGroup group1 { }") == ir.TableGroup(
            name="group1", tables=[]
        )

    def test_tables(self) -> None:
        assert TABLE_GROUP.parse("TableGroup group2 {\ntable1\ntable2\n}") == ir.TableGroup(
            name="group2", tables=["table1", "table2"]
        )

    def test_members_are_not_resolved(self) -> None:
        group = TABLE_GROUP.parse("TableGroup g { does_not_exist }")
        assert group.tables == ["does_not_exist"]
