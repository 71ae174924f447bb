"""
Parsing combinators for the DBML grammar.

A ``Parser`` wraps a function ``(text, index) -> Result``. Rules are built
once, at import, from smaller rules and do not change afterwards, so one
rule object can be applied to any number of texts from any thread.

Choice is ordered (PEG style): alternatives are tried in declaration order
and the first success wins. Failures are values, not exceptions; each
result remembers the furthest offset any alternative reached and what was
expected there, which is what ends up in the final ``ParseError``.

Conditions that must abort the whole parse (e.g. indentation mismatch in a
triple-quoted string) are raised as exceptions from inside a rule and pass
through every combinator untouched.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .errors import make_parse_error


@dataclass(frozen=True)
class Result:
    """Outcome of applying a parser at some index."""

    status: bool
    index: int
    value: Any
    furthest: int
    expected: frozenset[str]

    @staticmethod
    def success(index: int, value: Any) -> Result:
        return Result(True, index, value, -1, frozenset())

    @staticmethod
    def failure(index: int, expected: str) -> Result:
        return Result(False, -1, None, index, frozenset([expected]))

    def aggregate(self, other: Result | None) -> Result:
        """Merge the furthest-failure bookkeeping of ``other`` into this result."""
        if other is None:
            return self
        if self.furthest > other.furthest:
            return self
        if self.furthest < other.furthest:
            return Result(self.status, self.index, self.value, other.furthest, other.expected)
        return Result(
            self.status, self.index, self.value, self.furthest, self.expected | other.expected
        )


@dataclass(frozen=True)
class Tagged:
    """A parsed value labelled with the kind of construct it came from."""

    kind: str
    value: Any


class Parser:
    """A composable grammar rule."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[str, int], Result]):
        self._fn = fn

    def __call__(self, text: str, index: int) -> Result:
        return self._fn(text, index)

    def parse(self, text: str) -> Any:
        """Apply this rule to the whole of ``text``; raise ParseError on failure."""
        result = (self << whitespace << eof)(text, 0)
        if not result.status:
            raise make_parse_error(result.furthest, list(result.expected), text)
        return result.value

    # -- combinators --

    def map(self, fn: Callable[[Any], Any]) -> Parser:
        def mapped(text: str, index: int) -> Result:
            result = self(text, index)
            if not result.status:
                return result
            return Result(True, result.index, fn(result.value), result.furthest, result.expected)

        return Parser(mapped)

    def combine(self, fn: Callable[..., Any]) -> Parser:
        """Like ``map`` but spreads a sequence value into positional arguments."""
        return self.map(lambda values: fn(*values))

    def tagged(self, kind: str) -> Parser:
        return self.map(lambda value: Tagged(kind, value))

    def result(self, value: Any) -> Parser:
        return self.map(lambda _: value)

    def then(self, other: Parser) -> Parser:
        return seq(self, other).map(lambda values: values[1])

    def skip(self, other: Parser) -> Parser:
        return seq(self, other).map(lambda values: values[0])

    def many(self) -> Parser:
        return self.times(0)

    def times(self, minimum: int) -> Parser:
        def repeated(text: str, index: int) -> Result:
            values: list[Any] = []
            furthest: Result | None = None
            while True:
                result = self(text, index).aggregate(furthest)
                furthest = result
                if not result.status or result.index == index:
                    break
                values.append(result.value)
                index = result.index
            if len(values) < minimum:
                return furthest
            return Result.success(index, values).aggregate(furthest)

        return Parser(repeated)

    def optional(self, default: Any = None) -> Parser:
        return self | success(default)

    def sep_by(self, separator: Parser, minimum: int = 0) -> Parser:
        at_least_one = seq(self, separator.then(self).many()).combine(
            lambda first, rest: [first, *rest]
        )
        if minimum > 0:
            return at_least_one
        return at_least_one | success([])

    def desc(self, description: str) -> Parser:
        """Report failures of this rule as a single expected item."""

        def described(text: str, index: int) -> Result:
            result = self(text, index)
            if result.status:
                return result
            if result.furthest > index:
                # Failed somewhere inside; keep the more precise report
                return result
            return Result.failure(index, description)

        return Parser(described)

    def __or__(self, other: Parser) -> Parser:
        return alt(self, other)

    def __rshift__(self, other: Parser) -> Parser:
        return self.then(other)

    def __lshift__(self, other: Parser) -> Parser:
        return self.skip(other)


class Forward(Parser):
    """
    A placeholder for a rule that is defined later.

    Grammar modules that import each other bind the placeholder with
    ``define`` while they are imported, so the rule is complete before any
    text is parsed.
    """

    __slots__ = ("_rule",)

    def __init__(self):
        super().__init__(self._apply)
        self._rule: Parser | None = None

    def define(self, rule: Parser) -> None:
        if self._rule is not None:
            raise ValueError("forward rule is already defined")
        self._rule = rule

    def _apply(self, text: str, index: int) -> Result:
        if self._rule is None:
            raise RuntimeError("forward rule used before it was defined")
        return self._rule(text, index)


# -- primitives --


def success(value: Any) -> Parser:
    return Parser(lambda text, index: Result.success(index, value))


def string(literal: str) -> Parser:
    size = len(literal)

    def matcher(text: str, index: int) -> Result:
        if text.startswith(literal, index):
            return Result.success(index + size, literal)
        return Result.failure(index, repr(literal))

    return Parser(matcher)


def regex(pattern: str | re.Pattern[str], group: int = 0, description: str | None = None) -> Parser:
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    expected = description or compiled.pattern

    def matcher(text: str, index: int) -> Result:
        match = compiled.match(text, index)
        if match:
            return Result.success(match.end(), match.group(group))
        return Result.failure(index, expected)

    return Parser(matcher)


def keyword(word: str) -> Parser:
    """Case-insensitive keyword that must end on a word boundary."""
    return regex(re.compile(re.escape(word) + r"\b", re.IGNORECASE), description=repr(word))


def _eof(text: str, index: int) -> Result:
    if index >= len(text):
        return Result.success(index, None)
    return Result.failure(index, "end of input")


eof = Parser(_eof)

whitespace = regex(r"\s*", description="whitespace")


def lexeme(parser: Parser) -> Parser:
    """Skip leading whitespace, then apply ``parser``."""
    return whitespace >> parser


def token(literal: str) -> Parser:
    return lexeme(string(literal))


# -- composition --


def seq(*parsers: Parser) -> Parser:
    """Apply parsers one after another; the value is the list of their values."""

    def sequenced(text: str, index: int) -> Result:
        values = []
        furthest: Result | None = None
        for parser in parsers:
            result = parser(text, index).aggregate(furthest)
            if not result.status:
                return result
            furthest = result
            values.append(result.value)
            index = result.index
        return Result.success(index, values).aggregate(furthest)

    return Parser(sequenced)


def alt(*parsers: Parser) -> Parser:
    """Ordered choice: the first alternative that succeeds wins."""

    def alternated(text: str, index: int) -> Result:
        furthest: Result | None = None
        for parser in parsers:
            result = parser(text, index).aggregate(furthest)
            if result.status:
                return result
            furthest = result
        return furthest if furthest is not None else Result.failure(index, "nothing")

    return Parser(alternated)


def forward() -> Forward:
    """A rule referenced before its definition; see ``Forward``."""
    return Forward()
