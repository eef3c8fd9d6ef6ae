"""Mathematical interval expressions used to guard catalog messages.

An interval can represent a finite set of numbers::

    {1,2,3,4}

or the numbers between two bounds::

    [1, +Inf]
    ]-1,2[

The left delimiter can be ``[`` (inclusive) or ``]`` (exclusive). The right
delimiter can be ``[`` (exclusive) or ``]`` (inclusive). Besides numbers,
``-Inf``, ``+Inf``, ``Inf`` and ``*`` stand for the infinities. A left bound
written as ``+Inf``, ``Inf`` or ``*`` means "no lower bound" and is read as
negative infinity.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple, Union

from i18nkit.errors import IntervalParseError
from i18nkit.logging import get_module_logger

logger = get_module_logger()


class TokenKind(str, Enum):
    """Lexical categories of the interval grammar."""

    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    COMMA = ","
    NUMBER = "number"
    INF = "inf"
    STAR = "*"


@dataclass(frozen=True)
class Token:
    """A single lexical token with its offset in the source text."""

    kind: TokenKind
    text: str
    pos: int

    @property
    def end(self) -> int:
        return self.pos + len(self.text)


_TOKEN_PATTERN = re.compile(
    r"""
    (?P<ws>\s+)
    | (?P<number>-?[0-9]+(?:\.[0-9]+)?)
    | (?P<inf>[-+]?Inf)
    | (?P<star>\*)
    | (?P<punct>[{}\[\],])
    """,
    re.VERBOSE,
)

_PUNCTUATION = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    ",": TokenKind.COMMA,
}

_BOUND_KINDS = (TokenKind.NUMBER, TokenKind.INF, TokenKind.STAR)


def tokenize(text: str, start: int = 0) -> Iterator[Token]:
    """Lazily split interval text into tokens, skipping whitespace.

    Tokens are produced on demand, so a caller that stops pulling after the
    closing delimiter never sees (or fails on) the text that follows.

    Args:
        text: Interval source text.
        start: Offset to start scanning from.

    Yields:
        Token instances in source order.

    Raises:
        IntervalParseError: On a character that starts no valid token.
    """
    pos = start
    while pos < len(text):
        match = _TOKEN_PATTERN.match(text, pos)
        if match is None:
            raise IntervalParseError(
                text, position=pos, reason=f"unexpected character {text[pos]!r}"
            )
        kind = match.lastgroup
        value = match.group()
        if kind == "number":
            yield Token(TokenKind.NUMBER, value, pos)
        elif kind == "inf":
            yield Token(TokenKind.INF, value, pos)
        elif kind == "star":
            yield Token(TokenKind.STAR, value, pos)
        elif kind == "punct":
            yield Token(_PUNCTUATION[value], value, pos)
        pos = match.end()


def to_integer(text: str) -> int:
    """Integer part of a decimal literal, truncated toward zero."""
    return int(text.split(".", 1)[0])


def convert_bound(text: str) -> Union[int, float]:
    """Convert a bound literal to a number.

    ``-Inf`` is negative infinity; ``+Inf``, ``Inf`` and ``*`` are positive
    infinity; anything else is read as an integer.
    """
    if text == "-Inf":
        return -math.inf
    if text in ("+Inf", "Inf", "*"):
        return math.inf
    return to_integer(text)


@dataclass(frozen=True)
class DiscreteSet:
    """A finite set of integers, e.g. ``{0}`` or ``{1,2,3}``."""

    values: Tuple[int, ...]

    def contains(self, count: int) -> bool:
        return count in self.values


@dataclass(frozen=True)
class Range:
    """A bounded range, e.g. ``[1,10[`` or ``]-Inf,0]``.

    Attributes:
        low: Lower bound (an integer or an infinity).
        high: Upper bound (an integer or an infinity).
        left_inclusive: True when written with ``[`` on the left.
        right_inclusive: True when written with ``]`` on the right.
    """

    low: Union[int, float]
    high: Union[int, float]
    left_inclusive: bool
    right_inclusive: bool

    def contains(self, count: int) -> bool:
        above = count >= self.low if self.left_inclusive else count > self.low
        below = count <= self.high if self.right_inclusive else count < self.high
        return above and below


Interval = Union[DiscreteSet, Range]


class _IntervalParser:
    """Recursive-descent parser for a single interval expression."""

    def __init__(self, text: str, start: int = 0):
        self.text = text
        self.end = start
        self._tokens = tokenize(text, start)
        self._current: Optional[Token] = None

    def _peek(self) -> Optional[Token]:
        if self._current is None:
            self._current = next(self._tokens, None)
        return self._current

    def _take(self, *kinds: TokenKind) -> Token:
        token = self._peek()
        if token is None:
            raise IntervalParseError(
                self.text, position=len(self.text), reason="unexpected end of input"
            )
        if token.kind not in kinds:
            expected = " or ".join(kind.value for kind in kinds)
            raise IntervalParseError(
                self.text,
                position=token.pos,
                reason=f"expected {expected}, found {token.text!r}",
            )
        self._current = None
        self.end = token.end
        return token

    def parse(self) -> Interval:
        token = self._peek()
        if token is None:
            raise IntervalParseError(self.text, position=self.end, reason="empty interval")
        if token.kind is TokenKind.LBRACE:
            return self._parse_set()
        if token.kind in (TokenKind.LBRACKET, TokenKind.RBRACKET):
            return self._parse_range()
        raise IntervalParseError(
            self.text,
            position=token.pos,
            reason=f"interval must start with '{{', '[' or ']', found {token.text!r}",
        )

    def parse_complete(self) -> Interval:
        interval = self.parse()
        trailing = self._peek()
        if trailing is not None:
            raise IntervalParseError(
                self.text,
                position=trailing.pos,
                reason=f"unexpected trailing {trailing.text!r}",
            )
        return interval

    def _parse_set(self) -> DiscreteSet:
        self._take(TokenKind.LBRACE)
        values = [to_integer(self._take(TokenKind.NUMBER).text)]
        while self._take(TokenKind.COMMA, TokenKind.RBRACE).kind is TokenKind.COMMA:
            values.append(to_integer(self._take(TokenKind.NUMBER).text))
        return DiscreteSet(tuple(values))

    def _parse_range(self) -> Range:
        left = self._take(TokenKind.LBRACKET, TokenKind.RBRACKET)
        low = convert_bound(self._take(*_BOUND_KINDS).text)
        self._take(TokenKind.COMMA)
        high = convert_bound(self._take(*_BOUND_KINDS).text)
        right = self._take(TokenKind.LBRACKET, TokenKind.RBRACKET)

        # An unbounded left edge reads as "from negative infinity".
        if low == math.inf:
            low = -math.inf

        return Range(
            low=low,
            high=high,
            left_inclusive=left.kind is TokenKind.LBRACKET,
            right_inclusive=right.kind is TokenKind.RBRACKET,
        )


def parse_interval(interval: str) -> Interval:
    """Parse an interval expression.

    Surrounding whitespace is ignored; everything else must belong to the
    interval.

    Args:
        interval: Interval text such as ``{1,2}`` or ``[2,*]``.

    Returns:
        A DiscreteSet or Range.

    Raises:
        IntervalParseError: If the text does not conform to the grammar.
    """
    text = interval.strip()
    try:
        return _IntervalParser(text).parse_complete()
    except IntervalParseError as e:
        logger.warning(
            "interval_parse_failed",
            interval=text,
            position=e.position,
            reason=e.reason,
        )
        raise


def match_interval_prefix(text: str) -> Optional[Tuple[Interval, str]]:
    """Read an interval at the start of ``text``.

    Args:
        text: Text such as ``"[2,*] :count apples"``.

    Returns:
        The parsed interval and the text that follows it, or None if the text
        does not start with a well-formed interval.
    """
    stripped = text.lstrip()
    if not stripped or stripped[0] not in "{[]":
        return None

    parser = _IntervalParser(stripped)
    try:
        interval = parser.parse()
    except IntervalParseError:
        return None
    return interval, stripped[parser.end:]


def test_interval(count: int, interval: str) -> bool:
    """Test whether ``count`` belongs to the interval.

    Args:
        count: Number to test.
        interval: Interval expression.

    Returns:
        True if the number is in the interval.

    Raises:
        IntervalParseError: If the interval is malformed.
    """
    return parse_interval(interval).contains(count)


# Keep pytest from collecting the public ``test_interval`` helper when it is
# imported into a test module.
test_interval.__test__ = False
