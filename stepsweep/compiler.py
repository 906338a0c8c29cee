"""Classify step-definition literals and compile them into line matchers.

Three literal forms are understood:

- regex literals, ``/^I click (.+)$/i``, compiled from their body and flags
  as written with the ``regex`` package, which also reads JavaScript named
  groups, ``\\k<name>`` backreferences and ``\\p{...}`` classes;
- Cucumber Expressions in quotes or backticks, ``"I wait {int} seconds"``,
  translated into an anchored, case-insensitive regex;
- anything else (identifiers, calls, concatenations, interpolated template
  strings) which cannot be resolved statically and is reported as unparsed.
"""

import logging
import re
from functools import lru_cache
from typing import Optional

import regex

from .config import PARAMETER_TYPES, AuditConfig
from .exceptions import MalformedPatternError, NonLiteralPatternError
from .models import PatternKind, StepPattern

logger = logging.getLogger(__name__)

QUOTES = ("'", '"', "`")

REGEX_LITERAL_RE = re.compile(r"/(?P<body>.+)/(?P<flags>[dgimsuvy]*)")

# JavaScript flags that change matching of a single line; y anchors the match
# at the start of the line, g, u, d and v don't change a one-line test
REGEX_FLAGS = {
    "i": regex.IGNORECASE,
    "m": regex.MULTILINE,
    "s": regex.DOTALL,
}

_WHITESPACE_RUN_RE = re.compile(r"(\s+)")
_STRING_ESCAPE_RE = re.compile(r"""\\([\\'"`])""")
_BACKREFERENCE_RE = re.compile(r"(?<!\\)((?:\\\\)*)\\k<(\w+)>")


def _has_unescaped(text: str, char: str) -> bool:
    escaped = False
    for c in text:
        if escaped:
            escaped = False
        elif c == "\\":
            escaped = True
        elif c == char:
            return True
    return False


def _is_quoted(raw: str) -> bool:
    if len(raw) < 2 or raw[0] not in QUOTES or raw[-1] != raw[0]:
        return False
    inner = raw[1:-1]
    if _has_unescaped(inner, raw[0]):
        # "a" + "b" starts and ends with a quote but is an expression
        return False
    return not (raw[0] == "`" and "${" in inner)


def classify_literal(raw: str) -> PatternKind:
    """Return the kind of a raw step argument token."""
    raw = raw.strip()
    if raw.startswith("/"):
        return PatternKind.REGEX
    if _is_quoted(raw):
        return PatternKind.EXPRESSION
    return PatternKind.UNPARSED


def regex_flags(flags: str) -> int:
    """Translate JavaScript regex flag letters into ``regex`` flags."""
    value = 0
    for letter in flags:
        value |= REGEX_FLAGS.get(letter, 0)
    return value


@lru_cache(maxsize=32)
def _parameter_splitter(parameter_types: tuple[tuple[str, str], ...]) -> Optional[re.Pattern]:
    if not parameter_types:
        return None
    alternatives = "|".join(re.escape(token) for token, _ in parameter_types)
    return re.compile(f"({alternatives})")


def _escape_literal(text: str) -> str:
    parts = []
    for chunk in _WHITESPACE_RUN_RE.split(text):
        if not chunk:
            continue
        parts.append(r"\s+" if chunk.isspace() else re.escape(chunk))
    return "".join(parts)


def expression_to_regex(
    expression: str, parameter_types: tuple[tuple[str, str], ...] = PARAMETER_TYPES
) -> str:
    """Convert a Cucumber Expression into an anchored regex source string.

    The expression is split into literal and parameter segments first, so
    escaping only ever touches literal text and the capture groups inserted
    for parameters are emitted untouched. Whitespace runs in the literal text
    match one or more whitespace characters. Placeholders missing from
    ``parameter_types`` are kept as literal text.

    Args:
        expression: Expression body without its surrounding quotes.
        parameter_types: Ordered ``(token, regex)`` pairs.

    Returns:
        Regex source of the form ``^...$``.
    """
    table = dict(parameter_types)
    splitter = _parameter_splitter(tuple(parameter_types))
    segments = splitter.split(expression.strip()) if splitter else [expression.strip()]
    parts = []
    for index, segment in enumerate(segments):
        # re.split with one capture group alternates literal, token, literal...
        if index % 2:
            parts.append(table[segment])
        else:
            parts.append(_escape_literal(segment))
    return "^" + "".join(parts) + "$"


def js_regex_source(body: str) -> str:
    """Rewrite ``\\k<name>`` backreferences into the ``(?P=name)`` form."""
    return _BACKREFERENCE_RE.sub(r"\1(?P=\2)", body)


def unquote(raw: str) -> str:
    """Strip one layer of quotes or backticks and resolve escaped delimiters."""
    return _STRING_ESCAPE_RE.sub(r"\1", raw[1:-1])


def compile_literal(
    raw: str,
    source_file: str,
    config: Optional[AuditConfig] = None,
    line_number: Optional[int] = None,
) -> StepPattern:
    """Compile one raw step argument into a ``StepPattern``.

    Raises:
        NonLiteralPatternError: the token is not a static literal.
        MalformedPatternError: the literal does not compile.
    """
    config = config or AuditConfig()
    raw = raw.strip()
    kind = classify_literal(raw)

    if kind is PatternKind.REGEX:
        literal = REGEX_LITERAL_RE.fullmatch(raw)
        if literal is None:
            raise NonLiteralPatternError(raw)
        body, flags = literal.group("body"), literal.group("flags")
        try:
            matcher = regex.compile(js_regex_source(body), regex_flags(flags))
        except regex.error as e:
            raise MalformedPatternError(raw, str(e)) from e
        return StepPattern(
            source_file=source_file,
            kind=kind,
            raw_text=body,
            matcher=matcher,
            line_number=line_number,
            flags=flags,
        )

    if kind is PatternKind.EXPRESSION:
        inner = raw[1:-1]
        source = expression_to_regex(unquote(raw), config.parameter_types)
        try:
            matcher = re.compile(source, re.IGNORECASE)
        except re.error as e:
            # only reachable through a broken custom parameter type
            raise MalformedPatternError(raw, str(e)) from e
        return StepPattern(
            source_file=source_file,
            kind=kind,
            raw_text=inner,
            matcher=matcher,
            line_number=line_number,
        )

    raise NonLiteralPatternError(raw)


def compile_step_pattern(
    raw: str,
    source_file: str,
    config: Optional[AuditConfig] = None,
    line_number: Optional[int] = None,
) -> StepPattern:
    """Like ``compile_literal`` but returns an unknown-usage pattern on failure."""
    try:
        return compile_literal(raw, source_file, config, line_number)
    except MalformedPatternError as e:
        logger.debug("%s:%s: %s", source_file, line_number, e)
        return StepPattern(
            source_file=source_file,
            kind=PatternKind.REGEX if e.raw.startswith("/") else PatternKind.EXPRESSION,
            raw_text=e.raw,
            line_number=line_number,
            error=e.reason,
        )
    except NonLiteralPatternError as e:
        logger.debug("%s:%s: %s", source_file, line_number, e)
        return StepPattern(
            source_file=source_file,
            kind=PatternKind.UNPARSED,
            raw_text=e.raw,
            line_number=line_number,
            error=str(e),
        )
