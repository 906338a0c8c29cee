"""Find step registrations in step-definition source files."""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from .compiler import compile_step_pattern
from .config import AuditConfig
from .models import StepPattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Declaration:
    """Raw first argument of one step registration call."""

    source_file: str
    token: str
    line_number: int


@lru_cache(maxsize=16)
def step_call_regex(keywords: tuple[str, ...]) -> re.Pattern:
    """Regex for ``Keyword(<first argument>,`` call sites.

    The argument runs up to the first comma, whatever it contains, so
    commas nested in the argument split it early.
    """
    names = "|".join(re.escape(k) for k in keywords)
    return re.compile(rf"\b(?:{names})\s*\(\s*([^,]+)\s*,")


def extract_declarations(
    source: str, source_file: str, config: Optional[AuditConfig] = None
) -> list[Declaration]:
    """Return the raw pattern tokens of all step registrations in ``source``."""
    config = config or AuditConfig()
    declarations = []
    for match in step_call_regex(tuple(config.declaration_keywords)).finditer(source):
        token = match.group(1).strip()
        line_number = source.count("\n", 0, match.start(1)) + 1
        declarations.append(Declaration(source_file, token, line_number))
    return declarations


def extract_step_patterns(
    source: str, source_file: str, config: Optional[AuditConfig] = None
) -> list[StepPattern]:
    """Extract and compile every step pattern declared in one file."""
    config = config or AuditConfig()
    patterns = [
        compile_step_pattern(d.token, d.source_file, config, d.line_number)
        for d in extract_declarations(source, source_file, config)
    ]
    logger.debug("%s: %d step definitions", source_file, len(patterns))
    return patterns
