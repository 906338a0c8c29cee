"""Data model shared by the extractors, the matcher and the reporter."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional


class PatternKind(str, Enum):
    REGEX = "regex"
    EXPRESSION = "expression"
    UNPARSED = "unparsed"


class Usage(str, Enum):
    USED = "used"
    UNUSED = "unused"
    UNKNOWN = "unknown"


@dataclass
class StepPattern:
    """One step-definition literal found in one step file.

    ``usage`` stays ``None`` for compiled patterns until the matcher has run.
    Patterns without a matcher are ``Usage.UNKNOWN`` from the start.
    """

    source_file: str
    kind: PatternKind
    raw_text: str
    matcher: Optional[Any] = None
    usage: Optional[Usage] = None
    line_number: Optional[int] = None
    flags: str = ""
    error: Optional[str] = None

    def __post_init__(self):
        if self.matcher is None:
            self.usage = Usage.UNKNOWN

    @property
    def display_text(self) -> str:
        """Pattern text as it would appear in the step file."""
        if self.matcher is None:
            return self.raw_text
        if self.kind is PatternKind.REGEX:
            return f"/{self.raw_text}/{self.flags}"
        return f'"{self.raw_text}"'

    def accepts(self, text: str) -> bool:
        """Whether this pattern matches one scenario step line."""
        if self.matcher is None:
            return False
        if self.kind is PatternKind.REGEX and "y" in self.flags:
            # sticky regex literals only match from the start of the line
            return self.matcher.match(text) is not None
        return self.matcher.search(text) is not None


@dataclass(frozen=True)
class ScenarioStep:
    """One keyword-stripped step line from a scenario file."""

    source_file: str
    text: str
    line_number: Optional[int] = None
    keyword: str = ""


@dataclass
class UsageReport:
    """Aggregated result of one audit run, in extraction order."""

    step_file_count: int = 0
    scenario_file_count: int = 0
    scenario_step_count: int = 0
    used: list[StepPattern] = field(default_factory=list)
    unused: list[StepPattern] = field(default_factory=list)
    unparsed: list[StepPattern] = field(default_factory=list)

    @property
    def parsed_count(self) -> int:
        return len(self.used) + len(self.unused)

    @property
    def used_count(self) -> int:
        return len(self.used)

    @property
    def unused_count(self) -> int:
        return len(self.unused)

    @property
    def unparsed_count(self) -> int:
        return len(self.unparsed)

    def unparsed_preview(self, limit: int) -> tuple[list[StepPattern], int]:
        """Return at most ``limit`` unparsed patterns and how many were left out."""
        shown = self.unparsed[: max(limit, 0)]
        return shown, len(self.unparsed) - len(shown)

    def to_dict(self, format_path: Callable[[str], str] = str) -> dict[str, Any]:
        def entry(pattern: StepPattern) -> dict[str, Any]:
            return {
                "file": format_path(pattern.source_file),
                "line": pattern.line_number,
                "kind": pattern.kind.value,
                "pattern": pattern.raw_text,
                "flags": pattern.flags,
                "error": pattern.error,
            }

        return {
            "summary": {
                "step_files": self.step_file_count,
                "scenario_files": self.scenario_file_count,
                "scenario_steps": self.scenario_step_count,
                "parsed": self.parsed_count,
                "used": self.used_count,
                "unused": self.unused_count,
                "unparsed": self.unparsed_count,
            },
            "unused": [entry(p) for p in self.unused],
            "unparsed": [entry(p) for p in self.unparsed],
        }
