"""Shared helpers for the step usage step definitions."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from stepsweep import StepPattern, UsageReport


@dataclass
class AuditWorkspace:
    """Step and feature files written by a scenario, in creation order."""

    root: Path
    step_files: list[str] = field(default_factory=list)
    feature_files: list[str] = field(default_factory=list)
    report: Optional[UsageReport] = None
    output: str = ""
    exit_code: Optional[int] = None

    def write(self, name: str, content: str) -> str:
        path = self.root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return str(path)

    def add_step_file(self, name: str, content: str) -> None:
        self.step_files.append(self.write(name, content))

    def add_feature_file(self, name: str, content: str) -> None:
        self.feature_files.append(self.write(name, content))

    def sources(self, paths: list[str]) -> list[tuple[str, str]]:
        return [(p, Path(p).read_text(encoding="utf-8")) for p in paths]


def find_pattern(patterns: list[StepPattern], raw_text: str) -> StepPattern:
    """Return the pattern whose raw text (or display text) is ``raw_text``."""
    for pattern in patterns:
        if raw_text in (pattern.raw_text, pattern.display_text):
            return pattern
    listed = ", ".join(p.display_text for p in patterns) or "nothing"
    raise AssertionError(f"{raw_text!r} not found, report lists: {listed}")
