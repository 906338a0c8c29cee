"""Cross-reference compiled step patterns with scenario steps."""

import logging
from typing import Iterable, Optional, Sequence

from .config import AuditConfig
from .declarations import extract_step_patterns
from .models import ScenarioStep, StepPattern, Usage, UsageReport
from .scenarios import extract_scenario_steps

logger = logging.getLogger(__name__)


def classify_usage(pattern: StepPattern, step_texts: Sequence[str]) -> Usage:
    """Used if any step line matches the pattern, unknown if it has no matcher."""
    if pattern.matcher is None:
        return Usage.UNKNOWN
    if any(pattern.accepts(text) for text in step_texts):
        return Usage.USED
    return Usage.UNUSED


def match_usage(
    patterns: Iterable[StepPattern], steps: Iterable[ScenarioStep]
) -> list[StepPattern]:
    """Set ``usage`` on every pattern and return them in their original order."""
    patterns = list(patterns)
    step_texts = [step.text for step in steps]
    for pattern in patterns:
        pattern.usage = classify_usage(pattern, step_texts)
    return patterns


def build_report(
    patterns: Iterable[StepPattern],
    step_file_count: int = 0,
    scenario_file_count: int = 0,
    scenario_step_count: int = 0,
) -> UsageReport:
    """Partition matched patterns by usage, keeping extraction order."""
    report = UsageReport(
        step_file_count=step_file_count,
        scenario_file_count=scenario_file_count,
        scenario_step_count=scenario_step_count,
    )
    buckets = {
        Usage.USED: report.used,
        Usage.UNUSED: report.unused,
        Usage.UNKNOWN: report.unparsed,
    }
    for pattern in patterns:
        if pattern.usage is None:
            raise ValueError(f"Pattern {pattern.raw_text!r} has not been matched yet")
        buckets[pattern.usage].append(pattern)
    return report


def analyze(
    step_sources: Iterable[tuple[str, str]],
    scenario_sources: Iterable[tuple[str, str]],
    config: Optional[AuditConfig] = None,
) -> UsageReport:
    """Run the whole audit over in-memory ``(file_id, text)`` pairs.

    Args:
        step_sources: Step-definition files, in reporting order.
        scenario_sources: Scenario (.feature) files.
        config: Keyword and parameter-type configuration.

    Returns:
        The usage report for all declared step patterns.
    """
    config = config or AuditConfig()
    step_sources = list(step_sources)
    scenario_sources = list(scenario_sources)

    patterns = [
        pattern
        for source_file, text in step_sources
        for pattern in extract_step_patterns(text, source_file, config)
    ]
    steps = [
        step
        for source_file, text in scenario_sources
        for step in extract_scenario_steps(text, source_file, config)
    ]
    logger.debug(
        "Matching %d step patterns against %d scenario steps",
        len(patterns),
        len(steps),
    )

    return build_report(
        match_usage(patterns, steps),
        step_file_count=len(step_sources),
        scenario_file_count=len(scenario_sources),
        scenario_step_count=len(steps),
    )
