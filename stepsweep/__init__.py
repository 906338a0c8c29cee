"""Find BDD step definitions that no scenario step uses.

Step registrations (``Given("I do {int} things", ...)``, ``When(/^I click (.+)$/i, ...)``)
are extracted from step files, compiled into line matchers and tested against
every step line of the feature files.
"""

from .compiler import classify_literal, compile_literal, compile_step_pattern, expression_to_regex
from .config import AuditConfig
from .declarations import Declaration, extract_declarations, extract_step_patterns
from .discovery import discover_files, read_sources, read_sources_async
from .exceptions import MalformedPatternError, NonLiteralPatternError, StepAuditError
from .matcher import analyze, build_report, match_usage
from .models import PatternKind, ScenarioStep, StepPattern, Usage, UsageReport
from .scenarios import extract_scenario_steps

__all__ = [
    "AuditConfig",
    "Declaration",
    "MalformedPatternError",
    "NonLiteralPatternError",
    "PatternKind",
    "ScenarioStep",
    "StepAuditError",
    "StepPattern",
    "Usage",
    "UsageReport",
    "analyze",
    "build_report",
    "classify_literal",
    "compile_literal",
    "compile_step_pattern",
    "discover_files",
    "expression_to_regex",
    "extract_declarations",
    "extract_scenario_steps",
    "extract_step_patterns",
    "match_usage",
    "read_sources",
    "read_sources_async",
]
