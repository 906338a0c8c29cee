"""Configuration for the step usage audit.

All settings live on an immutable ``AuditConfig`` value that is passed
explicitly into the extractor and compiler.
"""

import os
from dataclasses import dataclass, replace

DEFAULT_STEP_GLOB = "cypress/e2e/**/*.steps.{js,ts}"
DEFAULT_FEATURE_GLOB = "cypress/e2e/**/*.feature"

# Call sites that register a step definition: Given(pattern, fn)
DECLARATION_KEYWORDS = ("Given", "When", "Then", "And", "But", "defineStep")

# Keywords that start a step line in a .feature file
SCENARIO_KEYWORDS = ("Given", "When", "Then", "And", "But")

_INT = r"(-?\d+)"
_FLOAT = r"(-?\d+(?:[.,]\d+)?)"

# Built-in Cucumber Expression parameter types, in substitution order
PARAMETER_TYPES = (
    ("{int}", _INT),
    ("{float}", _FLOAT),
    ("{word}", r"(\S+)"),
    ("{string}", r"""(?:"([^"]*)"|'([^']*)'|`([^`]*)`)"""),
    ("{bigint}", _INT),
    ("{byte}", _INT),
    ("{short}", _INT),
    ("{double}", _FLOAT),
    ("{biginteger}", _INT),
    ("{uuid}", r"([0-9a-fA-F]{8}-(?:[0-9a-fA-F]{4}-){3}[0-9a-fA-F]{12})"),
    ("{any}", r"(.+)"),
)

DEFAULT_MAX_UNPARSED = 50


@dataclass(frozen=True)
class AuditConfig:
    """Keyword sets, parameter types and file globs for one audit run."""

    declaration_keywords: tuple[str, ...] = DECLARATION_KEYWORDS
    scenario_keywords: tuple[str, ...] = SCENARIO_KEYWORDS
    parameter_types: tuple[tuple[str, str], ...] = PARAMETER_TYPES
    step_glob: str = DEFAULT_STEP_GLOB
    feature_glob: str = DEFAULT_FEATURE_GLOB

    @classmethod
    def from_env(cls, environ=None) -> "AuditConfig":
        """Build a config whose globs honour ``STEP_GLOB`` and ``FEATURE_GLOB``."""
        environ = os.environ if environ is None else environ
        return cls(
            step_glob=environ.get("STEP_GLOB") or DEFAULT_STEP_GLOB,
            feature_glob=environ.get("FEATURE_GLOB") or DEFAULT_FEATURE_GLOB,
        )

    def with_parameter_types(self, **patterns: str) -> "AuditConfig":
        """Return a copy with custom parameter types added or overridden.

        Keys are bare type names (``color``), values the regex each
        ``{color}`` placeholder should turn into.
        """
        table = dict(self.parameter_types)
        for name, regex in patterns.items():
            table["{" + name + "}"] = regex
        return replace(self, parameter_types=tuple(table.items()))

    def with_declaration_keywords(self, *keywords: str) -> "AuditConfig":
        """Return a copy that also recognizes ``keywords`` as step registrations."""
        extra = tuple(k for k in keywords if k not in self.declaration_keywords)
        return replace(self, declaration_keywords=self.declaration_keywords + extra)
