"""Pull step lines out of Gherkin scenario files."""

import re
from functools import lru_cache
from typing import Optional

from .config import AuditConfig
from .models import ScenarioStep

COMMENT_RE = re.compile(r"^\s*#")


@lru_cache(maxsize=16)
def scenario_step_regex(keywords: tuple[str, ...]) -> re.Pattern:
    names = "|".join(re.escape(k) for k in keywords)
    return re.compile(rf"^\s*({names})\s+(.*\S)\s*$", re.IGNORECASE)


def extract_scenario_steps(
    text: str, source_file: str = "", config: Optional[AuditConfig] = None
) -> list[ScenarioStep]:
    """Return the keyword-stripped step lines of one feature file.

    Comments, titles, tags, table rows and doc-string bodies are skipped.
    """
    config = config or AuditConfig()
    step_re = scenario_step_regex(tuple(config.scenario_keywords))
    steps = []
    for line_number, line in enumerate(re.split(r"\r?\n", text), start=1):
        if COMMENT_RE.match(line):
            continue
        match = step_re.match(line)
        if match:
            steps.append(
                ScenarioStep(
                    source_file=source_file,
                    text=match.group(2).strip(),
                    line_number=line_number,
                    keyword=match.group(1),
                )
            )
    return steps
