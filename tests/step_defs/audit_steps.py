"""Step definitions for running the audit and checking the usage report."""

from pytest_bdd import parsers, then, when

from stepsweep import AuditConfig, UsageReport, analyze

from .helpers import AuditWorkspace, find_pattern

BUCKETS = {
    "used": lambda report: report.used,
    "unused": lambda report: report.unused,
    "unparsed": lambda report: report.unparsed,
}


@when("the step usage audit runs", target_fixture="usage_report")
def step_usage_audit_runs(
    audit_workspace: AuditWorkspace, audit_config: AuditConfig
) -> UsageReport:
    """Analyze every file the scenario wrote."""
    report = analyze(
        audit_workspace.sources(audit_workspace.step_files),
        audit_workspace.sources(audit_workspace.feature_files),
        audit_config,
    )
    audit_workspace.report = report
    return report


@then(
    parsers.re(
        r"(?P<count>\d+) step definitions? (?:is|are) (?P<bucket>parsed|unused|unparsed)"
    ),
    converters={"count": int},
)
def step_definitions_counted(usage_report: UsageReport, count: int, bucket: str) -> None:
    counts = {
        "parsed": usage_report.parsed_count,
        "unused": usage_report.unused_count,
        "unparsed": usage_report.unparsed_count,
    }
    assert counts[bucket] == count, (
        f"Expected {count} {bucket} step definitions, got {counts[bucket]}"
    )


@then(parsers.re(r'"(?P<pattern>.+)" is reported as (?P<bucket>used|unused|unparsed)'))
def pattern_reported_as(usage_report: UsageReport, pattern: str, bucket: str) -> None:
    find_pattern(BUCKETS[bucket](usage_report), pattern)
