"""Step definitions for the stepsweep command line."""

import json
import shlex

import pytest
from pytest_bdd import parsers, then, when

from stepsweep.cli import main

from .helpers import AuditWorkspace


def _run(audit_workspace: AuditWorkspace, args: list[str], capsys, monkeypatch) -> None:
    monkeypatch.delenv("STEP_GLOB", raising=False)
    monkeypatch.delenv("FEATURE_GLOB", raising=False)
    audit_workspace.exit_code = main(["--root", str(audit_workspace.root), *args])
    audit_workspace.output = capsys.readouterr().out


@when("stepsweep runs with the default globs")
def stepsweep_runs_with_defaults(
    audit_workspace: AuditWorkspace, capsys: pytest.CaptureFixture, monkeypatch
) -> None:
    _run(audit_workspace, [], capsys, monkeypatch)


@when(parsers.parse('stepsweep runs with "{args}"'))
def stepsweep_runs_with(
    audit_workspace: AuditWorkspace, args: str, capsys: pytest.CaptureFixture, monkeypatch
) -> None:
    _run(audit_workspace, shlex.split(args), capsys, monkeypatch)


@then(parsers.parse("the exit code is {code:d}"))
def exit_code_is(audit_workspace: AuditWorkspace, code: int) -> None:
    assert audit_workspace.exit_code == code


@then(parsers.parse('the output contains "{text}"'))
def output_contains(audit_workspace: AuditWorkspace, text: str) -> None:
    assert text in audit_workspace.output, audit_workspace.output


@then(
    parsers.parse(
        "the JSON summary reports {unused:d} unused and {unparsed:d} unparsed step definitions"
    )
)
def json_summary_reports(audit_workspace: AuditWorkspace, unused: int, unparsed: int) -> None:
    summary = json.loads(audit_workspace.output)["summary"]
    assert summary["unused"] == unused
    assert summary["unparsed"] == unparsed
