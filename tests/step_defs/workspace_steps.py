"""Step definitions that set up step and feature files."""

from pytest_bdd import given, parsers

from .helpers import AuditWorkspace


@given(parsers.parse('a step file "{name}" containing:'))
def step_file_containing(audit_workspace: AuditWorkspace, name: str, docstring: str) -> None:
    """Write a step definition file below the workspace root."""
    audit_workspace.add_step_file(name, docstring)


@given(parsers.parse('a feature file "{name}" containing:'))
def feature_file_containing(
    audit_workspace: AuditWorkspace, name: str, docstring: str
) -> None:
    """Write a feature file below the workspace root."""
    audit_workspace.add_feature_file(name, docstring)
