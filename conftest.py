"""Root conftest.py - register step definitions and shared fixtures for pytest-bdd."""

from pathlib import Path

import pytest

from stepsweep import AuditConfig
from tests.step_defs.helpers import AuditWorkspace

STEP_DEFS_DIR = Path(__file__).parent / "tests" / "step_defs"

# Every *_steps.py module in tests/step_defs/ is loaded as a plugin so
# pytest-bdd can see its step definitions from any scenario test module.
pytest_plugins = [
    f"tests.step_defs.{step_file.stem}"
    for step_file in sorted(STEP_DEFS_DIR.glob("*_steps.py"))
]


@pytest.fixture
def audit_config() -> AuditConfig:
    """Default keyword and parameter-type configuration."""
    return AuditConfig()


@pytest.fixture
def audit_workspace(tmp_path: Path) -> AuditWorkspace:
    """Collects the step and feature files a scenario sets up."""
    return AuditWorkspace(root=tmp_path)
