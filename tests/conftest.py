from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def run_from_project_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Run every test from the project root so the default rules file
    (primer_rules.yaml) resolves the same way the CLI sees it.
    """
    monkeypatch.chdir(PROJECT_ROOT)


@pytest.fixture
def project_root() -> Path:
    """Get the project root directory."""
    return PROJECT_ROOT
