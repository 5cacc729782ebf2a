"""
Shared test fixtures for ragged-csv tests.

Sample inputs live here as module-level constants so both unit and
integration tests parse the same text.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Sample inputs
# ---------------------------------------------------------------------------
SEPARATORS = ["\t", ",", ";"]

INVENTORY_CSV = """\
sku,name,qty,price,note
A-100,widget,12,2.50,
A-101,gadget,,10,fragile
A-102,gizmo,3,-0.75,,extra
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture(params=SEPARATORS, ids=["tab", "comma", "semicolon"])
def separator(request: pytest.FixtureRequest) -> str:
    """Each of the common single-character separators in turn."""
    return request.param


@pytest.fixture()
def inventory_file(tmp_path: Path) -> Path:
    """The inventory sample written to a temporary CSV file."""
    path = tmp_path / "inventory.csv"
    path.write_text(INVENTORY_CSV, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs the full read -> export job)",
    )
