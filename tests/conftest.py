"""
Shared test fixtures and sample inputs for flatparse tests.

Sample texts are module-level constants so tests can import them
directly; the fixtures write them to ``tmp_path`` for the file-level
tests.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Sample inputs
# ---------------------------------------------------------------------------
CSV_SAMPLE = "0,1\n-2,-3.4"

INI_SAMPLE = """
username=abc
password=pass

[server_1]
interface=eth0
ip=127.0.0.1
document_root=/var/www/example.org

[empty_section]

[second_server]
document_root=/var/www/example.com
ip=
interface=eth1
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def csv_file(tmp_path: Path) -> Path:
    path = tmp_path / "readings.csv"
    path.write_text(CSV_SAMPLE + "\n", encoding="utf-8")
    return path


@pytest.fixture()
def ini_file(tmp_path: Path) -> Path:
    path = tmp_path / "servers.ini"
    path.write_text(INI_SAMPLE, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (parses files end to end)",
    )
