"""Shared test fixtures."""

import pytest

SAMPLE = """\
# Capitals
# second line

>>
# europe
Q:
    Capital of France?
A:
    Paris
S:
    4 3 75
<<

>>
Q:
    Capital of Japan?
A:
    Tokyo
<<

>>
Q:
    Capital of Peru?
A:
    Lima
S:
    20 12 95.5 1 2
<<
"""


@pytest.fixture
def sample_text():
    return SAMPLE


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "capitals.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def no_user_config(monkeypatch, tmp_path):
    """Keep the user's ~/.config/fcard/config out of the tests."""
    monkeypatch.setenv("FCARD_CONFIG", str(tmp_path / "no-such-config"))


