"""Fixtures for CLI integration tests"""

import pytest


SEED = """\
- title: Alpha notes
  content: first draft
  author: {id: a1, name: Ann}
  created: 2024-01-01T12:00:00Z
- title: Beta report
  content: quarterly numbers
  author: {id: a2, name: Bob}
  created: 2024-01-01T12:00:10Z
- title: Alpha report
  content: final draft
  created: 2024-01-01T12:00:20Z
"""


@pytest.fixture(name="seed_file")
def seed_file_fixture(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "docs.yaml"
    path.write_text(SEED)
    return path
