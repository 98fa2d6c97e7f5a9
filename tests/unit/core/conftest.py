"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_YAML = """\
- title: Alpha notes
  content: first draft
  author: {id: a1, name: Ann}
  created: 2024-01-01T12:00:00Z
- id: "7"
  title: Beta report
  content: quarterly numbers
- title: Untitled
"""


@pytest.fixture(name="seed_yaml")
def seed_yaml_fixture(tmp_path):
    path = tmp_path / "docs.yaml"
    path.write_text(SAMPLE_YAML)
    return path
