"""Tests for configuration loading and validation."""

from __future__ import annotations

import json

import pytest

from college.config import SchoolConfig
from college.core.exceptions import ConfigurationError


def test_defaults_describe_demo_dataset():
    config = SchoolConfig()
    assert [c.id for c in config.courses] == ["CS101", "CS201", "CS301", "PD101"]
    assert all(c.capacity == 30 for c in config.courses)
    assert config.specialization_courses["Career Skills"] == "PD101"
    assert len(config.enrollments) == 23
    assert config.score_range == (50.0, 95.0)
    assert config.top_performers == 3


def test_load_json_overrides(write_file):
    path = write_file("config.json", json.dumps({
        "school_name": "Test U",
        "courses": [{"id": "X1", "name": "Intro", "credits": 2, "capacity": 1, "prerequisites": ["X0"]}],
        "enrollments": [["S001", "X1"]],
        "simulation_delay": 0,
    }))
    config = SchoolConfig.load(path)
    assert config.school_name == "Test U"
    assert config.courses[0].capacity == 1
    assert config.courses[0].prerequisites == ["X0"]
    assert config.enrollments == [("S001", "X1")]


@pytest.mark.parametrize("data", [
    {"score_range": [95, 50]},
    {"score_range": [-1, 50]},
    {"simulation_delay": -1},
    {"report_workers": 0},
    {"top_performers": -3},
    {"courses": [{"id": "", "name": "Nameless", "credits": 1}]},
])
def test_invalid_values_rejected(write_file, data):
    path = write_file("config.json", json.dumps(data))
    with pytest.raises(ConfigurationError, match="Invalid config"):
        SchoolConfig.load(path)


def test_unreadable_config(tmp_path, write_file):
    with pytest.raises(ConfigurationError, match="Could not read config"):
        SchoolConfig.load(str(tmp_path / "missing.json"))
    with pytest.raises(ConfigurationError):
        SchoolConfig.load(write_file("bad.json", "{not json"))


def test_override_revalidates():
    config = SchoolConfig().override(students_file="other.txt")
    assert config.students_file == "other.txt"
    with pytest.raises(ConfigurationError):
        SchoolConfig().override(simulation_delay=-0.5)
