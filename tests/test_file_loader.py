"""Tests for the flat-file loaders."""

from __future__ import annotations

import logging

import pytest

from college.core.enums import GradeLevel
from college.core.exceptions import DataFileError, ValidationError
from college.persistence import read_students_from_file, read_teachers_from_file, split_record


def test_split_record_trims_fields():
    assert split_record("  S001 ,Alice ,  a@b.c\t") == ["S001", "Alice", "a@b.c"]


def test_students_loaded_with_trimmed_fields(write_file):
    path = write_file("students.txt",
                      "S001 , Alice Smith , alice@c.edu , 1 Main St , Springfield , IL , 62701 , SENIOR\n")
    [student] = read_students_from_file(path)
    assert student.id == "S001"
    assert student.name == "Alice Smith"
    assert student.address.zip_code == "62701"
    assert student.grade_level is GradeLevel.SENIOR


def test_malformed_row_is_skipped_with_warning(write_file, caplog):
    path = write_file("students.txt", "\n".join([
        "S001, Alice, a@c.edu, 1 Main St, Springfield, IL, 62701, FRESHMAN",
        "S002, Bob, b@c.edu, 2 Main St, Springfield, IL, FRESHMAN",
        "S003, Carol, c@c.edu, 3 Main St, Springfield, IL, 62701, JUNIOR",
    ]) + "\n")

    with caplog.at_level(logging.WARNING, logger="college"):
        students = read_students_from_file(path)

    assert [s.id for s in students] == ["S001", "S003"]
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Invalid student record: S002" in warnings[0].getMessage()


def test_blank_lines_are_skipped_with_warning(write_file, caplog):
    path = write_file("students.txt",
                      "\nS001, Alice, a@c.edu, 1 Main St, Springfield, IL, 62701, FRESHMAN\n\n   \n")
    with caplog.at_level(logging.WARNING, logger="college"):
        students = read_students_from_file(path)
    assert len(students) == 1
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 3
    assert all("Invalid student record" in r.getMessage() for r in warnings)


def test_invalid_grade_level_aborts_load(write_file):
    path = write_file("students.txt", "\n".join([
        "S001, Alice, a@c.edu, 1 Main St, Springfield, IL, 62701, FRESHMAN",
        "S002, Bob, b@c.edu, 2 Main St, Springfield, IL, 62701, senior",
    ]))
    with pytest.raises(ValidationError, match="Invalid grade level: senior"):
        read_students_from_file(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(DataFileError, match="Could not open file"):
        read_students_from_file(str(tmp_path / "nope.txt"))
    with pytest.raises(DataFileError):
        read_teachers_from_file(str(tmp_path / "nope.txt"))


def test_teachers_loaded(write_file, caplog):
    path = write_file("teachers.txt", "\n".join([
        "T001, Dr. Brown, brown@c.edu, 5 Faculty Row, Rajpura, Punjab, 140401, Computer Science, Backend Development",
        "T002, Dr. Green, green@c.edu, 6 Faculty Row, Rajpura, Punjab, 140401, Mathematics",
    ]))
    with caplog.at_level(logging.WARNING, logger="college"):
        teachers = read_teachers_from_file(path)

    assert len(teachers) == 1
    assert teachers[0].department == "Computer Science"
    assert teachers[0].specialization == "Backend Development"
    assert "Invalid teacher record: T002" in caplog.text


def test_undecodable_file_raises_data_file_error(tmp_path):
    path = tmp_path / "students.txt"
    path.write_bytes(b"S001, Al\xffce, a@c.edu, 1 Main St, Springfield, IL, 62701, FRESHMAN\n")

    with pytest.raises(DataFileError, match="Could not open file") as excinfo:
        read_students_from_file(str(path))

    assert excinfo.value.error_code == "file_unreadable"
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
