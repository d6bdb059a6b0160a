"""Shared fixtures for the college roster tests."""

from __future__ import annotations

import logging

import pytest

from college.core.entities import Address, Course, Student, Teacher
from college.core.enums import GradeLevel
from college.core.logger import PACKAGE_LOGGER
from college.presentation import colors
from college.services import School


@pytest.fixture(autouse=True)
def plain_output():
    previous = colors.is_enabled()
    colors.set_enabled(False)
    yield
    colors.set_enabled(previous)


@pytest.fixture(autouse=True)
def isolated_package_logger():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(package_logger.handlers), package_logger.level
    yield package_logger
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


@pytest.fixture
def address() -> Address:
    return Address(street="1 Main St", city="Springfield", state="IL", zip_code="62701")


@pytest.fixture
def student(address) -> Student:
    return Student("S001", "Alice Johnson", "alice@college.edu", address, GradeLevel.FRESHMAN)


@pytest.fixture
def teacher(address) -> Teacher:
    return Teacher("T001", "Dr. Brown", "brown@college.edu", address,
                   "Computer Science", "Programming Paradigms")


@pytest.fixture
def school(address) -> School:
    s = School("Test College", simulation_delay=0.0)
    s.add_student(Student("S001", "Alice", "alice@college.edu", address, GradeLevel.FRESHMAN))
    s.add_student(Student("S002", "Bob", "bob@college.edu", address, GradeLevel.SENIOR))
    s.add_student(Student("S003", "Carol", "carol@college.edu", address, GradeLevel.JUNIOR))
    s.add_course(Course("CS101", "Programming Paradigms", 4, capacity=2))
    s.add_course(Course("PD101", "Professional Development", 3))
    return s


@pytest.fixture
def write_file(tmp_path):
    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
