"""
Flat-file loaders for student and teacher records.

Each line holds one comma-separated record with fields trimmed of
surrounding whitespace. Rows with the wrong number of fields are skipped
with a warning; an invalid grade level aborts the whole load.
"""

from typing import Iterator, List, Tuple

from ..core.entities import Address, Student, Teacher
from ..core.enums import GradeLevel
from ..core.exceptions import DataFileError
from ..core.logger import get_logger

logger = get_logger(__name__)

STUDENT_FIELDS = 8
TEACHER_FIELDS = 9


def split_record(line: str) -> List[str]:
    """Split a line on commas and trim each field."""
    return [token.strip() for token in line.split(",")]


def _read_rows(path: str, expected_fields: int, kind: str) -> Iterator[Tuple[int, List[str]]]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise DataFileError(f"Could not open file: {path}", error_code="file_unreadable",
                            details={'path': path, 'reason': str(e)}) from e

    for line_num, line in enumerate(lines, 1):
        tokens = split_record(line)
        if len(tokens) != expected_fields:
            logger.warning("Invalid %s record: %s", kind, line)
            continue
        yield line_num, tokens


def _address(tokens: List[str]) -> Address:
    return Address(street=tokens[3], city=tokens[4], state=tokens[5], zip_code=tokens[6])


def read_students_from_file(path: str) -> List[Student]:
    """Load students: id, name, email, street, city, state, zip, grade_level."""
    students = []
    for _, tokens in _read_rows(path, STUDENT_FIELDS, "student"):
        students.append(Student(
            tokens[0], tokens[1], tokens[2], _address(tokens), GradeLevel.parse(tokens[7])
        ))
    logger.info("Loaded %d students from %s", len(students), path)
    return students


def read_teachers_from_file(path: str) -> List[Teacher]:
    """Load teachers: id, name, email, street, city, state, zip, department, specialization."""
    teachers = []
    for _, tokens in _read_rows(path, TEACHER_FIELDS, "teacher"):
        teachers.append(Teacher(
            tokens[0], tokens[1], tokens[2], _address(tokens), tokens[7], tokens[8]
        ))
    logger.info("Loaded %d teachers from %s", len(teachers), path)
    return teachers
