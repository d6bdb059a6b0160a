"""
Enumerations and constants for the college roster.
"""

from enum import Enum

from .exceptions import ValidationError


class PersonType(Enum):
    """Types of persons in the system."""
    STUDENT = "Student"
    TEACHER = "Teacher"


class GradeLevel(Enum):
    """Academic grade levels."""
    FRESHMAN = "FRESHMAN"
    SOPHOMORE = "SOPHOMORE"
    JUNIOR = "JUNIOR"
    SENIOR = "SENIOR"

    @classmethod
    def parse(cls, text: str) -> "GradeLevel":
        """Parse an exact, case-sensitive grade level name."""
        for level in cls:
            if level.value == text:
                return level
        raise ValidationError(f"Invalid grade level: {text}", error_code="invalid_grade_level",
                              details={'value': text})

    def __str__(self) -> str:
        return self.value


class EnrollmentStatus(Enum):
    """Outcome of an enrollment request."""
    ENROLLED = "enrolled"
    STUDENT_NOT_FOUND = "student_not_found"
    COURSE_NOT_FOUND = "course_not_found"
    COURSE_FULL = "course_full"
