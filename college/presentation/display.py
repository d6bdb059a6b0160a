"""
Human-readable rendering of records.
"""

from ..core.entities import Course, Student, Teacher
from ..core.interfaces import RecordVisitor
from .colors import BLUE, BOLD, GREEN, RED, YELLOW, colorize

PASS_THRESHOLD = 70.0
FAIL_THRESHOLD = 60.0


def wam_color(wam: float) -> str:
    if wam < FAIL_THRESHOLD:
        return RED
    if wam < PASS_THRESHOLD:
        return YELLOW
    return GREEN


def format_performer(name: str, wam: float) -> str:
    """One ranking line: bold name, WAM colored by band."""
    return f"{colorize(name, BOLD)}: {colorize(f'{wam:.1f}', wam_color(wam))}"


class DisplayVisitor(RecordVisitor):
    """Formats each record type as a block of labelled lines."""

    def visit_student(self, student: Student) -> str:
        address = student.address
        return "\n".join([
            colorize("STUDENT", BOLD, BLUE),
            f"Name: {student.name}",
            f"ID: {student.id}",
            f"Grade Level: {student.grade_level.value}",
            f"Email: {student.email}",
            f"Address: {address.street}, {address.city}, {address.state}",
            f"WAM: {student.overall_wam():.1f}",
        ]) + "\n"

    def visit_teacher(self, teacher: Teacher) -> str:
        address = teacher.address
        return "\n".join([
            colorize("TEACHER", BOLD, GREEN),
            f"Name: {teacher.name}",
            f"ID: {teacher.id}",
            f"Department: {teacher.department}",
            f"Specialization: {teacher.specialization}",
            f"Email: {teacher.email}",
            f"Address: {address.street}, {address.city}, {address.state}",
        ]) + "\n"

    def visit_course(self, course: Course) -> str:
        return "\n".join([
            colorize("COURSE", BOLD, YELLOW),
            f"Name: {course.name}",
            f"ID: {course.id}",
            f"Credits: {course.credits}",
            f"Enrolled: {course.enrolled_count}/{course.capacity}",
        ]) + "\n"
