"""
Core interfaces and abstract base classes for the college roster.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class GradeObserver(ABC):
    """Interface for listeners interested in a student's grade changes."""

    @abstractmethod
    def update(self, student_id: str, course_id: str,
               previous: Optional[float], new: float) -> None:
        """Handle a grade change. ``previous`` is None on first enrollment."""
        pass


class RecordVisitor(ABC):
    """Interface for operations over the closed set of record types."""

    @abstractmethod
    def visit_student(self, student: 'Student') -> Any:
        pass

    @abstractmethod
    def visit_teacher(self, teacher: 'Teacher') -> Any:
        pass

    @abstractmethod
    def visit_course(self, course: 'Course') -> Any:
        pass
