"""
Concurrent student report generation.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.entities import Student
from ..core.exceptions import ReportGenerationError
from ..core.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ReportOutcome:
    """Result of one report task."""
    student_id: str
    report: Optional[str] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None


def build_student_report(student: Student) -> str:
    """Render the plain-text report for a single student."""
    lines = [
        f"Student Report for {student.name} ({student.id})",
        f"Grade Level: {student.grade_level.value}",
        f"Overall WAM: {student.overall_wam():.1f}",
        "Courses:",
    ]
    for course_id, score in student.courses.items():
        grade = "No grade yet" if score is None else f"{score:.1f}"
        lines.append(f" - {course_id}: {grade}")
    return "\n".join(lines) + "\n"


class ReportService:
    """Builds one report per student on a thread pool and joins them all."""

    def __init__(self, max_workers: Optional[int] = None):
        self._max_workers = max_workers

    def _run_task(self, student: Student) -> ReportOutcome:
        try:
            return ReportOutcome(student_id=student.id, report=build_student_report(student))
        except Exception as e:
            logger.error("Report for %s failed: %s", student.id, e)
            return ReportOutcome(student_id=student.id, error=f"{type(e).__name__}: {e}")

    def collect(self, students: Sequence[Student]) -> List[ReportOutcome]:
        """Run every task and return outcomes in input order."""
        if not students:
            return []
        workers = self._max_workers or len(students)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="report") as executor:
            futures = [executor.submit(self._run_task, student) for student in students]
            return [future.result() for future in futures]

    def generate(self, students: Sequence[Student]) -> List[str]:
        """Return all reports in input order, or raise if any task failed."""
        outcomes = self.collect(students)
        failures = {o.student_id: o.error for o in outcomes if not o.success}
        if failures:
            raise ReportGenerationError(
                f"{len(failures)} of {len(outcomes)} student reports failed",
                error_code="report_failed",
                details={'failures': failures},
            )
        return [o.report for o in outcomes]
