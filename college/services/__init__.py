"""
Services module containing the school aggregate and its demo routines.
"""

from .school_service import School, EnrollmentResult
from .report_service import ReportService, ReportOutcome, build_student_report
from .simulation_service import GradeSimulator, GradeUpdate

__all__ = [
    "School",
    "EnrollmentResult",
    "ReportService",
    "ReportOutcome",
    "build_student_report",
    "GradeSimulator",
    "GradeUpdate",
]
