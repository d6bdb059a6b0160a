"""
School aggregate: owns all records and serializes structural mutation.
"""

import random
import threading
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple, TypeVar

from ..core.entities import AbstractEntity, Course, Student, Teacher
from ..core.enums import EnrollmentStatus
from ..core.logger import get_logger
from .report_service import ReportOutcome, ReportService
from .simulation_service import DEFAULT_DELAY, DEFAULT_SCORE_RANGE, GradeSimulator, GradeUpdate

logger = get_logger(__name__)

T = TypeVar('T', bound=AbstractEntity)


@dataclass
class EnrollmentResult:
    """Result of an enrollment operation."""
    success: bool
    status: EnrollmentStatus
    message: str

    def __bool__(self) -> bool:
        return self.success


class School:
    """Registry of students, teachers and courses.

    Records are kept in insertion order. Lookup by ID resolves to the first
    record registered under that ID; later duplicates stay in the lists but
    cannot be reached by ID.

    Structural mutation (adding records, enrolling) holds the school lock.
    Read operations do not, so callers must not mutate the school while
    reports are being generated.
    """

    def __init__(self, name: str, report_workers: Optional[int] = None,
                 score_range: Tuple[float, float] = DEFAULT_SCORE_RANGE,
                 simulation_delay: float = DEFAULT_DELAY):
        self._name = name
        self._students: List[Student] = []
        self._teachers: List[Teacher] = []
        self._courses: List[Course] = []
        self._student_index: Dict[str, Student] = {}
        self._teacher_index: Dict[str, Teacher] = {}
        self._course_index: Dict[str, Course] = {}
        self._report_service = ReportService(max_workers=report_workers)
        self._score_range = score_range
        self._simulation_delay = simulation_delay
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def students(self) -> List[Student]:
        return list(self._students)

    @property
    def teachers(self) -> List[Teacher]:
        return list(self._teachers)

    @property
    def courses(self) -> List[Course]:
        return list(self._courses)

    def _register(self, record: T, records: List[T], index: Dict[str, T], kind: str) -> None:
        with self._lock:
            records.append(record)
            if record.id in index:
                logger.warning("Duplicate %s id %s; lookups resolve to the first record", kind, record.id)
            else:
                index[record.id] = record

    def add_student(self, student: Student) -> None:
        self._register(student, self._students, self._student_index, "student")

    def add_teacher(self, teacher: Teacher) -> None:
        self._register(teacher, self._teachers, self._teacher_index, "teacher")

    def add_course(self, course: Course) -> None:
        self._register(course, self._courses, self._course_index, "course")

    def find_student(self, student_id: str) -> Optional[Student]:
        return self._student_index.get(student_id)

    def find_teacher(self, teacher_id: str) -> Optional[Teacher]:
        return self._teacher_index.get(teacher_id)

    def find_course(self, course_id: str) -> Optional[Course]:
        return self._course_index.get(course_id)

    def enroll_student_in_course(self, student_id: str, course_id: str) -> EnrollmentResult:
        """Enroll a student in a course.

        The course seat is taken under the school lock. The student's course
        map is updated only once the seat is granted, after the lock is
        released, so grade listeners may call back into the school.
        """
        with self._lock:
            student = self._student_index.get(student_id)
            course = self._course_index.get(course_id)

            if student is None or course is None:
                logger.error("Student or course not found! (%s, %s)", student_id, course_id)
                status = (EnrollmentStatus.STUDENT_NOT_FOUND if student is None
                          else EnrollmentStatus.COURSE_NOT_FOUND)
                return EnrollmentResult(
                    success=False,
                    status=status,
                    message="Student or course not found"
                )

            seat_granted = course.enroll_student(student_id)

        if not seat_granted:
            logger.error("Course %s is full!", course_id)
            return EnrollmentResult(
                success=False,
                status=EnrollmentStatus.COURSE_FULL,
                message=f"Course {course_id} is full"
            )

        student.enroll(course_id)
        return EnrollmentResult(
            success=True,
            status=EnrollmentStatus.ENROLLED,
            message=f"{student_id} enrolled in {course_id}"
        )

    def assign_courses_by_specialization(self, specialization_courses: Mapping[str, str]) -> int:
        """Assign each teacher the course mapped from its specialization."""
        assigned = 0
        for teacher in self._teachers:
            course_id = specialization_courses.get(teacher.specialization)
            if course_id is not None:
                teacher.assign_course(course_id)
                assigned += 1
        return assigned

    def get_department_stats(self) -> Dict[str, int]:
        """Number of teachers per department, keyed in sorted order."""
        counts = Counter(teacher.department for teacher in self._teachers)
        return {department: counts[department] for department in sorted(counts)}

    def get_top_performers(self, n: int) -> List[Tuple[str, float]]:
        """Students ranked by overall WAM; ties keep registration order."""
        performers = [(student.name, student.overall_wam()) for student in self._students]
        performers.sort(key=lambda pair: pair[1], reverse=True)
        return performers[:max(n, 0)]

    def collect_student_reports(self) -> List[ReportOutcome]:
        return self._report_service.collect(self._students)

    def generate_all_student_reports(self) -> List[str]:
        """Build every student's report concurrently, in student order."""
        return self._report_service.generate(self._students)

    def simulate_wam_updates(self, rng: Optional[random.Random] = None,
                             delay: Optional[float] = None) -> List[GradeUpdate]:
        """Apply a random score to every enrollment, pausing between updates."""
        simulator = GradeSimulator(
            rng=rng,
            score_range=self._score_range,
            delay=self._simulation_delay if delay is None else delay,
        )
        return simulator.run(self._students)
