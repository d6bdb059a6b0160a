"""
Main entry point for the college roster demo.
"""

import argparse
import random
import sys
from typing import List, Optional

from .config import SchoolConfig
from .core.entities import Course
from .core.exceptions import CollegeError
from .core.interfaces import GradeObserver
from .core.logger import configure_logging, get_logger
from .core.observers import Subscription
from .persistence import read_students_from_file, read_teachers_from_file
from .presentation import colors
from .presentation.colors import BLUE, BOLD, CYAN, GREEN, MAGENTA, RED, colorize
from .presentation.display import DisplayVisitor, format_performer
from .services import School

logger = get_logger(__name__)


class ConsoleGradeObserver(GradeObserver):
    """Prints each grade change as it happens."""

    def __init__(self, school: School):
        self._school = school

    def update(self, student_id: str, course_id: str,
               previous: Optional[float], new: float) -> None:
        student = self._school.find_student(student_id)
        name = student.name if student else student_id
        print(colorize(f"Updated {name}'s {course_id} to {new:.1f}", CYAN))


class CollegeDemo:
    """Wires the configured dataset into a school and runs the demo sequence."""

    def __init__(self, config: SchoolConfig, rng: Optional[random.Random] = None):
        self._config = config
        self._rng = rng
        self._school = School(
            config.school_name,
            report_workers=config.report_workers,
            score_range=config.score_range,
            simulation_delay=config.simulation_delay,
        )

    @property
    def school(self) -> School:
        return self._school

    def load(self) -> None:
        """Load records, build the course catalog, and enroll students."""
        for student in read_students_from_file(self._config.students_file):
            self._school.add_student(student)
        for teacher in read_teachers_from_file(self._config.teachers_file):
            self._school.add_teacher(teacher)

        for spec in self._config.courses:
            course = Course(spec.id, spec.name, spec.credits, spec.capacity)
            for prerequisite in spec.prerequisites:
                course.add_prerequisite(prerequisite)
            self._school.add_course(course)

        self._school.assign_courses_by_specialization(self._config.specialization_courses)

        for student_id, course_id in self._config.enrollments:
            self._school.enroll_student_in_course(student_id, course_id)

    def show_department_stats(self) -> None:
        print(colorize("\nDepartment Statistics:", BOLD, BLUE))
        for department, count in self._school.get_department_stats().items():
            print(f"{colorize(department, CYAN)}: {count} teachers")

    def generate_reports(self) -> List[str]:
        print(colorize("\nGenerating reports concurrently...", BOLD, BLUE))
        reports = self._school.generate_all_student_reports()
        print(colorize(f"Generated {len(reports)} student reports", GREEN))
        return reports

    def simulate_updates(self) -> None:
        print(colorize("\nSimulating WAM updates...", BOLD, MAGENTA))
        observer = ConsoleGradeObserver(self._school)
        subscriptions: List[Subscription] = [
            student.add_observer(observer) for student in self._school.students
        ]
        try:
            self._school.simulate_wam_updates(rng=self._rng)
        finally:
            for subscription in subscriptions:
                subscription.cancel()

    def show_top_performers(self) -> None:
        n = self._config.top_performers
        print(colorize(f"\nTop {n} Performers:", BOLD, BLUE))
        for name, wam in self._school.get_top_performers(n):
            print(format_performer(name, wam))

    def show_all(self) -> None:
        visitor = DisplayVisitor()
        print(colorize("\nDisplaying ALL information with visitor pattern:", BOLD, BLUE))
        sections = [
            ("=== ALL STUDENTS ===", self._school.students),
            ("=== ALL TEACHERS ===", self._school.teachers),
            ("=== ALL COURSES ===", self._school.courses),
        ]
        for title, records in sections:
            print(colorize(f"\n{title}", BOLD, MAGENTA))
            for record in records:
                print(record.accept(visitor))

    def run(self) -> None:
        """Run the full demo sequence."""
        self.load()
        self.show_department_stats()
        self.generate_reports()
        self.simulate_updates()
        self.show_top_performers()
        self.show_all()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="College roster demonstration")
    parser.add_argument("--config", type=str, help="Configuration file path (JSON)")
    parser.add_argument("--students", type=str, help="Students data file")
    parser.add_argument("--teachers", type=str, help="Teachers data file")
    parser.add_argument("--delay", type=float, help="Seconds to pause between simulated updates")
    parser.add_argument("--seed", type=int, help="Random seed for the grade simulation")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    if args.no_color:
        colors.set_enabled(False)

    try:
        config = SchoolConfig.load(args.config) if args.config else SchoolConfig()
        overrides = {}
        if args.students:
            overrides['students_file'] = args.students
        if args.teachers:
            overrides['teachers_file'] = args.teachers
        if args.delay is not None:
            overrides['simulation_delay'] = args.delay
        if overrides:
            config = config.override(**overrides)

        rng = random.Random(args.seed) if args.seed is not None else None
        CollegeDemo(config, rng=rng).run()

    except (CollegeError, OSError) as e:
        logger.debug("Demo aborted", exc_info=True)
        print(colorize(f"Error: {e}", RED), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
