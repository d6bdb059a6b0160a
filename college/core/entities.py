"""
Core records for the college roster: people and courses.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Set, Union

from .enums import GradeLevel, PersonType
from .interfaces import GradeObserver, RecordVisitor
from .logger import get_logger
from .observers import GradeChangeNotifier, GradeListener, Subscription

logger = get_logger(__name__)

__all__ = ["Address", "AbstractEntity", "Person", "Student", "Teacher", "Course"]

MIN_SCORE = 0.0
MAX_SCORE = 100.0
ENROLLMENT_SCORE = 0.0  # new value reported when a course is first added
DEFAULT_CAPACITY = 30


@dataclass(frozen=True)
class Address:
    """Postal address shared by all persons."""
    street: str
    city: str
    state: str
    zip_code: str


class AbstractEntity(ABC):
    """Base record with an externally assigned ID and creation timestamp."""

    def __init__(self, entity_id: str):
        self._id = entity_id
        self._created_at = datetime.now(timezone.utc)

    @property
    def id(self) -> str:
        """Get the record ID."""
        return self._id

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    @abstractmethod
    def accept(self, visitor: RecordVisitor) -> Any:
        """Dispatch to the matching visitor method."""
        pass

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id!r})"


class Person(AbstractEntity):
    """Abstract base class for students and teachers."""

    def __init__(self, person_id: str, name: str, email: str, address: Address):
        super().__init__(person_id)
        self._name = name
        self._email = email
        self._address = address

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def address(self) -> Address:
        return self._address

    @property
    @abstractmethod
    def role(self) -> PersonType:
        """Role tag for this person."""
        pass

    def info(self) -> Dict[str, str]:
        """Flat string mapping of the person's fields."""
        return {
            'id': self._id,
            'name': self._name,
            'email': self._email,
            'street': self._address.street,
            'city': self._address.city,
            'state': self._address.state,
            'zip_code': self._address.zip_code,
            'created_at': self._created_at.isoformat(),
            'role': self.role.value,
        }


class Student(Person):
    """Student record with per-course WAM scores."""

    def __init__(self, person_id: str, name: str, email: str, address: Address,
                 grade_level: GradeLevel):
        super().__init__(person_id, name, email, address)
        self._grade_level = grade_level
        self._courses: Dict[str, Optional[float]] = {}  # course_id -> score
        self._notifier = GradeChangeNotifier()

    @property
    def role(self) -> PersonType:
        return PersonType.STUDENT

    @property
    def grade_level(self) -> GradeLevel:
        return self._grade_level

    @property
    def courses(self) -> Dict[str, Optional[float]]:
        """Copy of the course map, ordered by course ID."""
        return dict(sorted(self._courses.items()))

    def is_enrolled(self, course_id: str) -> bool:
        return course_id in self._courses

    def enroll(self, course_id: str) -> None:
        """Add a course with no score yet. Repeat calls are ignored."""
        if course_id in self._courses:
            return
        self._courses[course_id] = None
        self._notifier.notify(self._id, course_id, None, ENROLLMENT_SCORE)

    def update_wam(self, course_id: str, score: float) -> bool:
        """Record a score for an enrolled course.

        Returns False, without raising, when the score is out of range or
        the course is not enrolled.
        """
        if not MIN_SCORE <= score <= MAX_SCORE:
            logger.error("Invalid WAM score %s for %s in %s. Must be between 0 and 100.",
                         score, self._id, course_id)
            return False
        if course_id not in self._courses:
            return False
        previous = self._courses[course_id]
        self._courses[course_id] = score
        self._notifier.notify(self._id, course_id, previous, score)
        return True

    def overall_wam(self) -> float:
        """Mean of the recorded scores; ungraded courses are left out."""
        scores = [score for score in self._courses.values() if score is not None]
        if not scores:
            return 0.0
        return sum(scores) / len(scores)

    def add_observer(self, listener: Union[GradeListener, GradeObserver]) -> Subscription:
        """Register a grade-change listener."""
        return self._notifier.subscribe(listener)

    def observer_count(self) -> int:
        return self._notifier.listener_count()

    def accept(self, visitor: RecordVisitor) -> Any:
        return visitor.visit_student(self)

    def info(self) -> Dict[str, str]:
        base = super().info()
        base['grade_level'] = self._grade_level.value
        return base


class Teacher(Person):
    """Teacher record with the set of courses taught."""

    def __init__(self, person_id: str, name: str, email: str, address: Address,
                 department: str, specialization: str):
        super().__init__(person_id, name, email, address)
        self._department = department
        self._specialization = specialization
        self._assigned_courses: Set[str] = set()

    @property
    def role(self) -> PersonType:
        return PersonType.TEACHER

    @property
    def department(self) -> str:
        return self._department

    @property
    def specialization(self) -> str:
        return self._specialization

    @property
    def assigned_courses(self) -> Set[str]:
        return self._assigned_courses.copy()

    def assign_course(self, course_id: str) -> None:
        """Add a course to teach."""
        self._assigned_courses.add(course_id)

    def course_load(self) -> int:
        return len(self._assigned_courses)

    def accept(self, visitor: RecordVisitor) -> Any:
        return visitor.visit_teacher(self)

    def info(self) -> Dict[str, str]:
        base = super().info()
        base.update({
            'department': self._department,
            'specialization': self._specialization,
        })
        return base


class Course(AbstractEntity):
    """Course with a capped enrollment set."""

    def __init__(self, course_id: str, name: str, credits: int,
                 capacity: int = DEFAULT_CAPACITY):
        super().__init__(course_id)
        self._name = name
        self._credits = credits
        self._capacity = capacity
        self._enrolled_students: Set[str] = set()
        self._prerequisites: Set[str] = set()  # recorded only, never enforced

    @property
    def name(self) -> str:
        return self._name

    @property
    def credits(self) -> int:
        return self._credits

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def enrolled_count(self) -> int:
        return len(self._enrolled_students)

    @property
    def enrolled_students(self) -> Set[str]:
        return self._enrolled_students.copy()

    @property
    def prerequisites(self) -> Set[str]:
        return self._prerequisites.copy()

    @property
    def is_full(self) -> bool:
        return len(self._enrolled_students) >= self._capacity

    def add_prerequisite(self, course_id: str) -> None:
        """Add a prerequisite course."""
        self._prerequisites.add(course_id)

    def enroll_student(self, student_id: str) -> bool:
        """Enroll a student. Returns False without change if the course is full."""
        if self.is_full:
            return False
        self._enrolled_students.add(student_id)
        return True

    def available_seats(self) -> int:
        return self._capacity - len(self._enrolled_students)

    def accept(self, visitor: RecordVisitor) -> Any:
        return visitor.visit_course(self)
