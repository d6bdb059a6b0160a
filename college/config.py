"""
Configuration for the college roster demo.

Defaults describe the bundled demonstration dataset; a JSON file passed
with ``--config`` may override any field.
"""

import json
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, model_validator

from .core.exceptions import ConfigurationError


class CourseSpec(BaseModel):
    id: str = Field(..., min_length=1, max_length=20)
    name: str = Field(..., min_length=1, max_length=200)
    credits: int = Field(..., ge=0)
    capacity: int = Field(30, ge=0)
    prerequisites: List[str] = Field(default_factory=list)


DEFAULT_COURSES = [
    CourseSpec(id="CS101", name="Programming Paradigms", credits=4),
    CourseSpec(id="CS201", name="Network and Communication", credits=4),
    CourseSpec(id="CS301", name="Backend Development", credits=4),
    CourseSpec(id="PD101", name="Professional Development", credits=3),
]

DEFAULT_SPECIALIZATION_COURSES = {
    "Programming Paradigms": "CS101",
    "Network and Communication": "CS201",
    "Backend Development": "CS301",
    "Career Skills": "PD101",
}

DEFAULT_ENROLLMENTS = [
    ("S001", "CS101"), ("S001", "CS201"), ("S001", "PD101"),
    ("S002", "CS101"), ("S002", "CS301"), ("S002", "PD101"),
    ("S003", "CS201"), ("S003", "CS301"), ("S003", "PD101"),
    ("S004", "CS101"), ("S004", "PD101"),
    ("S005", "CS101"), ("S005", "CS201"),
    ("S006", "CS101"), ("S006", "CS301"),
    ("S007", "CS101"),
    ("S008", "CS101"), ("S008", "PD101"),
    ("S009", "CS201"), ("S009", "PD101"),
    ("S010", "CS101"), ("S010", "CS201"), ("S010", "CS301"),
]


class SchoolConfig(BaseModel):
    school_name: str = "Chitkara University"
    students_file: str = "data/students.txt"
    teachers_file: str = "data/teachers.txt"
    courses: List[CourseSpec] = Field(default_factory=lambda: [c.model_copy() for c in DEFAULT_COURSES])
    specialization_courses: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_SPECIALIZATION_COURSES))
    enrollments: List[Tuple[str, str]] = Field(default_factory=lambda: list(DEFAULT_ENROLLMENTS))
    report_workers: Optional[int] = Field(None, ge=1)
    simulation_delay: float = Field(0.1, ge=0)
    score_range: Tuple[float, float] = (50.0, 95.0)
    top_performers: int = Field(3, ge=0)

    @model_validator(mode="after")
    def _check_score_range(self) -> "SchoolConfig":
        low, high = self.score_range
        if not 0.0 <= low < high <= 100.0:
            raise ValueError("score_range must satisfy 0 <= low < high <= 100")
        return self

    @classmethod
    def load(cls, path: str) -> "SchoolConfig":
        """Read and validate a JSON configuration file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not read config {path}: {e}", error_code="config_unreadable",
                                     details={'path': path}) from e
        return cls._validate(data, source=path)

    def override(self, **changes) -> "SchoolConfig":
        """Return a validated copy with ``changes`` applied."""
        return self._validate({**self.model_dump(), **changes}, source="overrides")

    @classmethod
    def _validate(cls, data, source: str) -> "SchoolConfig":
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid config {source}: {e}", error_code="config_invalid",
                                     details={'source': source, 'errors': e.errors()}) from e
