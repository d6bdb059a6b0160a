"""
Randomized grade simulation for demonstrations.
"""

import random
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.entities import Student
from ..core.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SCORE_RANGE = (50.0, 95.0)
DEFAULT_DELAY = 0.1


@dataclass(frozen=True)
class GradeUpdate:
    """A score applied by the simulator."""
    student_id: str
    student_name: str
    course_id: str
    score: float


class GradeSimulator:
    """Draws a random score for every enrollment and applies it."""

    def __init__(self, rng: Optional[random.Random] = None,
                 score_range: Tuple[float, float] = DEFAULT_SCORE_RANGE,
                 delay: float = DEFAULT_DELAY):
        self._rng = rng or random.Random()
        self._low, self._high = score_range
        self._delay = delay

    def run(self, students: Sequence[Student]) -> List[GradeUpdate]:
        updates: List[GradeUpdate] = []
        for student in students:
            for course_id in student.courses:
                score = self._rng.uniform(self._low, self._high)
                # uniform() may return the upper bound; keep the range half-open
                if score >= self._high:
                    score = self._low
                if student.update_wam(course_id, score):
                    updates.append(GradeUpdate(student.id, student.name, course_id, score))
                    logger.debug("Updated %s's %s to %.1f", student.name, course_id, score)
                if self._delay > 0:
                    time.sleep(self._delay)
        return updates
