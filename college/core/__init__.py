"""
Core module containing the record model and base classes.
"""

from .entities import *
from .interfaces import *
from .exceptions import *
from .enums import *
from .observers import *

__all__ = [
    # Entities
    "AbstractEntity",
    "Address",
    "Person",
    "Student",
    "Teacher",
    "Course",

    # Observers
    "GradeChangeNotifier",
    "Subscription",

    # Interfaces
    "GradeObserver",
    "RecordVisitor",

    # Enums
    "PersonType",
    "GradeLevel",
    "EnrollmentStatus",

    # Exceptions
    "CollegeError",
    "ValidationError",
    "DataFileError",
    "ConfigurationError",
    "ReportGenerationError",
]
