"""
College: an in-memory school roster with enrollment, grading and reporting.

Students, teachers and courses are loaded from flat files into a school
aggregate that handles enrollment, statistics, ranking and concurrent
report generation.
"""

__version__ = "1.0.0"
__author__ = "College Roster Team"
__description__ = "In-memory school roster with enrollment and reporting"
