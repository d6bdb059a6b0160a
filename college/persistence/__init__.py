"""
Persistence module for loading records from flat files.
"""

from .file_loader import read_students_from_file, read_teachers_from_file, split_record

__all__ = [
    "read_students_from_file",
    "read_teachers_from_file",
    "split_record",
]
