"""Worked solutions to the exercise topics."""

__all__ = [
    "basics",
    "enums",
    "error_handling",
    "hashmaps",
    "iterators",
    "quizzes",
    "smart_pointers",
    "strings",
    "structs",
    "traits",
]