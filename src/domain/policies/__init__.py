"""Domain policies package."""

from .duplicates import find_duplicate, is_duplicate, normalize_label

__all__ = ["find_duplicate", "is_duplicate", "normalize_label"]
