"""Core helpers shared by the catalog and code generation layers.

Python 3.13+.
"""

from .identifier_validation import is_valid_accessor_name, is_valid_class_prefix, title_subtag

__all__ = [
    "is_valid_accessor_name",
    "is_valid_class_prefix",
    "title_subtag",
]
