"""
Readers for textual graph sources.
"""

from .read_delimited import check_delimiter, iter_records, read_lines, split_fields

__all__ = [
    'check_delimiter',
    'iter_records',
    'read_lines',
    'split_fields',
]
