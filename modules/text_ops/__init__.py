"""
Text operations module for textops.

Provides create, read, append, edit, statistics, copy and delete
operations on plain text files.
"""

from .file_ops import TextFileOperator, FileStats, compute_stats, count_lines, split_lines

__all__ = ['TextFileOperator', 'FileStats', 'compute_stats', 'count_lines', 'split_lines']
