"""
Text file operations module for textops.

Provides create, read, append, line-edit, search/replace, statistics,
copy and delete operations on a single text file.
"""

import re
import shutil
from pathlib import Path
from dataclasses import dataclass
from typing import List, Optional

from rich.console import Console

from core.logger import AuditLogger, ActionType, ActionStatus


RULE = "-" * 40

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

_WHITESPACE = re.compile(r"[ \t\n\x0b\f\r]+")

# decode/encode failures and unknown encodings are reported like any other I/O failure
_IO_ERRORS = (OSError, UnicodeError, LookupError)


@dataclass
class FileStats:
    """Line, word and character counts of a text file."""
    line_count: int
    word_count: int
    char_count: int


def split_lines(content: str) -> List[str]:
    """Split on \\n, \\r\\n or \\r; a trailing line break does not start a new line."""
    if not content:
        return []
    lines = _LINE_BREAK.split(content)
    if lines[-1] == "":
        lines.pop()
    return lines


def count_lines(content: str) -> int:
    return len(split_lines(content))


def compute_stats(content: str) -> FileStats:
    """Compute statistics of raw text content."""
    return FileStats(
        line_count=count_lines(content),
        word_count=len([word for word in _WHITESPACE.split(content) if word]),
        char_count=len(content),
    )


class TextFileOperator:
    """Operations on a named text file, reporting progress to a console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        logger: Optional[AuditLogger] = None,
        encoding: str = "utf-8"
    ):
        """
        Initialize TextFileOperator.

        Args:
            console: Console for progress output (default: stdout)
            logger: Audit logger instance; nothing is audited if omitted
            encoding: Text encoding used for every read and write
        """
        self.console = console or Console(highlight=False)
        self.logger = logger
        self.encoding = encoding

    def _say(self, message: str) -> None:
        # paths and search terms: no markup, emoji codes or wrapping
        self.console.print(message, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def _echo(self, text: str) -> None:
        # file content bypasses rich rendering so tabs and control characters survive
        self.console.file.write(text + "\n")

    def _audit(
        self,
        action_type: ActionType,
        description: str,
        target: str,
        status: ActionStatus = ActionStatus.EXECUTED,
        result: Optional[str] = None,
        **metadata
    ) -> None:
        if self.logger is None:
            return
        self.logger.log_action(
            action_type=action_type,
            description=description,
            target=target,
            status=status,
            result=result,
            metadata=metadata
        )

    def _fail(self, action_type: ActionType, description: str, target: str, error: Exception) -> None:
        self._audit(action_type, f"Failed: {description}", target,
                    status=ActionStatus.FAILED, result=f"Error: {error}")

    def _read_lines(self, path: str) -> List[str]:
        with open(path, "r", encoding=self.encoding, newline="") as f:
            return split_lines(f.read())

    def _write_lines(self, path: str, lines: List[str]) -> None:
        with open(path, "w", encoding=self.encoding) as f:
            for line in lines:
                f.write(line + "\n")

    def create_and_write(self, path: str, content: str) -> None:
        """
        Create (or truncate) a file and write content to it verbatim.

        Raises:
            IOError: If the file cannot be written
        """
        try:
            with open(path, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
        except _IO_ERRORS as e:
            self._fail(ActionType.WRITE, f"Create {path}", path, e)
            raise IOError(f"Error writing file: {e}") from e

        self._audit(ActionType.WRITE, f"Created file: {path}", path,
                    result=f"{len(content)} characters written")
        self._say(f"File created and written successfully: {path}")

    def read_all(self, path: str) -> Optional[List[str]]:
        """
        Read and display a file with 1-based line numbers.

        Returns:
            The lines of the file, or None if the file does not exist

        Raises:
            IOError: If the file exists but cannot be read
        """
        if not Path(path).exists():
            self._audit(ActionType.READ, f"Read skipped, missing: {path}", path,
                        status=ActionStatus.SKIPPED)
            self._say(f"File does not exist: {path}")
            return None

        try:
            lines = self._read_lines(path)
        except _IO_ERRORS as e:
            self._fail(ActionType.READ, f"Read {path}", path, e)
            raise IOError(f"Error reading file: {e}") from e

        self._say(f"Content of {path}:")
        self._say(RULE)
        for number, line in enumerate(lines, start=1):
            self._echo(f"{number:2d}: {line}")
        self._say(RULE)

        self._audit(ActionType.READ, f"Read file: {path}", path,
                    result=f"{len(lines)} lines")
        return lines

    def append(self, path: str, content: str) -> None:
        """
        Append content to the end of a file, creating it if needed.

        Raises:
            IOError: If the file cannot be written
        """
        try:
            with open(path, "a", encoding=self.encoding, newline="") as f:
                f.write(content)
        except _IO_ERRORS as e:
            self._fail(ActionType.WRITE, f"Append to {path}", path, e)
            raise IOError(f"Error appending to file: {e}") from e

        self._audit(ActionType.WRITE, f"Appended to file: {path}", path,
                    result=f"{len(content)} characters appended")
        self._say(f"Content appended successfully to: {path}")

    def modify_line(self, path: str, line_number: int, new_content: str) -> bool:
        """
        Replace one line of a file (1-based) and rewrite the file.

        Returns:
            True if the line was replaced, False if line_number is out of range

        Raises:
            IOError: If the file is missing or cannot be read or written
        """
        try:
            lines = self._read_lines(path)
        except _IO_ERRORS as e:
            self._fail(ActionType.WRITE, f"Modify line {line_number} of {path}", path, e)
            raise IOError(f"Error reading file: {e}") from e

        if line_number < 1 or line_number > len(lines):
            self._audit(ActionType.WRITE, f"Invalid line number {line_number}: {path}", path,
                        status=ActionStatus.SKIPPED, line_count=len(lines))
            self._say(f"Invalid line number: {line_number}")
            return False

        lines[line_number - 1] = new_content
        try:
            self._write_lines(path, lines)
        except _IO_ERRORS as e:
            self._fail(ActionType.WRITE, f"Modify line {line_number} of {path}", path, e)
            raise IOError(f"Error writing file: {e}") from e

        self._audit(ActionType.WRITE, f"Modified line {line_number}: {path}", path,
                    line_number=line_number)
        self._say(f"Line {line_number} modified successfully.")
        return True

    def search_and_replace(self, path: str, search: str, replace: str) -> None:
        """
        Replace every literal occurrence of search with replace, line by line.

        Raises:
            IOError: If the file is missing or cannot be read or written
        """
        try:
            lines = self._read_lines(path)
            replaced = [line.replace(search, replace) for line in lines]
            self._write_lines(path, replaced)
        except _IO_ERRORS as e:
            self._fail(ActionType.WRITE, f"Replace in {path}", path, e)
            raise IOError(f"Error replacing text: {e}") from e

        changed = sum(1 for old, new in zip(lines, replaced) if old != new)
        self._audit(ActionType.WRITE, f"Replaced '{search}' with '{replace}': {path}", path,
                    result=f"{changed} lines changed", search=search, replace=replace)
        self._say(f"Replaced all occurrences of '{search}' with '{replace}'")

    def stats(self, path: str) -> Optional[FileStats]:
        """
        Count lines, words and characters of a file.

        Returns:
            FileStats, or None if the file does not exist

        Raises:
            IOError: If the file exists but cannot be read
        """
        if not Path(path).exists():
            self._audit(ActionType.READ, f"Stats skipped, missing: {path}", path,
                        status=ActionStatus.SKIPPED)
            self._say(f"File does not exist: {path}")
            return None

        try:
            content = self.read_to_string(path)
        except IOError as e:
            self._fail(ActionType.READ, f"Stats of {path}", path, e)
            raise

        stats = compute_stats(content)
        self._say(f"File: {path}")
        self._say(f"Lines: {stats.line_count}")
        self._say(f"Words: {stats.word_count}")
        self._say(f"Characters: {stats.char_count}")

        self._audit(ActionType.READ, f"Stats of file: {path}", path,
                    line_count=stats.line_count, word_count=stats.word_count,
                    char_count=stats.char_count)
        return stats

    def copy(self, src: str, dst: str) -> None:
        """
        Copy a file, overwriting the destination if it exists.

        Copying a file onto itself leaves it untouched.

        Raises:
            IOError: If the source is missing or the copy fails
        """
        try:
            same_file = Path(dst).exists() and Path(src).samefile(dst)
            if not same_file:
                shutil.copyfile(src, dst)
        except _IO_ERRORS as e:
            self._fail(ActionType.WRITE, f"Copy {src} to {dst}", dst, e)
            raise IOError(f"Error copying file: {e}") from e

        self._audit(ActionType.WRITE, f"Copied {src} to {dst}", dst, source=src,
                    same_file=same_file)

    def delete(self, path: str) -> bool:
        """
        Delete a file if it exists.

        Returns:
            True if a file was removed, False if there was nothing to delete

        Raises:
            IOError: If the file exists but cannot be removed
        """
        try:
            Path(path).unlink()
            removed = True
        except FileNotFoundError:
            removed = False
        except _IO_ERRORS as e:
            self._fail(ActionType.DELETE, f"Delete {path}", path, e)
            raise IOError(f"Error deleting file: {e}") from e

        self._audit(ActionType.DELETE, f"Deleted file: {path}", path,
                    status=ActionStatus.EXECUTED if removed else ActionStatus.SKIPPED)
        self._say(f"File deleted: {path}")
        return removed

    def read_to_string(self, path: str) -> str:
        """
        Return the whole content of a file, line endings untranslated.

        Raises:
            IOError: If the file is missing or cannot be read
        """
        try:
            with open(path, "r", encoding=self.encoding, newline="") as f:
                return f.read()
        except _IO_ERRORS as e:
            raise IOError(f"Error reading file: {e}") from e

    def write_lines(self, path: str, lines: List[str]) -> None:
        """
        Write each string as one line, truncating the file.

        Raises:
            IOError: If the file cannot be written
        """
        lines = list(lines)
        try:
            self._write_lines(path, lines)
        except _IO_ERRORS as e:
            self._fail(ActionType.WRITE, f"Write lines to {path}", path, e)
            raise IOError(f"Error writing file: {e}") from e

        self._audit(ActionType.WRITE, f"Wrote lines: {path}", path,
                    result=f"{len(lines)} lines written")
