"""Defines classes for representing course codes, creation results, and errors.

The most important classes are :class:`CourseCode` and :class:`CreateResult`.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from noter.names import is_valid_course_code


class Error(Exception):
    """Base class for errors raised by noter.

    Also used directly for failures that don't fit one of the more specific subclasses.
    """

    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadCourseCodeError(Error):
    """Raised when a course code does not have the shape of letters followed by digits."""

    exit_code = 3

    def __init__(self, code: str):
        super().__init__(f'Invalid course code: {code}')
        self.code = code


class CourseNotFoundError(Error):
    """Raised when no directory under the notes root matches a course code."""

    exit_code = 4

    def __init__(self, code: str):
        super().__init__(f'Could not find notes folder for course {code}')
        self.code = code


class PatternError(Error):
    """Raised when the pattern for matching course directories cannot be compiled."""

    exit_code = 5

    def __init__(self, code: str, cause: BaseException = None):
        super().__init__(f'Cannot match course folders for {code}: {cause}')
        self.code = code
        self.cause = cause


class FilesystemError(Error):
    """Raised when reading the notes root or creating a file/folder fails."""

    exit_code = 6

    def __init__(self, message: str, path: str, cause: BaseException = None):
        super().__init__(f'{message}: {cause}' if cause else message)
        self.path = path
        self.cause = cause


@dataclass(frozen=True)
class CourseCode:
    """A course code that has been uppercased and validated, such as ``CS101``.

    Get instances via :meth:`parse` rather than the constructor.
    """

    value: str

    @classmethod
    def parse(cls, raw: str) -> CourseCode:
        """Normalizes user input into a CourseCode.

        Surrounding whitespace is removed and the text is uppercased. Raises :exc:`BadCourseCodeError` if
        the result does not contain a run of letters immediately followed by a run of digits.
        """
        code = raw.strip().upper()
        if not is_valid_course_code(code):
            raise BadCourseCodeError(code)
        return cls(code)

    def __str__(self):
        return self.value


class Outcome(Enum):
    CREATED = 'created'
    ALREADY_EXISTED = 'already_existed'


@dataclass
class CreateResult:
    """Describes a note file or course folder that was (or would be) created."""

    code: CourseCode
    """The course the file or folder belongs to."""

    name: str
    """The file or folder name, after sanitization."""

    path: str
    """Absolute path of the file or folder."""

    outcome: Outcome

    preview: bool = False
    """True if nothing was actually changed because preview mode was on."""

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        return {
            'code': self.code.value,
            'name': self.name,
            'path': self.path,
            'outcome': self.outcome.value,
            'preview': self.preview,
        }


@dataclass
class CourseInfo:
    """A course folder found under the notes root."""

    code: str
    path: str
    note_count: int = 0
    title: Optional[str] = None

    def as_json(self) -> dict:
        return {
            'code': self.code,
            'title': self.title,
            'path': self.path,
            'note_count': self.note_count,
        }
