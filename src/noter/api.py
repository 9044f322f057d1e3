"""Provides the main entry point for using the library, :class:`Noter`"""

from __future__ import annotations
from typing import List, Optional

from noter.conf import NoterConf
from noter.courses import create_course_folder, create_note, find_course_dir, list_courses
from noter.models import CourseCode, CourseInfo, CreateResult


class Noter:
    """Main entry point for working programmatically with a folder of course notes.

    Generally, you should get an instance using :meth:`Noter.for_cwd` or :meth:`noter.conf.NoterConf.instantiate`.

    .. attribute:: conf
       :type: noter.conf.NoterConf

    Here's an example that creates today's note for CS101 in ``~/school``:

    .. code-block:: python

       import os.path
       from noter.conf import NoterConf
       nt = NoterConf(root=os.path.expanduser('~/school')).instantiate()
       result = nt.new_note('cs101', 'Lecture 4')
       print(result.path)
    """

    @staticmethod
    def for_cwd() -> Noter:
        """Creates an instance that uses the current working directory as the notes root."""
        return NoterConf.for_cwd().instantiate()

    def __init__(self, conf: NoterConf):
        self.conf = conf

    def new_note(self, course: str, title: Optional[str] = None) -> CreateResult:
        """Creates a dated note file in the folder for the given course.

        The course code is case-insensitive. May raise :exc:`noter.models.BadCourseCodeError`,
        :exc:`noter.models.CourseNotFoundError`, :exc:`noter.models.PatternError`, or
        :exc:`noter.models.FilesystemError`.
        """
        code = CourseCode.parse(course)
        course_dir = find_course_dir(self.conf.root, code)
        return create_note(course_dir, code, self.conf.note_date(), title, self.conf.preview_mode)

    def new_course(self, code: str, title: str) -> CreateResult:
        """Creates a folder named like ``CS101 Intro to Algorithms`` in the notes root."""
        return create_course_folder(self.conf.root, CourseCode.parse(code), title, self.conf.preview_mode)

    def courses(self) -> List[CourseInfo]:
        return list_courses(self.conf.root)
