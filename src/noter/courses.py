"""Functions for finding course folders and creating notes and folders in them.

Generally, you should use :class:`noter.api.Noter` instead of using anything in this module directly.
"""

from datetime import date
import logging
import os
import os.path
import re
from typing import List, Optional

from noter.models import BadCourseCodeError, CourseCode, CourseInfo, CourseNotFoundError, CreateResult,\
    FilesystemError, Outcome, PatternError
from noter.names import COURSE_DIR_REGEX, course_dir_pattern, sanitize

logger = logging.getLogger(__name__)


def _subdirs(root: str) -> List[os.DirEntry]:
    try:
        with os.scandir(root) as entries:
            dirs = [e for e in entries if e.is_dir()]
    except OSError as e:
        raise FilesystemError(f'Cannot read notes folder {root}', root, e) from e
    dirs.sort(key=lambda e: e.name)
    return dirs


def find_course_dir(root: str, code: CourseCode) -> str:
    """Returns the path of the folder in root whose name starts with the course code and a space.

    For example, for code ``CS101`` this would find ``CS101 Intro to Algorithms``. Only direct children of root
    are considered, and files are skipped. If several folders match, the first by name is returned.

    Raises :exc:`CourseNotFoundError` if nothing matches.
    """
    try:
        pattern = course_dir_pattern(code.value)
    except re.error as e:
        raise PatternError(code.value, e) from e
    matches = [e.path for e in _subdirs(root) if pattern.match(e.name)]
    if not matches:
        raise CourseNotFoundError(code.value)
    if len(matches) > 1:
        logger.warning('Multiple folders match course %s, using the first: %s', code, ', '.join(matches))
    logger.debug('Resolved course %s to %s', code, matches[0])
    return matches[0]


def note_filename(day: date, title: Optional[str] = None) -> str:
    """Returns a name like ``2024-03-05.md``, or ``2024-03-05-Some Title.md`` if a title is given."""
    if title is None:
        return f'{day.isoformat()}.md'
    return f'{day.isoformat()}-{sanitize(title)}.md'


def create_note(course_dir: str, code: CourseCode, day: date, title: Optional[str] = None,
                preview: bool = False) -> CreateResult:
    """Creates an empty note file in the course folder, unless it already exists.

    An existing file is never modified. If preview is True, the outcome is reported but nothing is created.
    """
    name = note_filename(day, title)
    path = os.path.join(course_dir, name)
    result = CreateResult(code, name, path, Outcome.CREATED, preview)
    if preview:
        if os.path.lexists(path):
            result.outcome = Outcome.ALREADY_EXISTED
        return result
    try:
        with open(path, 'x'):
            pass
    except FileExistsError:
        result.outcome = Outcome.ALREADY_EXISTED
    except OSError as e:
        raise FilesystemError(f'Cannot create note {path}', path, e) from e
    logger.info('%s: %s', result.outcome.value, path)
    return result


def create_course_folder(root: str, code: CourseCode, title: str, preview: bool = False) -> CreateResult:
    """Creates the folder ``<code> <title>`` in root, unless something already exists at that path.

    The title is sanitized. Root itself must already exist; no parent folders are created, and folders with
    similar names are not considered.

    Raises :exc:`BadCourseCodeError` if the code would make the name something other than a single path segment.
    """
    name = f'{code} {sanitize(title)}'
    if os.path.basename(name) != name or '\0' in code.value:
        raise BadCourseCodeError(code.value)
    path = os.path.join(root, name)
    result = CreateResult(code, name, path, Outcome.CREATED, preview)
    if preview:
        if os.path.lexists(path):
            result.outcome = Outcome.ALREADY_EXISTED
        return result
    try:
        os.mkdir(path)
    except FileExistsError:
        result.outcome = Outcome.ALREADY_EXISTED
    except (OSError, ValueError) as e:
        raise FilesystemError(f'Cannot create folder {path}', path, e) from e
    logger.info('%s: %s', result.outcome.value, path)
    return result


def list_courses(root: str) -> List[CourseInfo]:
    """Returns info for each folder in root that looks like a course folder, sorted by name."""
    infos = []
    for entry in _subdirs(root):
        m = re.match(COURSE_DIR_REGEX, entry.name)
        if not m:
            continue
        try:
            with os.scandir(entry.path) as children:
                count = sum(1 for c in children if c.is_file() and c.name.endswith('.md'))
        except OSError as e:
            raise FilesystemError(f'Cannot read course folder {entry.path}', entry.path, e) from e
        infos.append(CourseInfo(m.group(1), entry.path, count, m.group(2)))
    return infos
