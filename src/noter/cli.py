"""Command-line interface for noter."""


import argparse
from datetime import date
import json
import logging
import os.path
from terminaltables import AsciiTable
from noter.conf import NoterConf
from noter.models import CreateResult, Error, Outcome


def _print_note_result(result: CreateResult) -> None:
    if result.outcome == Outcome.ALREADY_EXISTED:
        print(f'{result.code}::{result.name} already exists.')
    elif result.preview:
        print(f'Would create {result.code}::{result.name}')
    else:
        print(f'Created {result.code}::{result.name}')


def _print_folder_result(result: CreateResult) -> None:
    if result.outcome == Outcome.ALREADY_EXISTED:
        print(f'Folder for {result.name} already exists.')
    elif result.preview:
        print(f'Would create folder for {result.name}.')
    else:
        print(f'Created folder for {result.name}.')


def _new(args, conf: NoterConf) -> int:
    if args.date:
        conf.today = args.date
    result = conf.instantiate().new_note(args.course[0], args.title)
    if args.json:
        print(json.dumps(result.as_json()))
    else:
        _print_note_result(result)
    return 0


def _course(args, conf: NoterConf) -> int:
    result = conf.instantiate().new_course(args.code[0], args.title[0])
    if args.json:
        print(json.dumps(result.as_json()))
    else:
        _print_folder_result(result)
    return 0


def _list(args, conf: NoterConf) -> int:
    infos = conf.instantiate().courses()
    if args.json:
        print(json.dumps([i.as_json() for i in infos]))
    else:
        data = [('Code', 'Folder', 'Notes')] + [(i.code, os.path.basename(i.path), str(i.note_count)) for i in infos]
        table = AsciiTable(data)
        table.justify_columns[2] = 'right'
        print(table.table)
    return 0


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='noter',
        description='Creates dated notes inside course folders in the current directory.')
    parser.set_defaults(func=None, preview=False)
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Log what is being done to stderr. Repeat for more detail.')

    subs = parser.add_subparsers(title='Commands')

    p_new = subs.add_parser(
        'new',
        help='Create a note named after today\'s date in the folder for a course. The folder must already exist '
             'in the current directory, and its name must start with the course code followed by a space, like '
             '"CS101 Intro to Algorithms". An existing note is never overwritten.')
    p_new.add_argument('course', nargs=1, help='Course code, e.g. CS101. Case does not matter.')
    p_new.add_argument('title', nargs='?',
                       help='Optional title, appended to the date in the filename. Characters that are not allowed '
                            'in filenames are replaced with underscores.')
    p_new.add_argument('-d', '--date', type=date.fromisoformat,
                       help='Date to use instead of today, in YYYY-MM-DD format.')
    p_new.add_argument('-j', '--json', action='store_true', help='Output as JSON.')
    p_new.add_argument('-p', '--preview', action='store_true', help='Print plan but do not create file')
    p_new.set_defaults(func=_new)

    p_course = subs.add_parser(
        'course',
        help='Create a folder for a course in the current directory, named with the code and title.')
    p_course.add_argument('code', nargs=1, help='Course code, e.g. CS101. It will be uppercased.')
    p_course.add_argument('title', nargs=1, help='Course title, e.g. "Intro to Algorithms".')
    p_course.add_argument('-j', '--json', action='store_true', help='Output as JSON.')
    p_course.add_argument('-p', '--preview', action='store_true', help='Print plan but do not create folder')
    p_course.set_defaults(func=_course)

    p_list = subs.add_parser('list', help='Show the course folders in the current directory and their note counts.')
    p_list.add_argument('-j', '--json', action='store_true', help='Output as JSON.')
    p_list.set_defaults(func=_list)

    return parser


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    args = parser.parse_args(args)
    if not args.func:
        parser.print_help()
        return 1
    _configure_logging(args.verbose)
    conf = NoterConf.for_cwd(preview_mode=args.preview)
    try:
        return args.func(args, conf)
    except Error as e:
        print(f'Error: {e.message}')
        return e.exit_code
