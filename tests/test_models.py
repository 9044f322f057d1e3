import pytest

from noter.models import CourseCode, BadCourseCodeError, CourseNotFoundError, CreateResult, Outcome, Error,\
    FilesystemError, PatternError, CourseInfo


def test_course_code_parse():
    assert CourseCode.parse('CS101') == CourseCode('CS101')
    assert CourseCode.parse('cs101') == CourseCode('CS101')
    assert CourseCode.parse('  math2 ') == CourseCode('MATH2')
    assert CourseCode.parse('cs101a') == CourseCode('CS101A')
    assert str(CourseCode.parse('cs101')) == 'CS101'


def test_course_code_parse_invalid():
    for raw in ['', '101', 'cs', '  ', 'c-101']:
        with pytest.raises(BadCourseCodeError) as exc:
            CourseCode.parse(raw)
        assert exc.value.code == raw.strip().upper()
    with pytest.raises(BadCourseCodeError, match='Invalid course code: CS'):
        CourseCode.parse('cs')


def test_error_messages_and_exit_codes():
    cause = PermissionError(13, 'Permission denied')
    errors = [
        Error('something odd'),
        BadCourseCodeError('CS'),
        CourseNotFoundError('CS999'),
        PatternError('CS101(', ValueError('bad')),
        FilesystemError('Cannot create note /notes/x.md', '/notes/x.md', cause),
    ]
    assert [e.exit_code for e in errors] == [1, 3, 4, 5, 6]
    assert len({e.exit_code for e in errors}) == len(errors)
    assert all(isinstance(e, Error) for e in errors)
    assert errors[0].message == 'something odd'
    assert errors[2].message == 'Could not find notes folder for course CS999'
    assert errors[3].message == 'Cannot match course folders for CS101(: bad'
    assert errors[4].message == 'Cannot create note /notes/x.md: [Errno 13] Permission denied'
    assert errors[4].cause is cause
    assert str(errors[2]) == errors[2].message


def test_create_result_as_json():
    result = CreateResult(CourseCode('CS101'), '2024-03-05.md', '/notes/CS101 Intro/2024-03-05.md',
                          Outcome.ALREADY_EXISTED)
    assert result.as_json() == {
        'code': 'CS101',
        'name': '2024-03-05.md',
        'path': '/notes/CS101 Intro/2024-03-05.md',
        'outcome': 'already_existed',
        'preview': False,
    }


def test_course_info_as_json():
    info = CourseInfo('CS101', '/notes/CS101 Intro', 3, 'Intro')
    assert info.as_json() == {'code': 'CS101', 'title': 'Intro', 'path': '/notes/CS101 Intro', 'note_count': 3}
