"""
Unit tests for the line formatter.
"""

import logging
import re
from datetime import datetime

import pytest
from colorlog.escape_codes import escape_codes

from tintlog.colors import DEFAULT_COLOR, color_for, colorize
from tintlog.formatter import LineFormatter, format_line, severity_color

RESET = escape_codes['reset']


class TestSeverityColor:
    """Test severity_color"""

    def test_error_and_fatal_share_a_color(self):
        """Should render ERROR and FATAL the same"""
        assert severity_color('ERROR') == severity_color('FATAL') == 'light_red'

    def test_low_alarm_severities_are_distinct(self):
        """Should give DEBUG, INFO and WARN their own colors"""
        colors = [severity_color(s) for s in ('DEBUG', 'INFO', 'WARN')]

        assert len(set(colors)) == 3
        assert severity_color('ERROR') not in colors

    @pytest.mark.parametrize('severity', ['ANY', 'WARNING', 'debug', ''])
    def test_unknown_severity_uses_default(self, severity):
        """Should fall back to the default color"""
        assert severity_color(severity) == DEFAULT_COLOR


class TestFormatLine:
    """Test format_line"""

    def test_format_shape(self):
        """Should render time, colored severity, colored progname and message"""
        line = format_line('ERROR', datetime(2026, 1, 1, 1, 2, 3), 'Foo', 'bar')

        expected = (
            f"01:02:03 [{escape_codes['light_red']}ERROR{RESET}] "
            f"[{escape_codes[color_for('Foo')]}Foo{RESET}]: bar\n"
        )
        assert line == expected

    def test_single_trailing_newline(self):
        """Should end with exactly one newline"""
        line = format_line('INFO', datetime(2026, 1, 1, 23, 59, 59), 'Foo', 'bar')

        assert line.endswith('bar\n')
        assert not line.endswith('\n\n')
        assert line.startswith('23:59:59 ')

    def test_time_is_24_hour_without_date(self):
        """Should render HH:MM:SS only"""
        line = format_line('INFO', datetime(2026, 10, 17, 13, 5, 9), 'Foo', 'bar')

        assert re.match(r'^13:05:09 \[', line)
        assert '2026' not in line

    def test_posix_timestamp_in_local_time(self):
        """Should accept POSIX seconds and render local time"""
        ts = datetime(2026, 1, 1, 7, 8, 9).timestamp()

        assert format_line('INFO', ts, 'Foo', 'bar').startswith('07:08:09 ')

    def test_multiline_message_is_verbatim(self):
        """Should not escape newlines inside the message"""
        line = format_line('INFO', datetime(2026, 1, 1), 'Foo', 'one\ntwo')

        assert line.endswith(': one\ntwo\n')

    def test_unknown_severity(self):
        """Should render unknown severities with the default color"""
        line = format_line('ANY', datetime(2026, 1, 1), 'Foo', 'bar')

        assert f"[{colorize('ANY', DEFAULT_COLOR)}]" in line


class TestLineFormatter:
    """Test LineFormatter on stdlib records"""

    def _record(self, level, msg='hello', args=()):
        record = logging.LogRecord(
            name='Worker',
            level=level,
            pathname='test.py',
            lineno=42,
            msg=msg,
            args=args,
            exc_info=None
        )
        record.created = datetime(2026, 1, 1, 4, 5, 6).timestamp()
        return record

    @pytest.mark.parametrize('level,severity', [
        (logging.DEBUG, 'DEBUG'),
        (logging.INFO, 'INFO'),
        (logging.WARNING, 'WARN'),
        (logging.ERROR, 'ERROR'),
        (logging.CRITICAL, 'FATAL'),
    ])
    def test_maps_levels_to_severities(self, level, severity):
        """Should use DEBUG/INFO/WARN/ERROR/FATAL labels"""
        output = LineFormatter().format(self._record(level))

        assert output == format_line(severity, datetime(2026, 1, 1, 4, 5, 6), 'Worker', 'hello')

    def test_custom_level_keeps_its_name(self):
        """Should fall back to the record's level name"""
        output = LineFormatter().format(self._record(25))

        assert f"[{colorize('Level 25', DEFAULT_COLOR)}]" in output

    def test_interpolates_args(self):
        """Should render the record message with its args"""
        output = LineFormatter().format(self._record(logging.INFO, 'user %s', ('bob',)))

        assert output.endswith(': user bob\n')

    def test_exception_info_adds_error_and_frames(self):
        """Should render the error and its frames after the message"""
        try:
            raise ValueError('kaboom')
        except ValueError:
            import sys
            exc_info = sys.exc_info()

        record = self._record(logging.ERROR, 'failed')
        record.exc_info = exc_info

        lines = LineFormatter().format(record).splitlines()

        assert len(lines) == 3
        assert lines[0].endswith(': failed')
        assert lines[1].endswith(': Error: kaboom')
        assert lines[2].endswith(':in test_exception_info_adds_error_and_frames')
        assert all(f"[{colorize('ERROR', 'light_red')}]" in line for line in lines)

    def test_empty_exception_info(self):
        """Should render only the message when no exception is active"""
        record = self._record(logging.ERROR, 'failed')
        record.exc_info = (None, None, None)

        assert LineFormatter().format(record).endswith(': failed\n')
        assert len(LineFormatter().format(record).splitlines()) == 1
