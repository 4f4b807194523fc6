"""Unit tests for POSIX name sanitization."""

import re

import pytest

from envredis.sanitize import is_posix_name, sanitize

POSIX_NAME = re.compile(r'^[A-Z_][A-Z0-9_]*$')

SAMPLES = [
    'FOO',
    'foo',
    'bad name',
    'database-url',
    '9lives',
    '123',
    '_private',
    'a.b.c',
    'ünïcode',
    'straße',
    'tab\tand\nnewline',
    '=',
    ' ',
    'MIXED_case_9',
]


class TestSanitize:
    """Tests for sanitize()."""

    def test_valid_name_unchanged(self):
        """Test a valid POSIX name passes through."""
        assert sanitize('DATABASE_URL') == 'DATABASE_URL'

    def test_uppercases(self):
        """Test lowercase letters are uppercased."""
        assert sanitize('foo') == 'FOO'

    def test_replaces_invalid_characters(self):
        """Test spaces and punctuation become underscores."""
        assert sanitize('bad name') == 'BAD_NAME'
        assert sanitize('database-url') == 'DATABASE_URL'
        assert sanitize('a.b') == 'A_B'

    def test_leading_digit_replaced(self):
        """Test a leading digit is replaced but later digits are kept."""
        assert sanitize('9lives') == '_LIVES'
        assert sanitize('123') == '_23'
        assert sanitize('v2') == 'V2'

    def test_empty_string(self):
        """Test the empty string maps to itself."""
        assert sanitize('') == ''

    def test_non_ascii_replaced(self):
        """Test characters outside A-Z are replaced."""
        assert sanitize('é') == '_'

    @pytest.mark.parametrize('name', SAMPLES)
    def test_idempotent(self, name):
        """Test sanitizing twice equals sanitizing once."""
        once = sanitize(name)
        assert sanitize(once) == once

    @pytest.mark.parametrize('name', SAMPLES)
    def test_result_is_posix_name(self, name):
        """Test every non-empty input gives a valid POSIX name."""
        assert POSIX_NAME.match(sanitize(name))


class TestIsPosixName:
    """Tests for is_posix_name()."""

    def test_valid_names(self):
        assert is_posix_name('FOO')
        assert is_posix_name('_FOO_2')

    def test_invalid_names(self):
        assert not is_posix_name('')
        assert not is_posix_name('foo')
        assert not is_posix_name('2FOO')
        assert not is_posix_name('BAD NAME')
