"""
Tests for child process execution.

These start a real Python interpreter as the child.
"""

import json
import os
import signal
import sys

import pytest

from envredis.exceptions import SpawnError
from envredis.process import exit_code_from_returncode, run_child


def base_env():
    return {'PATH': os.environ.get('PATH', '/usr/bin:/bin')}


class TestRunChild:
    """Tests for run_child()."""

    def test_child_sees_environment(self, tmp_path):
        out = tmp_path / 'env.json'
        env = dict(base_env(), FOO='1')
        code = run_child([
            sys.executable, '-c',
            'import json, os, sys; json.dump(dict(os.environ), open(sys.argv[1], "w"))',
            str(out),
        ], env)
        assert code == 0
        assert json.loads(out.read_text())['FOO'] == '1'

    def test_exit_code_propagated(self):
        code = run_child([sys.executable, '-c', 'import sys; sys.exit(7)'], base_env())
        assert code == 7

    def test_missing_command(self):
        with pytest.raises(SpawnError) as exc_info:
            run_child(['envredis-no-such-command'], base_env())
        assert exc_info.value.exit_code == 111
        assert exc_info.value.command == 'envredis-no-such-command'


class TestExitCodeFromReturncode:
    """Tests for exit_code_from_returncode()."""

    def test_normal_exit(self):
        assert exit_code_from_returncode(0) == 0
        assert exit_code_from_returncode(3) == 3

    def test_killed_by_signal(self):
        assert exit_code_from_returncode(-signal.SIGTERM) == 128 + signal.SIGTERM
