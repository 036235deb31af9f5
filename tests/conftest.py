import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import subprocess
import pytest
from config import Settings
from prompts import Operator
from state import RunContext

_UNSET = object()


class FakeShell:
    """
    Stands in for HostShell. Responses are keyed by a fragment of the
    script/command line; the first matching fragment wins. An Exception
    response is raised instead of returned.
    """

    def __init__(self):
        self.scripts = []
        self.commands = []
        self._responses = []

    def on(self, fragment, response):
        self._responses.append((fragment, response))
        return self

    def _lookup(self, text):
        for fragment, response in self._responses:
            if fragment in text:
                if isinstance(response, Exception):
                    raise response
                return response
        return _UNSET

    def powershell(self, script):
        self.scripts.append(script)
        response = self._lookup(script)
        return "" if response is _UNSET else response

    def powershell_json(self, script):
        self.scripts.append(script)
        response = self._lookup(script)
        return [] if response is _UNSET else response

    def execute(self, argv, check=True):
        self.commands.append(list(argv))
        response = self._lookup(" ".join(argv))
        if response is _UNSET:
            return subprocess.CompletedProcess(argv, 0, "", "")
        return response

    def ran(self, fragment):
        return any(fragment in s for s in self.scripts) or any(
            fragment in " ".join(c) for c in self.commands
        )


class ScriptedOperator(Operator):
    """Answers prompts from a fixed list and records everything shown."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.messages = []

    def ask(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {prompt}")
        return self.answers.pop(0)

    def notify(self, level, message):
        self.messages.append((level, message))

    def said(self, level, fragment):
        return any(lvl == level and fragment in msg for lvl, msg in self.messages)


@pytest.fixture
def ctx():
    return RunContext()

@pytest.fixture
def settings(tmp_path):
    return Settings(log_dir=str(tmp_path))

@pytest.fixture
def shell():
    return FakeShell()

@pytest.fixture
def operator():
    """Factory: operator(["y", "12", ...])"""
    return ScriptedOperator
