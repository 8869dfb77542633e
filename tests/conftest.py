from contextlib import contextmanager

import pytest


class FakeTerminal:
    """Records output and replays scripted keystrokes; no TTY needed."""

    def __init__(self, keys=None, size=None):
        self.keys = list(keys or [])
        self.size = size
        self.output = []
        self.events = []
        self.in_session = False

    @contextmanager
    def session(self):
        self.events.append("enter")
        self.in_session = True
        try:
            yield self
        finally:
            self.in_session = False
            self.events.append("exit")

    def read_key(self):
        if self.keys:
            return self.keys.pop(0)
        return None

    def write(self, text):
        self.output.append(text)

    def clear(self):
        self.events.append("clear")

    def wait_for_enter(self):
        self.events.append("wait")

    def query_size(self):
        return self.size

    @property
    def text(self):
        return "".join(self.output)


@pytest.fixture
def terminal():
    return FakeTerminal()
