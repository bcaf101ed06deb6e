import itertools

import pytest


class CountingSource:
    """An unbounded source that records how many elements were pulled."""

    def __init__(self, start: int = 0):
        self.pulled = 0
        self._start = start

    def __iter__(self):
        for value in itertools.count(self._start):
            self.pulled += 1
            yield value


class CallLog:
    """Records calls made by stage functions, in order."""

    def __init__(self):
        self.calls = []

    def record(self, name, *args):
        self.calls.append((name,) + args)

    def names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def counting_source():
    return CountingSource()


@pytest.fixture
def call_log():
    return CallLog()
