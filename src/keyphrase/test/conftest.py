from twisted.python import log

import pytest


class Observer:
    def __init__(self):
        self.messages = []

    def __call__(self, event_dict):
        text = log.textFromEventDict(event_dict)
        if text is not None:
            self.messages.append(text)

    def matching(self, fragment):
        return [m for m in self.messages if fragment in m]


@pytest.fixture
def log_messages():
    observer = Observer()
    log.addObserver(observer)

    yield observer

    log.removeObserver(observer)

