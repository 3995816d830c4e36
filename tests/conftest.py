import pytest


class ChangeRecorder:
    """Change listener that remembers every (color, changes) call."""

    def __init__(self):
        self.calls = []

    def __call__(self, color, changes):
        self.calls.append((color, changes))

    @property
    def changes(self):
        return [changes for _, changes in self.calls]


@pytest.fixture
def recorder():
    return ChangeRecorder()
