from typing import Any, List, Optional

import pytest


class FakeAuthor:
    def __init__(self, id: str = "id"):
        self.id = id


class FakeChannel:
    """Channel whose send returns the text it was given."""

    def __init__(self):
        self.sent: List[str] = []

    def send(self, content: str) -> str:
        self.sent.append(content)
        return content


class FakeMessage:
    def __init__(self, content: str, author: Optional[FakeAuthor] = None, channel: Any = None):
        self.content = content
        self.author = author or FakeAuthor()
        self.channel = channel or FakeChannel()
        self.delete_calls = 0

    def delete(self) -> None:
        self.delete_calls += 1


@pytest.fixture
def make_message():
    def _make(content: str, **kwargs: Any) -> FakeMessage:
        return FakeMessage(content, **kwargs)

    return _make
