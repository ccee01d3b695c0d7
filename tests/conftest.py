from typing import Dict, List, Tuple, Union

import pytest

Outcome = Union[int, BaseException]


class FakeResponse:
    def __init__(self, status: int):
        self.status = status


class FakeRequest:
    def __init__(self, outcome: Outcome):
        self.outcome = outcome

    async def __aenter__(self) -> FakeResponse:
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return FakeResponse(self.outcome)

    async def __aexit__(self, *exc_info) -> bool:
        return False


class FakeSession:
    """Stands in for aiohttp.ClientSession; outcomes are status codes or exceptions."""

    def __init__(self, get: Dict[str, Outcome] | None = None, post: Outcome = 200):
        self.get_outcomes = dict(get or {})
        self.post_outcome = post
        self.calls: List[Tuple[str, str, dict]] = []

    def get(self, url: str, **kwargs) -> FakeRequest:
        self.calls.append(("GET", url, kwargs))
        return FakeRequest(self.get_outcomes[url])

    def post(self, url: str, **kwargs) -> FakeRequest:
        self.calls.append(("POST", url, kwargs))
        return FakeRequest(self.post_outcome)


@pytest.fixture
def make_session():
    return FakeSession
