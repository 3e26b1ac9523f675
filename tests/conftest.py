"""Shared fixtures for linkhelper tests."""

import pytest

from linkhelper import LinkHelper, RequestContext


class RecordingRouter:
    """Router that records what it was asked to resolve."""

    def __init__(self, url="/resolved"):
        self.url = url
        self.calls = []

    def resolve(self, options, *args):
        self.calls.append((options, args))
        return self.url


@pytest.fixture
def router():
    return RecordingRouter()


@pytest.fixture
def request_context():
    return RequestContext.from_params(
        {"controller": "c", "action": "a", "id": "1", "page": "2"}
    )


@pytest.fixture
def helper(router, request_context):
    return LinkHelper(router, request=request_context)
