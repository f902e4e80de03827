from collections import defaultdict, deque
import os

from redisq.data.redis import RedisQueueConnector


_BACKENDS = []


def _get_backends():
    global _BACKENDS
    _BACKENDS.extend([backend.lower() for backend in os.getenv("TEST_BACKENDS", "").split(" ") if backend])
    if not _BACKENDS:
        _BACKENDS = ["all"]


def should_skip(backend):
    """Determine whether a live backend test should be skipped or not.

    If the environment variable `TEST_BACKENDS` is unset or set to "all", all
    tests should be run.

    Otherwise, if a module's shortname is not in the space separated list,
    it should not be run.

    e.g.

    TEST_BACKENDS="all"

    TEST_BACKENDS="redis"

    TEST_BACKENDS="none"
    """
    if not _BACKENDS:
        _get_backends()
    if "all" in _BACKENDS:
        return False
    return backend.lower() not in _BACKENDS


class Drained(Exception):
    """Raised by FakeRedis where a real BRPOP would block forever."""


class FakeRedis:
    """
    In-memory stand-in for the list commands used by the connector.

    `replies` are handed out by `brpop` before the lists are looked at, which
    lets a test script empty polls or transport errors.
    """

    def __init__(self, replies=None):
        self.lists = defaultdict(deque)
        self.replies = deque(replies or [])
        self.calls = []

    def lpush(self, name, *values):
        self.calls.append(("lpush", name, values))
        for value in values:
            self.lists[name].appendleft(value.encode() if isinstance(value, str) else value)
        return len(self.lists[name])

    def brpop(self, keys, timeout=0):
        self.calls.append(("brpop", keys, timeout))
        if self.replies:
            reply = self.replies.popleft()
            if isinstance(reply, Exception):
                raise reply
            return reply
        if not self.lists[keys]:
            raise Drained(keys)
        return keys.encode(), self.lists[keys].pop()

    def pending(self, name):
        """Bodies in the order a consumer would receive them."""
        return list(reversed(self.lists[name]))


def fake_connector(driver=None):
    connector = RedisQueueConnector()
    connector.set_up("redis://fake")
    connector.raw_client = driver if driver is not None else FakeRedis()
    return connector
