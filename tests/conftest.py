import pytest

from pebblechain.Digest import Digest, Sha256


class CountingDigest(Digest):
    """ A SHA-256 digest that records how many outputs it produced. """

    calls = 0

    def __init__(self):
        self._inner = Sha256()
        self.output_size = self._inner.output_size

    def update(self, data):
        self._inner.update(data)

    def finalize_reset(self):
        CountingDigest.calls += 1
        return self._inner.finalize_reset()


class TinyDigest(Digest):
    """ A 4 byte stand-in: SHA-256 truncated. """

    output_size = 4

    def __init__(self):
        self._inner = Sha256()

    def update(self, data):
        self._inner.update(data)

    def finalize_reset(self):
        return self._inner.finalize_reset()[:4]


@pytest.fixture
def counting():
    CountingDigest.calls = 0
    return CountingDigest


@pytest.fixture
def tiny():
    return TinyDigest
