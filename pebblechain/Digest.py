""" Digest capabilities used to build hash chains.

A capability is a class offering ``new_with_prefix``, and instances
offering ``update`` and ``finalize_reset``. The chain functions only ever
talk to these three operations, so any fixed output one-way function can
be plugged in.
"""

import hashlib


class Digest:
    """ The digest protocol. Subclasses provide the hashing. """

    output_size = None
    "The size in bytes of every output of the digest."

    @classmethod
    def new_with_prefix(cls, prefix):
        """ Returns a fresh digest that has already absorbed ``prefix``. """
        d = cls()
        d.update(prefix)
        return d

    def update(self, data):
        raise NotImplementedError()

    def finalize_reset(self):
        """ Returns the output and resets the digest to a fresh state. """
        raise NotImplementedError()


class HashlibDigest(Digest):
    """ A digest backed by a ``hashlib`` algorithm.

    Example:
        >>> d = Sha256.new_with_prefix(b"value")
        >>> d.finalize_reset()[:2] == b'\\xcd\\x42'
        True
        >>> d.finalize_reset() == hashlib.sha256(b"").digest()
        True
    """

    algorithm = None

    def __init__(self):
        self._state = hashlib.new(self.algorithm)

    def update(self, data):
        self._state.update(data)

    def finalize_reset(self):
        output = self._state.digest()
        self._state = hashlib.new(self.algorithm)
        return output


class Sha256(HashlibDigest):
    algorithm = "sha256"
    output_size = 32


class Sha512(HashlibDigest):
    algorithm = "sha512"
    output_size = 64


class Blake2b(HashlibDigest):
    algorithm = "blake2b"
    output_size = 64


def digest_for(name):
    """ Builds a digest capability for any algorithm ``hashlib`` offers.

    >>> digest_for("sha1").output_size
    20
    """
    # Unknown names raise ValueError from hashlib itself.
    size = hashlib.new(name).digest_size

    # The shake XOFs report no fixed size.
    if size == 0:
        raise ValueError("%s has no fixed output size" % name)

    return type("HashlibDigest_%s" % name, (HashlibDigest,),
                {"algorithm": name, "output_size": size})
