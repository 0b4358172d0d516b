from pebblechain.Digest import Sha256
from pebblechain.Pebble import Pebble
from pebblechain.Utils import log_2, create_powers, seed_bytes


class ChainInitError(Exception):
    def __init__(self, details):
        Exception.__init__(self, details)
        self.details = details

    def __str__(self):
        return self.details


def check_length(length):
    """ Raises a ChainInitError unless length is a power of two. """
    # Zero would pass the bit test below, so reject it on its own.
    if length == 0:
        raise ChainInitError("length not a power of two")

    if length & (length - 1) != 0:
        raise ChainInitError("length not a power of two")


def iter_chain(length, seed, digest=Sha256):
    """ Yields the chain values H_1 ... H_length, one at a time. """
    hasher = digest.new_with_prefix(seed_bytes(seed))
    output = hasher.finalize_reset()
    yield output

    for _ in range(2, length + 1):
        hasher.update(output)
        output = hasher.finalize_reset()
        yield output


def generate(length, seed, digest=Sha256):
    """Create the hash chain and return the pebbles needed to traverse it.

    Only the current chain value is held while hashing; a pebble is
    recorded at every power of two position from 2 up to ``length``.

    :param length: Chain length, a power of two
    :param seed: 64 bit unsigned seed
    :param digest: Digest capability class, see ``pebblechain.Digest``

    Example:
        >>> pebbles = generate(8, 0)
        >>> [p.position for p in pebbles]
        [2, 4, 8]
    """
    check_length(length)

    num_pebbles = log_2(length)

    # Build the table once, instead of a power per step.
    powers = create_powers(num_pebbles)

    pebbles = []
    for i, output in enumerate(iter_chain(length, seed, digest), 1):
        if i < 2:
            continue

        if i == powers[log_2(i) - 1]:
            pebbles.append(Pebble(
                position=i,
                destination=i,
                start_incr=3 * i,
                dest_incr=2 * i,
                value=output))

    assert len(pebbles) == num_pebbles
    return pebbles


def generate_full(length, seed, digest=Sha256):
    """Create the whole hash chain without pebbles.

    Warning: the result holds ``length`` digests, so large lengths will
    exhaust memory. Use it to check ``generate``, not in production.
    """
    return list(iter_chain(length, seed, digest))


class HashChain:
    def __init__(self, length, seed, digest=Sha256):
        """Build the pebbles of a hash chain.

        Example:
            >>> c = HashChain(128, 0)
            >>> c.positions()
            [2, 4, 8, 16, 32, 64, 128]
            >>> c.pebble_at(128).value == c.full()[-1]
            True

        """
        self.length = length
        self.seed = seed
        self.digest = digest
        self.pebbles = generate(length, seed, digest)

    def __len__(self):
        return self.length

    def positions(self):
        """Return the positions holding a pebble."""
        return [p.position for p in self.pebbles]

    def pebble_at(self, position):
        """Return the pebble stored at a position of the chain."""
        for p in self.pebbles:
            if p.position == position:
                return p

        raise Exception("No pebble at position %s: must be one of %s." % (position, self.positions()))

    def full(self):
        """Return every value of the chain. See ``generate_full``."""
        return generate_full(self.length, self.seed, self.digest)
