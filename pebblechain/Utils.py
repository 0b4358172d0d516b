# -*- coding: utf-8 -*-

from binascii import hexlify


def log_2(x):
    """ Returns the position of the highest set bit of a positive integer.

    >>> log_2(1), log_2(2), log_2(128), log_2(129)
    (0, 1, 7, 7)
    """
    assert x > 0
    return x.bit_length() - 1


def create_powers(how_many):
    """ Returns the list of the first powers of two, starting at 2.

    >>> create_powers(3)
    [2, 4, 8]
    >>> create_powers(0)
    []
    """
    return [2**(p + 1) for p in range(how_many)]


def seed_bytes(seed):
    """ Encodes a 64 bit seed as 8 little endian bytes.

    >>> seed_bytes(1) == b'\\x01' + b'\\x00' * 7
    True
    """
    return seed.to_bytes(8, "little")


def ascii_hex(value):
    """
    >>> ascii_hex(b'\\xca\\xfe')
    'cafe'
    """
    return hexlify(value).decode("ascii")
