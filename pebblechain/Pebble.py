from pebblechain.Utils import ascii_hex


class Pebble:

    __slots__ = ["start_incr", "dest_incr", "position", "destination", "value"]

    def __init__(self, position, value, destination=None, start_incr=None, dest_incr=None):
        self.position = position
        """ The 1-based index along the chain where the pebble was captured. """

        self.destination = position if destination is None else destination
        """ The position a traversal step would advance towards. """

        self.start_incr = 3 * position if start_incr is None else start_incr
        self.dest_incr = 2 * position if dest_incr is None else dest_incr
        # start_incr, dest_incr and destination are kept for a traversal
        # algorithm; nothing in this package reads them.

        self.value = value
        """ The chain value at ``position``. """

    def __eq__(self, other):
        if not isinstance(other, Pebble):
            return NotImplemented
        return all(getattr(self, k) == getattr(other, k) for k in self.__slots__)

    def __str__(self):
        return "Pebble {start_incr: %s, dest_incr: %s, position: %s, destination: %s, value: %s}" % (
            self.start_incr, self.dest_incr, self.position, self.destination, ascii_hex(self.value))

    __repr__ = __str__
