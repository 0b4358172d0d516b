from pebblechain import Pebble, generate


def test_pebble_defaults():
    p = Pebble(8, b"\x01")
    assert p.destination == 8
    assert p.start_incr == 24
    assert p.dest_incr == 16


def test_pebble_display():
    p = Pebble(position=4, destination=4, start_incr=12, dest_incr=8, value=b"\xca\xfe")
    expected = "Pebble {start_incr: 12, dest_incr: 8, position: 4, destination: 4, value: cafe}"
    assert str(p) == expected
    assert repr(p) == expected
    assert repr([p]) == "[%s]" % expected


def test_pebble_eq():
    p = Pebble(4, b"A")
    assert p == Pebble(4, b"A")
    assert p != Pebble(4, b"B")
    assert p != Pebble(4, b"A", destination=8)
    assert p != "Pebble"


def test_pebble_display_sha256():
    p = generate(2, 0)[0]
    text = str(p)
    assert text.startswith("Pebble {start_incr: 6, dest_incr: 4, position: 2, destination: 2, value: ")
    assert len(text.split("value: ")[1]) == 64 + 1
