import pytest

from drillbook.ipv4 import IPv4, main


def test_parse_and_str_round_trip():
    assert str(IPv4.parse("192.168.1.1")) == "192.168.1.1"


def test_parse_allows_spaces():
    assert IPv4.parse(" 10 . 0 . 0 . 1 ") == IPv4(10, 0, 0, 1)


@pytest.mark.parametrize("ip", [IPv4(), IPv4(10, 0, 0, 255), IPv4(192, 168, 1, 1), IPv4(255, 255, 255, 255)])
def test_int_round_trip(ip):
    assert IPv4.from_int(int(ip)) == ip


def test_int_value_of_third_octet():
    assert int(IPv4(0, 0, 1, 0)) == 256


def test_next_increments_value_with_carry():
    ip = IPv4(10, 0, 0, 255)
    assert int(ip.next()) == int(ip) + 1
    assert ip.next().third == ip.third + 1


def test_next_wraps_at_top():
    assert IPv4(255, 255, 255, 255).next() == IPv4()


def test_previous_wraps_at_bottom():
    assert IPv4().previous() == IPv4(255, 255, 255, 255)


def test_next_then_previous_is_identity():
    ip = IPv4(172, 16, 0, 0)
    assert ip.next().previous() == ip
    assert ip.previous().next() == ip


def test_ordering_follows_numeric_value():
    addresses = [IPv4(10, 0, 0, 2), IPv4(9, 255, 255, 255), IPv4(10, 0, 0, 1)]
    assert sorted(addresses, key=int) == sorted(addresses)
    assert IPv4(1, 2, 3, 4) < IPv4(1, 2, 3, 4).next()


@pytest.mark.parametrize("text", ["256.0.0.1", "1.2.3", "a.b.c.d", "1,2,3,4", "1.2.3.4.5", "-1.0.0.0", ""])
def test_parse_rejects_invalid(text):
    with pytest.raises(ValueError):
        IPv4.parse(text)


@pytest.mark.parametrize("octets", [(256, 0, 0, 0), (0, -1, 0, 0)])
def test_constructor_rejects_out_of_range(octets):
    with pytest.raises(ValueError):
        IPv4(*octets)


def test_from_int_rejects_out_of_range():
    with pytest.raises(ValueError):
        IPv4.from_int(1 << 32)


def test_main_steps_and_returns(capsys):
    assert main(["192.168.1.1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Enter address: 192.168.1.1"
    assert lines[1].endswith("(old val: 192.168.1.1)")
    assert lines[-1] == "After prefix dec: 192.168.1.1"


def test_main_rejects_bad_input(capsys):
    assert main(["300.1.1.1"]) == 1
    assert capsys.readouterr().err == "incorrect input\n"