import pytest

from zbp.driftbottle import Bottle, Sea, crc64_iso, parse_fetch, parse_throw


@pytest.fixture
def sea(tmp_path):
    with Sea(tmp_path / "sea.db") as s:
        yield s


def test_crc64_check_value():
    assert crc64_iso(b"123456789") == 0xB90956C775A41001


def test_crc64_empty():
    assert crc64_iso(b"") == 0


def test_bottle_id_deterministic_and_signed():
    a = Bottle.new(1, 2, "n", "hello")
    b = Bottle.new(1, 2, "n", "hello")
    c = Bottle.new(1, 2, "n", "world")
    assert a.id == b.id
    assert a.id != c.id
    assert -(1 << 63) <= a.id < (1 << 63)
    assert (a.qq, a.grp, a.name, a.msg) == (1, 2, "n", "hello")


def test_parse_throw_full():
    assert parse_throw("在群12345丢漂流瓶到频道abc hello there", 9) == (12345, "abc", "hello there")


def test_parse_throw_defaults():
    assert parse_throw("丢漂流瓶 hi", 7) == (7, "global", "hi")


def test_parse_throw_not_command():
    assert parse_throw("随便说说", 7) is None


def test_parse_throw_empty_message():
    with pytest.raises(ValueError):
        parse_throw("丢漂流瓶 ", 7)


def test_parse_throw_bad_group():
    with pytest.raises(ValueError):
        parse_throw("在群99999999999999999999丢漂流瓶 hi", 7)


def test_parse_fetch():
    assert parse_fetch("捡漂流瓶") == "global"
    assert parse_fetch("从频道abc捡漂流瓶") == "abc"
    assert parse_fetch("捡漂流瓶吧") is None


def test_throw_fetch_destroy(sea):
    bottle = Bottle.new(10, 0, "name", "msg")
    sea.throw(bottle, "global")
    assert sea.count("global") == 1
    assert sea.fetch("global", 42) == bottle
    sea.destroy(bottle, "global")
    assert sea.count("global") == 0


def test_group_restriction(sea):
    bottle = Bottle.new(10, 5, "name", "secret msg")
    sea.throw(bottle, "global")
    with pytest.raises(LookupError):
        sea.fetch("global", 6)
    assert sea.fetch("global", 5) == bottle


def test_fetch_requires_target(sea):
    with pytest.raises(ValueError):
        sea.fetch("global", 0)


def test_channels(sea):
    with pytest.raises(LookupError):
        sea.count("other")
    with pytest.raises(LookupError):
        sea.throw(Bottle.new(1, 0, "a", "b"), "other")
    sea.create_channel("other  ")
    assert sea.count("other") == 0
    sea.throw(Bottle.new(1, 0, "a", "b"), "other")
    assert sea.count("other") == 1
    assert sea.count("global") == 0


def test_create_empty_channel(sea):
    with pytest.raises(ValueError):
        sea.create_channel("   ")


def test_same_bottle_replaces(sea):
    bottle = Bottle.new(3, 0, "x", "y")
    sea.throw(bottle, "global")
    sea.throw(bottle, "global")
    assert sea.count("global") == 1