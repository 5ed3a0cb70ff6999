import pytest

from kdutils.bytearray import ByteArray


def test_empty_constructor():
    b = ByteArray()
    assert len(b) == 0
    assert b.is_empty()


def test_str_constructor():
    b = ByteArray("test")
    assert len(b) == 4
    assert bytes(b) == b"test"

    b2 = ByteArray("test", 2)
    assert len(b2) == 2
    assert bytes(b2) == b"te"


def test_sequence_constructor():
    raw = [0, 1, 3, 2]
    b = ByteArray(raw)
    assert len(b) == 4
    assert list(b) == raw


def test_filled():
    b = ByteArray.filled(4, 2)
    assert len(b) == 4
    assert list(b) == [2, 2, 2, 2]


def test_filled_rejects_out_of_range_value():
    with pytest.raises(ValueError):
        ByteArray.filled(3, 256)


def test_int_is_not_a_data_source():
    with pytest.raises(TypeError):
        ByteArray(5)


def test_copy_is_equal_and_independent():
    b = ByteArray.filled(4, 2)
    b2 = ByteArray(b)
    assert b == b2
    b2[0] = 9
    assert list(b) == [2, 2, 2, 2]
    assert list(b2) == [9, 2, 2, 2]


def test_resize():
    b = ByteArray()
    b.resize(883)
    assert len(b) == 883
    assert set(b) == {0}
    b.resize(2)
    assert len(b) == 2


def test_data_access():
    b = ByteArray("test")
    assert b[0] == ord("t")
    assert b[1] == ord("e")
    assert b[2] == ord("s")
    assert b[3] == ord("t")
    assert b[1:3] == ByteArray("es")


def test_comparison():
    a = ByteArray("good")
    b = ByteArray("bad")
    assert a == a
    assert b == b
    assert a != b
    assert not (a == b)
    assert a == b"good"


def test_starts_with():
    a = ByteArray("test")
    b = ByteArray("te")
    c = ByteArray("st")
    assert a.starts_with(b)
    assert not a.starts_with(c)
    assert not b.starts_with(a)


def test_ends_with():
    a = ByteArray("test")
    b = ByteArray("te")
    c = ByteArray("st")
    assert a.ends_with(c)
    assert not a.ends_with(b)
    assert not c.ends_with(a)


def test_mid():
    s = ByteArray("1234 good-apples")
    assert s.mid(5, 4) == ByteArray("good")
    assert s.mid(5) == ByteArray("good-apples")
    assert s.mid(32).is_empty()
    assert s.mid(0, 200) == s


def test_left():
    s = ByteArray("1234 good-apples")
    assert s.left(4) == ByteArray("1234")
    assert s.left(200) == s


def test_clear():
    b = ByteArray.filled(883)
    assert not b.is_empty()
    b.clear()
    assert b.is_empty()


def test_index_of():
    b = ByteArray("hello")
    assert b.index_of("u") == -1
    assert b.index_of("l") == 2
    assert b.index_of(ord("o")) == 4


def test_index_of_rejects_multi_byte_value():
    with pytest.raises(ValueError):
        ByteArray("hello").index_of("he")


def test_remove():
    b = ByteArray("chocolate")
    b.remove(42, 44)
    assert b == ByteArray("chocolate")
    b.remove(0, 5)
    assert b == ByteArray("late")
    b.remove(0, 1)
    assert b == ByteArray("ate")
    assert b.remove(2, 1) is b
    assert b == ByteArray("at")


def test_to_str():
    assert ByteArray("hello").to_str() == "hello"


@pytest.mark.parametrize(
    ("plain", "encoded"),
    [("", ""), ("f", "Zg=="), ("fo", "Zm8="), ("foo", "Zm9v")],
)
def test_to_base64(plain, encoded):
    assert ByteArray(plain).to_base64() == ByteArray(encoded)


@pytest.mark.parametrize(
    ("encoded", "plain"),
    [("", ""), ("Zg==", "f"), ("Zm8=", "fo"), ("Zm9v", "foo")],
)
def test_from_base64(encoded, plain):
    assert ByteArray.from_base64(ByteArray(encoded)) == ByteArray(plain)


def test_from_base64_stops_at_foreign_character():
    assert ByteArray.from_base64("Zm9v!Zm9v") == ByteArray("foo")


def test_from_base64_drops_lone_trailing_character():
    assert ByteArray.from_base64("Zm9vZ") == ByteArray("foo")


def test_from_base64_accepts_urlsafe_alphabet():
    assert ByteArray.from_base64("ab-_") == ByteArray.from_base64("ab+/")
    assert len(ByteArray.from_base64("ab-_")) == 3


@pytest.mark.parametrize("length", range(1, 128))
def test_base64_round_trip(length):
    data = ByteArray([(index * 7 + length) % 127 for index in range(length)])
    assert ByteArray.from_base64(data.to_base64()) == data


def test_base64_round_trip_every_byte_value():
    for value in range(256):
        for length in (1, 2, 3):
            data = ByteArray.filled(length, value)
            assert ByteArray.from_base64(data.to_base64()) == data


def test_operator_plus_equal():
    b = ByteArray("Bruce")
    b += ByteArray("Willis")
    assert b == ByteArray("BruceWillis")


def test_operator_plus():
    a = ByteArray("Bruce")
    b = a + ByteArray("Willis")
    assert b == ByteArray("BruceWillis")
    assert a == ByteArray("Bruce")