import pytest

from holytls.strings import String8, String8List


def test_string8_round_trip():
    s = String8("hello world")
    assert s.to_string() == "hello world"
    assert len(s) == len("hello world")
    assert str(s) == "hello world"


def test_empty_string8():
    s = String8()
    assert len(s) == 0
    assert s == ""
    assert not s


def test_substr_inside():
    s = String8("hello world")
    assert s.substr(6) == "world"
    assert s.substr(0, 5) == "hello"


def test_substr_clamps_length():
    s = String8("abc")
    assert s.substr(1, 100) == s.to_string()[1:]


def test_substr_past_end_is_empty():
    s = String8("abc")
    assert s.substr(3) == ""
    assert s.substr(50, 2) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        String8("abc").substr(-1)


def test_prefix_and_suffix_clamp():
    s = String8("abcdef")
    assert s.prefix(2) == "ab"
    assert s.prefix(100) == s
    assert s.suffix(2) == "ef"
    assert s.suffix(100) == s


def test_prefix_plus_suffix_rebuilds_string():
    s = String8("abcdef")
    for n in range(len(s) + 1):
        assert s.prefix(n).to_string() + s.suffix(len(s) - n).to_string() == s.to_string()


def test_equality_between_string8_values():
    assert String8("x-y") == String8("x-y")
    assert String8("x-y") != String8("x-z")
    assert hash(String8("k")) == hash(String8("k"))


def test_string8_from_string8():
    original = String8("copy")
    assert String8(original) == original


def test_string8_rejects_other_types():
    with pytest.raises(TypeError):
        String8(12)


def test_list_join_concatenates_in_order():
    lst = String8List()
    for part in ["GET", " ", "/index"]:
        lst.push(part)
    assert lst.join() == "GET /index"
    assert len(lst) == 3
    assert lst.total_size() == len("GET /index")


def test_list_join_sep():
    lst = String8List()
    lst.push("a")
    lst.push(String8("b"))
    lst.push("c")
    assert lst.join_sep(", ") == ", ".join(["a", "b", "c"])
    assert lst.total_size() == 3


def test_empty_list_joins_to_empty():
    lst = String8List()
    assert lst.join() == ""
    assert lst.join_sep("-") == ""
    assert len(lst) == 0
    assert lst.total_size() == 0


def test_list_iteration_yields_parts():
    lst = String8List()
    lst.push("one")
    lst.push("two")
    assert [p.to_string() for p in lst] == ["one", "two"]