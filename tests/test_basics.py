import pytest

from ferrolings.lessons.basics import (
    Wrapper,
    array_and_vec,
    bigger,
    fill_vec,
    foo_if_fizz,
    is_even,
    maybe_icecream,
    ring_messages,
    sale_price,
    square,
    vec_loop,
    vec_map,
)


def test_ring_messages():
    assert ring_messages(3) == [
        "Ring! Call number 1",
        "Ring! Call number 2",
        "Ring! Call number 3",
    ]


def test_ring_messages_none_for_zero_or_negative():
    assert ring_messages(0) == []
    assert ring_messages(-2) == []


def test_sale_price():
    assert sale_price(51) == 48
    assert sale_price(50) == 40


def test_square():
    assert square(3) == 9
    assert square(-4) == 16


def test_is_true_when_even():
    assert is_even(4) is True


def test_is_false_when_odd():
    assert is_even(5) is False


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


def test_check_icecream():
    assert maybe_icecream(9) == 5
    assert maybe_icecream(10) == 5
    assert maybe_icecream(23) == 0
    assert maybe_icecream(22) == 0
    assert maybe_icecream(25) is None


def test_raw_value():
    icecreams = maybe_icecream(12) or 0
    assert icecreams == 5


def test_icecream_rejects_negative_hour():
    with pytest.raises(ValueError):
        maybe_icecream(-1)


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"


def test_array_and_vec_similarity():
    a, v = array_and_vec()
    assert list(a) == v
    assert v == [10, 20, 30, 40]


def test_vec_loop():
    v = [2, 4, 6, 8, 10]
    assert vec_loop(list(v)) == [4, 8, 12, 16, 20]


def test_vec_map():
    v = [2, 4, 6, 8, 10]
    assert vec_map(v) == [4, 8, 12, 16, 20]
    assert v == [2, 4, 6, 8, 10]


def test_fill_vec():
    vec1 = fill_vec([])
    assert vec1 == [22, 44, 66]
    vec1.append(88)
    assert vec1 == [22, 44, 66, 88]