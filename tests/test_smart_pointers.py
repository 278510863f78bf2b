from ferrolings.lessons.smart_pointers import (
    Cons,
    CopyOnWrite,
    abs_all,
    create_empty_list,
    create_non_empty_list,
)


def test_create_empty_list():
    assert create_empty_list() is None


def test_create_non_empty_list():
    assert create_non_empty_list() != create_empty_list()
    assert create_non_empty_list() == Cons(0, None)


def test_reference_mutation():
    source = (-1, 0, 1)
    result = abs_all(CopyOnWrite.borrowed(source))
    assert result.is_owned is True
    assert list(result) == [1, 0, 1]
    assert source == (-1, 0, 1)


def test_reference_no_mutation():
    source = [0, 1, 2]
    result = abs_all(CopyOnWrite.borrowed(source))
    assert result.is_owned is False
    assert result.data is source


def test_owned_no_mutation():
    result = abs_all(CopyOnWrite.owned([0, 1, 2]))
    assert result.is_owned is True
    assert list(result) == [0, 1, 2]


def test_owned_mutation():
    values = CopyOnWrite.owned([-1, 0, 1])
    before = values.to_mut()
    result = abs_all(values)
    assert result.is_owned is True
    assert result.to_mut() is before
    assert before == [1, 0, 1]


def test_to_mut_copies_borrowed_data_once():
    source = [5, -6]
    values = CopyOnWrite.borrowed(source)
    first = values.to_mut()
    first[0] = 9
    assert values.to_mut() is first
    assert source == [5, -6]
    assert len(values) == 2
    assert values[0] == 9