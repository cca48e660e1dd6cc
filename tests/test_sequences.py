from drillkit.lessons.sequences import (
    Cons,
    Cow,
    abs_all,
    create_empty_list,
    create_non_empty_list,
    fill_vec,
    vec_loop,
    vec_map,
)


def test_vec_loop():
    v = [2, 4, 6, 8, 10]
    ans = vec_loop(list(v))
    assert ans == [4, 8, 12, 16, 20]


def test_vec_loop_mutates_in_place():
    v = [1, 2]
    result = vec_loop(v)
    assert result is v
    assert v == [2, 4]


def test_vec_map():
    v = [2, 4, 6, 8, 10]
    assert vec_map(v) == [4, 8, 12, 16, 20]
    assert v == [2, 4, 6, 8, 10]


def test_fill_vec():
    vec0 = [22, 44, 66]
    vec1 = fill_vec(vec0)
    assert vec1 == [22, 44, 66, 88]
    assert vec0 == [22, 44, 66]


def test_create_empty_list():
    assert create_empty_list() is None


def test_create_non_empty_list():
    assert create_empty_list() != create_non_empty_list()
    assert list(create_non_empty_list()) == [1, 2, 3]


def test_cons_iteration():
    assert list(Cons(7)) == [7]


def test_reference_mutation():
    data = [-1, 0, 1]
    result = abs_all(Cow.borrowed(data))
    assert result.is_owned
    assert list(result) == [1, 0, 1]
    assert data == [-1, 0, 1]


def test_reference_no_mutation():
    data = [0, 1, 2]
    result = abs_all(Cow.borrowed(data))
    assert not result.is_owned
    assert list(result) == [0, 1, 2]


def test_owned_no_mutation():
    result = abs_all(Cow.owned([0, 1, 2]))
    assert result.is_owned
    assert list(result) == [0, 1, 2]


def test_owned_mutation():
    result = abs_all(Cow.owned([-1, 0, 1]))
    assert result.is_owned
    assert list(result) == [1, 0, 1]


def test_to_mut_copies_borrowed_data():
    data = (3, 4)
    cow = Cow.borrowed(data)
    mutable = cow.to_mut()
    mutable[0] = 9
    assert data == (3, 4)
    assert cow[0] == 9
    assert len(cow) == 2