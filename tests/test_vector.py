import pytest

from dstructs.vector import Vector, main


def test_new_vector_is_empty_with_capacity_two():
    vector = Vector()
    assert len(vector) == 0
    assert vector.capacity() == 2


def test_push_back_keeps_order():
    vector = Vector()
    values = [5, 3, 9, 1, 7]
    for value in values:
        vector.push_back(value)
    assert list(vector) == values
    assert [vector[i] for i in range(len(values))] == values


def test_capacity_doubles_and_covers_size():
    vector = Vector()
    previous = vector.capacity()
    for count in range(1, 40):
        vector.push_back(count)
        capacity = vector.capacity()
        assert capacity >= len(vector)
        assert capacity in (previous, previous * 2)
        previous = capacity


def test_set_replaces_element():
    vector = Vector()
    for value in "abc":
        vector.push_back(value)
    vector.set(1, "z")
    vector[2] = "y"
    assert vector.at(1) == "z"
    assert list(vector) == ["a", "z", "y"]


@pytest.mark.parametrize("index", [3, 10, -1])
def test_out_of_range_access_raises(index):
    vector = Vector()
    for value in range(3):
        vector.push_back(value)
    with pytest.raises(IndexError):
        vector.at(index)
    with pytest.raises(IndexError):
        vector[index]
    with pytest.raises(IndexError):
        vector.set(index, 0)


def test_main_prints_one_to_thirty(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.split() == [str(n) for n in range(1, 31)]