import pytest

from logengine.arrays import (
    NPOS,
    ArrayError,
    AutoArray,
    DynArray,
    FixedStringArray,
    RawArray,
    SortedArray,
)


# RawArray -----------------------------------------------------------------


def test_raw_zero_item_size_raises():
    with pytest.raises(ArrayError, match="ItemSize cannot be zero"):
        RawArray(0)


def test_raw_add_and_get_round_trip():
    raw = RawArray(4)
    assert raw.add(b"abcd") == 0
    assert raw.add(b"wxyz") == 1
    assert len(raw) == 2
    assert raw.get(0) == b"abcd"
    assert raw.get(1) == b"wxyz"


def test_raw_short_value_is_padded_and_long_truncated():
    raw = RawArray(4)
    raw.add(b"ab")
    raw.add(b"abcdefgh")
    assert raw.get(0) == b"ab" + bytes(2)
    assert raw.get(1) == b"abcd"
    assert all(len(raw.get(i)) == raw.item_size for i in range(len(raw)))


def test_raw_add_many_and_insert_many():
    raw = RawArray(2)
    raw.add_many(b"aabbcc")
    assert [raw.get(i) for i in range(len(raw))] == [b"aa", b"bb", b"cc"]
    raw.insert_many(1, b"xxyy")
    assert [raw.get(i) for i in range(len(raw))] == [b"aa", b"xx", b"yy", b"bb", b"cc"]


def test_raw_add_many_rejects_partial_item():
    raw = RawArray(3)
    with pytest.raises(ArrayError):
        raw.add_many(b"abcd")
    assert len(raw) == 0


def test_raw_update_and_update_many():
    raw = RawArray(2)
    raw.add_many(b"aabbcc")
    raw.update(0, b"zz")
    raw.update_many(1, b"qqrr")
    assert [raw.get(i) for i in range(len(raw))] == [b"zz", b"qq", b"rr"]
    with pytest.raises(ArrayError):
        raw.update_many(2, b"sstt")


def test_raw_get_out_of_range_raises():
    raw = RawArray(2)
    raw.add(b"aa")
    with pytest.raises(ArrayError, match="Element with index 1 not found!"):
        raw.get(1)
    with pytest.raises(ArrayError):
        raw.insert(3, b"bb")


def test_raw_delete_swap_zero():
    raw = RawArray(1)
    raw.add_many(b"abc")
    raw.swap(0, 2)
    assert [raw.get(i) for i in range(3)] == [b"c", b"b", b"a"]
    raw.delete(1)
    assert [raw.get(i) for i in range(2)] == [b"c", b"a"]
    raw.zero()
    assert [raw.get(i) for i in range(2)] == [bytes(1), bytes(1)]


def test_raw_fill_capacity_and_clear():
    raw = RawArray(3)
    raw.add_fill_values(5)
    assert len(raw) == 5
    assert raw.get(4) == bytes(3)
    assert raw.capacity >= len(raw)
    raw.hold()
    assert raw.capacity == len(raw)
    raw.set_capacity(2)
    assert len(raw) == 2
    raw.clear()
    assert len(raw) == 0
    assert raw.capacity == 2
    raw.clear_mem()
    assert raw.capacity == 0


# FixedStringArray ---------------------------------------------------------


def test_fixed_string_values_have_fixed_length():
    arr = FixedStringArray(5)
    arr.add("abc")
    arr.add("abcdefgh")
    assert arr[0].rstrip("\0") == "abc"
    assert arr[1] == "abcde"
    assert all(len(arr[i]) == arr.length for i in range(len(arr)))


def test_fixed_string_set_insert_delete():
    arr = FixedStringArray(2)
    for text in ("aa", "bb", "cc"):
        arr.add(text)
    arr[1] = "xx"
    arr.insert(0, "zz")
    assert [arr[i] for i in range(len(arr))] == ["zz", "aa", "xx", "cc"]
    arr.delete(2)
    assert [arr[i] for i in range(len(arr))] == ["zz", "aa", "cc"]


def test_fixed_string_reverse_and_swap():
    arr = FixedStringArray(1)
    items = ["a", "b", "c", "d", "e"]
    for item in items:
        arr.add(item)
    arr.reverse()
    assert [arr[i] for i in range(len(arr))] == items[::-1]
    arr.swap(0, 4)
    assert arr[0] == "a"
    assert arr[4] == "e"


def test_fixed_string_add_chars_fill_and_clear():
    arr = FixedStringArray(3)
    index = arr.add_chars(b"xyz")
    assert arr[index] == "xyz"
    arr.add_fill_values(2)
    assert len(arr) == 3
    assert arr[2] == "\0\0\0"
    arr.clear()
    assert len(arr) == 0
    with pytest.raises(ArrayError):
        arr[0]


# DynArray -----------------------------------------------------------------


def test_dyn_init_round_trip_and_iteration():
    items = [5, 3, 8, 1]
    arr = DynArray(items)
    assert len(arr) == len(items)
    assert list(arr) == items
    assert [arr[i] for i in range(len(arr))] == items


def test_dyn_index_errors():
    arr = DynArray([1, 2])
    with pytest.raises(ArrayError, match="Element with index 2 not found!"):
        arr[2]
    with pytest.raises(ArrayError):
        arr[-1]
    with pytest.raises(ArrayError):
        arr[5] = 0
    with pytest.raises(ArrayError):
        arr.insert(3, 0)


def test_dyn_setitem_and_insert():
    arr = DynArray([1, 2, 3])
    arr[0] = 10
    assert arr.insert(1, 9) == 1
    assert arr.insert(len(arr), 7) == 4
    assert list(arr) == [10, 9, 2, 3, 7]


def test_dyn_delete_keeps_order_on_both_sides():
    items = list(range(10))
    arr = DynArray(items)
    arr.delete(1)
    arr.delete(7)
    expected = items[:]
    del expected[1]
    del expected[7]
    assert list(arr) == expected
    # inserting near the front reuses the space freed by the deletion
    arr.insert(0, -1)
    assert list(arr) == [-1] + expected


def test_dyn_pop_pop_front_last():
    arr = DynArray(["a", "b", "c"])
    assert arr.last() == "c"
    assert arr.pop() == "c"
    assert arr.pop_front() == "a"
    assert list(arr) == ["b"]
    arr.push("z")
    assert arr.last() == "z"
    arr.clear()
    with pytest.raises(ArrayError):
        arr.pop()
    with pytest.raises(ArrayError):
        arr.pop_front()
    with pytest.raises(ArrayError):
        arr.last()


def test_dyn_index_of():
    arr = DynArray(["one", "two", "one", "Three"])
    assert arr.index_of("one") == 0
    assert arr.index_of("one", 1) == 2
    assert arr.index_of("four") == NPOS
    assert arr.index_of("one", 10) == NPOS
    assert arr.index_of("THREE") == NPOS
    assert arr.index_of("THREE", key=str.lower) == 3


def test_dyn_reverse_whole_and_partial():
    items = [1, 2, 3, 4, 5]
    arr = DynArray(items)
    arr.reverse()
    assert list(arr) == items[::-1]
    arr = DynArray(items)
    arr.reverse(2)
    assert list(arr) == [3, 2, 1, 4, 5]
    arr = DynArray(items)
    arr.reverse(99)
    assert list(arr) == items[::-1]
    arr = DynArray(items)
    arr.reverse(0)
    assert list(arr) == items


def test_dyn_swap():
    arr = DynArray([1, 2, 3])
    arr.swap(0, 2)
    assert list(arr) == [3, 2, 1]
    with pytest.raises(ArrayError):
        arr.swap(0, 3)


def test_dyn_equality_and_greater():
    assert DynArray([1, 2, 3]) == DynArray([1, 2, 3])
    assert not DynArray([1, 2]) == DynArray([1, 2, 3])
    assert DynArray([1, 3]) > DynArray([1, 2, 9])
    assert not DynArray([1, 2, 9]) > DynArray([1, 3])
    assert DynArray([1, 2, 3]) > DynArray([1, 2])
    assert not DynArray([1, 2]) > DynArray([1, 2])


def test_dyn_fill_and_zero_use_default():
    arr = DynArray([7, 8], default=0)
    arr.add_fill_values(3)
    assert list(arr) == [7, 8, 0, 0, 0]
    arr.zero()
    assert list(arr) == [0] * len(arr)


def test_dyn_capacity_growth_and_hold():
    arr = DynArray()
    assert arr.capacity == 0
    arr.add(1)
    assert arr.capacity == 4
    for value in range(200):
        arr.add(value)
        assert arr.capacity >= len(arr)
    arr.pop_front()
    arr.add(5)
    assert arr.capacity >= len(arr)
    arr.hold()
    assert arr.capacity == len(arr)


def test_dyn_set_count_and_set_capacity():
    arr = DynArray([1, 2, 3], default="x")
    arr.set_count(5)
    assert list(arr) == [1, 2, 3, "x", "x"]
    assert arr.capacity >= 5
    arr.set_count(2)
    assert list(arr) == [1, 2]
    arr.set_capacity(1)
    assert list(arr) == [1]
    assert arr.capacity == 1


def test_dyn_clear_keeps_capacity_clear_mem_releases():
    arr = DynArray([1, 2, 3])
    capacity = arr.capacity
    arr.clear()
    assert len(arr) == 0
    assert arr.capacity == capacity
    arr.clear_mem()
    assert arr.capacity == 0


# SortedArray --------------------------------------------------------------


def test_sorted_keeps_order():
    items = [5, 1, 9, 3, 7, 3, 0]
    arr = SortedArray(items)
    assert list(arr) == sorted(items)


def test_sorted_add_returns_position_of_value():
    arr = SortedArray()
    for value in [10, 30, 20, 5, 25]:
        position = arr.add(value)
        assert arr[position] == value
    assert list(arr) == sorted([10, 30, 20, 5, 25])


def test_sorted_index_of():
    arr = SortedArray([4, 8, 15, 16, 23, 42])
    assert arr.index_of(15) == 2
    assert arr.index_of(42) == 5
    assert arr.index_of(5) == NPOS
    assert arr.index_of(16, 3) == 3
    assert arr.index_of(4, 1) == NPOS


def test_sorted_start_out_of_bounds_raises():
    arr = SortedArray([1, 2])
    with pytest.raises(ArrayError, match="out of bounds"):
        arr.index_of(1, 2)
    assert SortedArray().index_of(1, 5) == NPOS


def test_sorted_with_key_is_case_insensitive():
    arr = SortedArray(["beta", "Alpha", "gamma"], key=str.lower)
    assert list(arr) == sorted(["beta", "Alpha", "gamma"], key=str.lower)
    assert arr.index_of("ALPHA") == 0
    assert arr.index_of("GAMMA") == 2


def test_sorted_delete_keeps_order():
    arr = SortedArray([3, 1, 2, 5, 4])
    arr.delete(arr.index_of(3))
    assert list(arr) == [1, 2, 4, 5]
    assert arr.index_of(3) == NPOS


@pytest.mark.parametrize(
    "operation",
    [
        lambda a: a.__setitem__(0, 1),
        lambda a: a.insert(0, 1),
        lambda a: a.push(1),
        lambda a: a.pop(),
        lambda a: a.pop_front(),
        lambda a: a.swap(0, 1),
        lambda a: a.reverse(),
        lambda a: a.add_fill_values(1),
    ],
)
def test_sorted_rejects_order_breaking_operations(operation):
    arr = SortedArray([1, 2, 3])
    with pytest.raises(TypeError):
        operation(arr)
    assert list(arr) == [1, 2, 3]


# AutoArray ----------------------------------------------------------------


def test_auto_setitem_extends():
    arr = AutoArray(default=0)
    arr[5] = 7
    assert len(arr) == 6
    assert arr[5] == 7
    assert list(arr)[:5] == [0] * 5


def test_auto_getitem_extends():
    arr = AutoArray([1], default="")
    assert arr[3] == ""
    assert len(arr) == 4
    assert arr[0] == 1


def test_auto_negative_index_raises():
    arr = AutoArray([1, 2])
    with pytest.raises(ArrayError):
        arr[-1]
    assert len(arr) == 2