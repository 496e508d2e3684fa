import pytest

from seqlab.sequence import (
    ArraySequence,
    ImmutableArraySequence,
    ImmutableListSequence,
    ListSequence,
    MutableArraySequence,
    MutableListSequence,
)

NUMBERS = [1, 2, 3, 4, 5]


def test_basic_access():
    for seq in (
        MutableArraySequence(NUMBERS),
        ImmutableArraySequence(NUMBERS),
        MutableListSequence(NUMBERS),
        ImmutableListSequence(NUMBERS),
    ):
        assert len(seq) == 5
        assert seq.first() == 1
        assert seq.last() == 5
        assert seq.get(2) == 3
        assert seq[2] == 3
        assert list(seq) == NUMBERS


def test_get_out_of_range():
    for seq in (
        MutableArraySequence(NUMBERS),
        ImmutableArraySequence(NUMBERS),
        MutableListSequence(NUMBERS),
        ImmutableListSequence(NUMBERS),
    ):
        with pytest.raises(IndexError):
            seq.get(1000)
        with pytest.raises(IndexError):
            seq[-1]
        assert list(seq) == NUMBERS


def test_empty_first_last_raise():
    for seq in (
        MutableArraySequence(),
        ImmutableArraySequence(),
        MutableListSequence(),
        ImmutableListSequence(),
    ):
        assert len(seq) == 0
        with pytest.raises(IndexError):
            seq.first()
        with pytest.raises(IndexError):
            seq.last()


def test_mutable_array_sequence_scenario():
    seq = MutableArraySequence(NUMBERS)

    assert seq.append(6) is seq
    assert len(seq) == 6
    assert seq.last() == 6

    seq.prepend(0)
    assert len(seq) == 7
    assert seq.first() == 0

    seq.insert_at(999, 4)
    assert len(seq) == 8
    assert seq.get(4) == 999

    with pytest.raises(IndexError):
        seq.insert_at(1000, 1000)

    sub = seq.subsequence(0, 1)
    assert len(sub) == 2
    assert sub.first() == seq.first()
    assert sub.last() == seq.get(1)

    with pytest.raises(IndexError):
        seq.subsequence(1000, 1000)

    joined = seq.concat(sub)
    assert len(joined) == len(sub) + len(seq)
    assert joined.first() == seq.first()
    assert joined.last() == sub.last()


def test_immutable_list_sequence_scenario():
    seq = ImmutableListSequence(NUMBERS)

    appended = seq.append(6)
    assert len(appended) == 6
    assert appended.last() == 6

    prepended = appended.prepend(0)
    assert len(prepended) == 7
    assert prepended.first() == 0

    inserted = prepended.insert_at(999, 4)
    assert len(inserted) == 8
    assert inserted.get(4) == 999

    with pytest.raises(IndexError):
        seq.insert_at(1000, 1000)

    sub = inserted.subsequence(0, 1)
    assert len(sub) == 2
    assert sub.first() == inserted.first()
    assert sub.last() == inserted.get(1)

    with pytest.raises(IndexError):
        seq.subsequence(1000, 1000)

    joined = inserted.concat(sub)
    assert len(joined) == len(inserted) + len(sub)
    assert joined.first() == inserted.first()
    assert joined.last() == sub.last()

    assert list(seq) == NUMBERS


def test_mutable_operations_change_in_place():
    for seq in (MutableArraySequence(NUMBERS), MutableListSequence(NUMBERS)):
        assert seq.append(6) is seq
        assert seq.prepend(0) is seq
        assert seq.insert_at(999, 4) is seq
        assert list(seq) == [0, 1, 2, 3, 999, 4, 5, 6]


def test_immutable_operations_return_new():
    for seq in (ImmutableArraySequence(NUMBERS), ImmutableListSequence(NUMBERS)):
        appended = seq.append(6)
        prepended = seq.prepend(0)
        inserted = seq.insert_at(999, 4)
        assert appended is not seq and type(appended) is type(seq)
        assert list(appended) == NUMBERS + [6]
        assert list(prepended) == [0] + NUMBERS
        assert list(inserted) == [1, 2, 3, 4, 999, 5]
        assert list(seq) == NUMBERS


def test_immutable_results_stay_immutable():
    for seq in (ImmutableArraySequence(NUMBERS), ImmutableListSequence(NUMBERS)):
        appended = seq.append(6)
        again = appended.append(7)
        assert again is not appended
        assert list(again) == NUMBERS + [6, 7]
        assert list(appended) == NUMBERS + [6]
        assert list(seq) == NUMBERS


def test_subsequence_of_mutable_stays_mutable():
    for seq in (MutableArraySequence(NUMBERS), MutableListSequence(NUMBERS)):
        sub = seq.subsequence(0, 1)
        assert sub.append(9) is sub
        assert list(sub) == [1, 2, 9]
        assert list(seq) == NUMBERS


def test_insert_at_bounds():
    for seq in (
        MutableArraySequence(NUMBERS),
        ImmutableArraySequence(NUMBERS),
        MutableListSequence(NUMBERS),
        ImmutableListSequence(NUMBERS),
    ):
        with pytest.raises(IndexError):
            seq.insert_at(7, -1)
        with pytest.raises(IndexError):
            seq.insert_at(7, len(seq) + 1)
        assert list(seq.insert_at(7, len(seq)))[-1] == 7


def test_subsequence_is_inclusive_and_same_kind():
    for seq in (
        MutableArraySequence(NUMBERS),
        ImmutableArraySequence(NUMBERS),
        MutableListSequence(NUMBERS),
        ImmutableListSequence(NUMBERS),
    ):
        sub = seq.subsequence(1, 3)
        assert list(sub) == NUMBERS[1:4]
        assert type(sub) is type(seq)
        assert list(seq) == NUMBERS


def test_array_subsequence_reversed_bounds_is_empty():
    seq = MutableArraySequence(NUMBERS)
    assert list(seq.subsequence(3, 1)) == []


def test_list_subsequence_reversed_bounds_raises():
    seq = MutableListSequence(NUMBERS)
    with pytest.raises(ValueError):
        seq.subsequence(3, 1)


def test_concat_does_not_touch_operands():
    for seq, other in (
        (MutableArraySequence(NUMBERS), MutableArraySequence([1, 2, 3])),
        (ImmutableArraySequence(NUMBERS), ImmutableArraySequence([1, 2, 3])),
        (MutableListSequence(NUMBERS), MutableListSequence([1, 2, 3])),
        (ImmutableListSequence(NUMBERS), ImmutableListSequence([1, 2, 3])),
    ):
        joined = seq.concat(other)
        assert list(joined) == NUMBERS + [1, 2, 3]
        assert type(joined) is type(seq)
        assert list(seq) == NUMBERS
        assert list(other) == [1, 2, 3]


def test_concat_across_storage_kinds():
    arrays = MutableArraySequence([1, 2])
    lists = ImmutableListSequence([3])
    assert list(arrays.concat(lists)) == [1, 2, 3]
    assert list(lists.concat(arrays)) == [3, 1, 2]


def test_copy_is_independent():
    for seq in (
        MutableArraySequence(NUMBERS),
        ImmutableArraySequence(NUMBERS),
        MutableListSequence(NUMBERS),
        ImmutableListSequence(NUMBERS),
    ):
        clone = seq.copy()
        clone._append_in_place(6)
        assert list(seq) == NUMBERS
        assert list(clone) == NUMBERS + [6]
        assert type(clone) is type(seq)


def test_base_storage_kinds_are_mutable():
    for seq in (ArraySequence(), ListSequence()):
        assert seq.append(1) is seq
        assert list(seq) == [1]