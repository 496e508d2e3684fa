# seqlab

Sequences stored in one of two ways:

- in a resizable array (`seqlab.dynamic_array.DynamicArray`)
- in a singly linked list (`seqlab.linked_list.LinkedList`)

Each storage kind comes in a mutable and an immutable form:

| Class                    | Storage     | `mutable` |
|--------------------------|-------------|-----------|
| `MutableArraySequence`   | array       | `True`    |
| `ImmutableArraySequence` | array       | `False`   |
| `MutableListSequence`    | linked list | `True`    |
| `ImmutableListSequence`  | linked list | `False`   |

`append`, `prepend` and `insert_at` on a mutable sequence change it in place
and return the sequence itself. On an immutable sequence they leave it as it
is and return a changed copy of the same class. `subsequence`, `concat` and
`copy` always return a new sequence.

## Installation

```
pip install .
```

With the test tools:

```
pip install .[test]
```

## Library use

```python
from seqlab.sequence import (
    MutableArraySequence,
    ImmutableArraySequence,
    MutableListSequence,
    ImmutableListSequence,
)

seq = MutableArraySequence([1, 2, 3, 4, 5])
seq.append(6)             # changes seq in place
seq.prepend(0)
seq.insert_at(999, 4)     # item first, then index
print(list(seq))          # [0, 1, 2, 3, 999, 4, 5, 6]
print(seq.first(), seq.last(), seq.get(2), seq[2], len(seq))

frozen = ImmutableListSequence([1, 2, 3])
longer = frozen.append(4) # frozen is unchanged
print(list(frozen), list(longer))   # [1, 2, 3] [1, 2, 3, 4]

# Both bounds are inclusive
print(list(longer.subsequence(0, 1)))   # [1, 2]
# concat accepts any iterable
print(list(longer.concat(frozen)))      # [1, 2, 3, 4, 1, 2, 3]
```

Every sequence supports `len()`, iteration, `seq[i]` / `seq.get(i)`,
`first()`, `last()`, `append(item)`, `prepend(item)`,
`insert_at(item, index)` (index from `0` to `len(seq)`),
`subsequence(start, end)`, `concat(other)` and `copy()`.

Errors:

- An index outside the sequence raises `IndexError`. Negative indices are not
  counted from the end; they are out of range. `first()` and `last()` on an
  empty sequence raise `IndexError`.
- For list-backed sequences, `subsequence(start, end)` with `end < start`
  raises `ValueError`. For array-backed sequences it returns an empty sequence.

The underlying containers can also be used on their own:

```python
from seqlab.dynamic_array import DynamicArray
from seqlab.linked_list import LinkedList

arr = DynamicArray.from_items([1, 2, 3])
arr.resize(5)             # new slots hold None
print(list(arr))          # [1, 2, 3, None, None]

lst = LinkedList([1, 2, 3])
lst.insert_at(10, 1)
print(list(lst.sublist(0, 2)))   # [1, 10, 2]
```

`DynamicArray(size)` raises `ValueError` for a negative size, and so does
`resize` given a negative size.

## Interactive console

```
seqlab
```

The console reads whitespace-separated integers from standard input. First
choose the kind of sequence to create:

1. Mutable array
2. Immutable array
3. Mutable list
4. Immutable list

Then choose actions from the menu:

1. Append a value
2. Prepend a value
3. Insert. Give the index first, then the value.
4. Get the element at an index
5. Take a subsequence from a start index to an end index, both inclusive
6. Concatenate with `1 2 3`
7. Show the sequence
8. Exit

Sequences are printed as their elements, each followed by a space. With an
immutable sequence each action prints the new sequence it produced, and the
sequence you started with stays the same.

The session ends at `8`, at the end of input, or at a token that is not an
integer. The exit status is `0` in those cases. It is `1` in two cases:

- the first choice is not 1 to 4
- an action fails. The error message is then printed to standard error.

## Limits

The sequences have no way to remove elements or replace them, and the console
keeps nothing between runs.