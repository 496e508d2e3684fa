"""Interactive console for trying out the sequence types."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import Any, TextIO

from .sequence import (
    ImmutableArraySequence,
    ImmutableListSequence,
    MutableArraySequence,
    MutableListSequence,
    Sequence,
)

CHOICES_MENU = (
    "Choose sequence to create:\n"
    "1. Mutable array\n"
    "2. Immutable array\n"
    "3. Mutable list\n"
    "4. Immutable list\n"
)

ACTIONS_MENU = (
    "1. Append\n"
    "2. Prepend\n"
    "3. Insert\n"
    "4. Get\n"
    "5. GetSubSequence\n"
    "6. Concat with 1,2,3\n"
    "7. Output\n"
    "8. Exit\n"
)

_SEQUENCE_TYPES: dict[int, type[Sequence]] = {
    1: MutableArraySequence,
    2: ImmutableArraySequence,
    3: MutableListSequence,
    4: ImmutableListSequence,
}

_CONCAT_VALUES = (1, 2, 3)
_EXIT = 8


class _EndOfInput(Exception):
    """Raised when the input runs out or holds something that is not an integer."""


def format_sequence(seq: Iterable[Any]) -> str:
    """Render the elements of ``seq``, each followed by a single space."""
    return "".join(f"{item} " for item in seq)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise _EndOfInput
    try:
        return int(token)
    except ValueError:
        raise _EndOfInput from None


def _run_action(
    choice: int,
    seq: Sequence,
    concat_with: Sequence,
    tokens: Iterator[str],
    out: TextIO,
) -> None:
    if choice == 1:
        out.write("Enter value to append: ")
        value = _read_int(tokens)
        out.write(format_sequence(seq.append(value)) + "\n")
    elif choice == 2:
        out.write("Enter value to prepend: ")
        value = _read_int(tokens)
        out.write(format_sequence(seq.prepend(value)) + "\n")
    elif choice == 3:
        out.write("Enter pair index/value to insert: ")
        index = _read_int(tokens)
        value = _read_int(tokens)
        out.write(format_sequence(seq.insert_at(value, index)) + "\n")
    elif choice == 4:
        out.write("Enter index to get: ")
        index = _read_int(tokens)
        out.write(f"{seq.get(index)}\n")
    elif choice == 5:
        out.write("Enter start, end indexes to getSubsequence: ")
        start = _read_int(tokens)
        end = _read_int(tokens)
        out.write(format_sequence(seq.subsequence(start, end)) + "\n")
    elif choice == 6:
        out.write(format_sequence(seq.concat(concat_with)) + "\n")
    elif choice == 7:
        out.write(format_sequence(seq) + "\n")
    else:
        out.write("Unknown choice.\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive session on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="seqlab",
        description="Interactively build and inspect a sequence.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    tokens = _tokens(sys.stdin)

    out.write(CHOICES_MENU)
    try:
        seq_type = _SEQUENCE_TYPES.get(_read_int(tokens))
    except _EndOfInput:
        seq_type = None
    if seq_type is None:
        return 1

    seq = seq_type()
    concat_with = seq_type(_CONCAT_VALUES)

    out.write(ACTIONS_MENU)
    try:
        while True:
            choice = _read_int(tokens)
            if choice == _EXIT:
                break
            _run_action(choice, seq, concat_with, tokens, out)
            out.write(ACTIONS_MENU)
    except _EndOfInput:
        pass
    except (IndexError, ValueError) as exc:
        out.flush()
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())