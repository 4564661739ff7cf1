"""Linear-time exact palindrome index (Manacher's algorithm).

The index is built once over an immutable sequence of equatable tokens and
answers palindrome queries without touching the sequence again:

* ``max_palindrome_len`` – length of the longest palindromic window.
* ``odd_longest_at`` / ``even_longest_at`` – maximal palindrome around a
  single element or between two adjacent elements.
* ``is_palindrome`` – O(1) test for an arbitrary half-open range.
* ``iter_of_len`` / ``iter_of_max`` – lazy enumeration of every window of a
  given length reported by a palindrome center.

Odd and even palindromes share one code path by viewing a length-``n``
sequence as ``2n + 1`` transformed positions where even positions are
virtual separators (``"abc"`` behaves like ``"#a#b#c#"``). The transformed
view is a pure index mapping; the only stored state is the radius table.

All ranges use original sequence coordinates and are returned as half-open
``range`` objects.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
import argparse
import csv
import json
import logging
from pathlib import Path
import random
import sys
import time
from typing import Any, Generic, List, Tuple, TypeVar

from rich.console import Console
from rich.table import Table

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "SEPARATOR",
    "CenterOutOfRangeError",
    "Char",
    "ConstructionProfile",
    "Manacher",
    "PalindromeIndex",
    "Separator",
    "TransformedView",
    "build",
    "compute_radii",
    "longest_palindromic_substring",
    "main",
    "profile_construction",
    "source_to_transformed",
    "transformed_to_source",
    "write_profiles_to_csv",
]


class CenterOutOfRangeError(IndexError):
    """Raised when a query addresses a center outside the indexed sequence."""


class Separator:
    """Virtual separator placed between and around the original elements."""

    __slots__ = ()
    _instance: "Separator | None" = None

    def __new__(cls) -> "Separator":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SEPARATOR"


SEPARATOR = Separator()


@dataclass(frozen=True)
class Char(Generic[T]):
    """An original element seen through the transformed view."""

    value: T


def source_to_transformed(si: int) -> int:
    """Map source index *si* to the transformed index of its element."""

    return 2 * si + 1


def transformed_to_source(ti: int) -> int:
    """Map odd transformed index *ti* back to its source index."""

    return (ti - 1) // 2


class TransformedView(Generic[T]):
    """Read-only ``2n + 1`` view of *sequence* with interleaved separators."""

    __slots__ = ("_source", "_length")

    def __init__(self, sequence: Sequence[T]) -> None:
        self._source = sequence
        self._length = 2 * len(sequence) + 1

    def __len__(self) -> int:
        return self._length

    def get(self, ti: int) -> "Separator | Char[T]":
        """Return ``SEPARATOR`` for even *ti*, else the wrapped element."""

        self._check_index(ti)
        if ti % 2 == 0:
            return SEPARATOR
        return Char(self._source[transformed_to_source(ti)])

    __getitem__ = get

    def is_equal(self, ti: int, tj: int) -> bool:
        """Compare two transformed positions without allocating wrappers."""

        self._check_index(ti)
        self._check_index(tj)
        if ti % 2 != tj % 2:
            return False
        if ti % 2 == 0:
            return True
        return bool(
            self._source[transformed_to_source(ti)]
            == self._source[transformed_to_source(tj)]
        )

    def _check_index(self, ti: int) -> None:
        if not 0 <= ti < self._length:
            raise IndexError(
                f"transformed index {ti} outside [0, {self._length})"
            )


def _as_sequence(sequence: Iterable[T]) -> Sequence[T]:
    if isinstance(sequence, Sequence):
        return sequence
    if not isinstance(sequence, Iterable):
        raise TypeError("sequence must be an iterable of equatable elements")
    return tuple(sequence)


def compute_radii(sequence: Iterable[T]) -> Tuple[int, ...]:
    """Return the radius table for *sequence* in amortised linear time.

    ``radii[ti]`` is the largest ``d`` such that the transformed window
    ``[ti - d, ti + d]`` is a palindrome. Read in original elements, it is
    the length of the maximal palindrome centered at ``ti``.

    Parameters
    ----------
    sequence:
        Tokens supporting ``==``. Sequences are read in place; any other
        iterable is copied into a local tuple for the duration of the call.

    Raises
    ------
    TypeError
        If *sequence* is not iterable.

    Returns
    -------
    tuple of int
        ``2n + 1`` radii with ``radii[0] == 0`` and every value in ``[0, n]``.
    """

    source = _as_sequence(sequence)
    view = TransformedView(source)
    t_len = len(view)
    radii: List[int] = [0] * t_len
    # [2 * center - right, right] is the right-most reaching palindrome so far.
    center = right = 0
    for i in range(1, t_len):
        if i >= right:
            offset = 1
        else:
            # Offsets up to min(...) are certified by the mirror; probe beyond.
            offset = min(radii[2 * center - i], right - i) + 1
        while (
            offset <= i
            and i + offset < t_len
            and view.is_equal(i + offset, i - offset)
        ):
            offset += 1
        radius = offset - 1
        radii[i] = radius
        if i + radius > right:
            center, right = i, i + radius
    return tuple(radii)


def _validate_int(value: Any, label: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{label} must be an integer")


class PalindromeIndex:
    """Immutable palindrome index over a sequence of equatable tokens.

    The sequence is only read during construction and is not retained, so
    queries are safe to issue from multiple threads.

    Parameters
    ----------
    sequence:
        Tokens supporting ``==``: a ``str``, ``bytes``, list, tuple or any
        other iterable. Empty input is supported and yields an index whose
        maximum palindrome length is ``0``.

    Raises
    ------
    TypeError
        If *sequence* is not iterable.
    """

    __slots__ = ("_radii", "_length", "_max_len")

    def __init__(self, sequence: Iterable[Any]) -> None:
        self._radii = compute_radii(sequence)
        self._length = (len(self._radii) - 1) // 2
        self._max_len = max(self._radii)
        logger.debug(
            "Built palindrome index: length=%d max_palindrome_len=%d",
            self._length,
            self._max_len,
        )

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(length={self._length}, "
            f"max_palindrome_len={self._max_len})"
        )

    @property
    def radii(self) -> Tuple[int, ...]:
        """The radius table, one entry per transformed position."""

        return self._radii

    @property
    def sequence_length(self) -> int:
        return self._length

    def max_palindrome_len(self) -> int:
        """Return the length of the longest palindromic window (0 if empty)."""

        return self._max_len

    def odd_longest_at(self, si: int) -> range:
        """Return the maximal odd-length palindrome centered on element *si*."""

        _validate_int(si, "si")
        if not 0 <= si < self._length:
            raise CenterOutOfRangeError(
                f"center {si} outside sequence of length {self._length}"
            )
        rad = self._radii[source_to_transformed(si)] // 2
        return range(si - rad, si + rad + 1)

    def even_longest_at(self, si: int, next_si: int) -> range:
        """Return the maximal even-length palindrome centered between
        elements *si* and *next_si* (which must be ``si + 1``).
        """

        _validate_int(si, "si")
        _validate_int(next_si, "next_si")
        if next_si != si + 1:
            raise CenterOutOfRangeError(
                f"even center requires adjacent indices, got {si} and {next_si}"
            )
        if not 0 <= si < next_si < self._length:
            raise CenterOutOfRangeError(
                f"center ({si}, {next_si}) outside sequence of length {self._length}"
            )
        rad = self._radii[source_to_transformed(si) + 1] // 2
        return range(next_si - rad, next_si + rad)

    def is_palindrome(self, lo: int, hi: int) -> bool:
        """Return ``True`` when ``sequence[lo:hi]`` reads the same reversed."""

        _validate_int(lo, "lo")
        _validate_int(hi, "hi")
        if lo >= hi:
            return True
        if lo < 0 or hi > self._length:
            raise CenterOutOfRangeError(
                f"range [{lo}, {hi}) outside sequence of length {self._length}"
            )
        size = hi - lo
        if size % 2 == 0:
            middle = lo + size // 2 - 1
            window = self.even_longest_at(middle, middle + 1)
        else:
            window = self.odd_longest_at(lo + size // 2)
        return len(window) >= size

    def iter_of_len(self, length: int) -> Iterator[range]:
        """Lazily yield every palindromic window of exactly *length*.

        One window is produced per center whose maximal palindrome is at
        least *length* long and of the same parity, ordered by start index.
        A zero *length* yields nothing.
        """

        _validate_int(length, "length")
        if length < 0:
            raise ValueError("length must be non-negative")
        return self._windows(length)

    def iter_of_max(self) -> Iterator[range]:
        """Lazily yield every maximum-length palindromic window."""

        return self.iter_of_len(self._max_len)

    def longest(self) -> range:
        """Return the leftmost longest palindromic window."""

        return next(self.iter_of_max(), range(0, 0))

    def _windows(self, length: int) -> Iterator[range]:
        if length == 0:
            return
        parity = length % 2
        for ti, radius in enumerate(self._radii):
            if radius >= length and radius % 2 == parity:
                start = transformed_to_source(ti + 1 - length)
                yield range(start, start + length)


Manacher = PalindromeIndex


def build(sequence: Iterable[Any]) -> PalindromeIndex:
    """Build a :class:`PalindromeIndex` over *sequence*."""

    return PalindromeIndex(sequence)


def longest_palindromic_substring(sequence: Sequence[T]) -> Sequence[T]:
    """Return the leftmost longest palindromic slice of *sequence*."""

    window = build(sequence).longest()
    return sequence[window.start : window.stop]


# ----------------------------------------------------------------------
# Profiling helpers
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class ConstructionProfile:
    """Timing captured while building an index over a random input."""

    length: int
    time_seconds: float
    max_palindrome_len: int

    def to_row(self) -> List[str]:
        return [
            str(self.length),
            f"{self.time_seconds:.9f}",
            str(self.max_palindrome_len),
        ]


def profile_construction(
    lengths: Iterable[int], *, alphabet: str = "ab", seed: int = 13
) -> List[ConstructionProfile]:
    """Time index construction over random inputs of each requested length.

    A small alphabet keeps many long palindromes in play, which exercises
    the mirror reuse that keeps construction linear.
    """

    if not alphabet:
        raise ValueError("alphabet must not be empty")
    rng = random.Random(seed)
    profiles: List[ConstructionProfile] = []
    for length in lengths:
        _validate_int(length, "length")
        if length < 0:
            raise ValueError("length must be non-negative")
        text = "".join(rng.choices(alphabet, k=length))
        start = time.perf_counter()
        index = build(text)
        elapsed = time.perf_counter() - start
        logger.debug("Built index of length %d in %.6fs", length, elapsed)
        profiles.append(
            ConstructionProfile(
                length=length,
                time_seconds=elapsed,
                max_palindrome_len=index.max_palindrome_len(),
            )
        )
    return profiles


def write_profiles_to_csv(
    path: Path, profiles: Iterable[ConstructionProfile], *, newline: str = ""
) -> None:
    """Persist construction profiles to ``path`` using a fixed header."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline=newline) as handle:
        writer = csv.writer(handle)
        writer.writerow(["length", "time_seconds", "max_palindrome_len"])
        for profile in profiles:
            writer.writerow(profile.to_row())


# ----------------------------------------------------------------------
# Command line interface
# ----------------------------------------------------------------------
def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value, 10)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Length must be an integer") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("Length must be non-negative")
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Report the palindromic windows of a piece of text.",
    )
    parser.add_argument("text", help="Text to index, one token per character.")
    parser.add_argument(
        "--length",
        type=_non_negative_int,
        default=None,
        help="Window length to enumerate. Defaults to the maximum palindrome length.",
    )
    parser.add_argument(
        "--output-format",
        choices={"json", "text"},
        default="text",
        help="Select whether to print a table or a JSON payload.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices={"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
        help="Configure logging verbosity for troubleshooting.",
    )
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING))


def _render_table(text: str, length: int, windows: Sequence[range]) -> None:
    table = Table(title=f"Palindromes of length {length}")
    table.add_column("Start", justify="right")
    table.add_column("Stop", justify="right")
    table.add_column("Value", justify="left")
    for window in windows:
        table.add_row(
            str(window.start), str(window.stop), text[window.start : window.stop]
        )
    Console().print(table)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    index = build(args.text)
    length = index.max_palindrome_len() if args.length is None else args.length
    windows = list(index.iter_of_len(length))
    logger.info("Found %d windows of length %d", len(windows), length)

    if args.output_format == "json":
        payload = {
            "length": length,
            "max_palindrome_len": index.max_palindrome_len(),
            "windows": [[window.start, window.stop] for window in windows],
            "values": [args.text[window.start : window.stop] for window in windows],
        }
        print(json.dumps(payload, ensure_ascii=False))
    else:
        print(f"Maximum palindrome length: {index.max_palindrome_len()}")
        _render_table(args.text, length, windows)
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via CLI
    sys.exit(main())
