"""Command line demonstration for the palindrome index.

Running the script builds an index for each built-in demo input, checks the
maximum palindrome length against the documented expectation and prints
every maximum-length window. The heavy lifting lives in
``algokit.strings.manacher``; this script only orchestrates fixed inputs and
emits human-readable status lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from algokit.strings.manacher import PalindromeIndex, build


@dataclass(frozen=True)
class DemoCase:
    """Container describing a demo input and its expected longest palindrome."""

    name: str
    text: str
    expected_max: int

    def build(self) -> PalindromeIndex:
        """Index the characters of this demo case."""

        return build(self.text)


def _iter_demo_cases() -> Iterator[DemoCase]:
    """Yield the built-in demonstration cases."""

    yield DemoCase(name="bananas", text="bananas", expected_max=5)
    yield DemoCase(name="abracadabra", text="abracadabra", expected_max=3)
    yield DemoCase(
        name="couplets",
        text="上海自来水来自海上A中山诸罗茶罗诸山中B山东落花生花落东山C花莲喷水池水喷莲花",
        expected_max=9,
    )


def _format_report(case: DemoCase, index: PalindromeIndex) -> List[str]:
    """Return formatted output lines for *case* and its *index*."""

    actual = index.max_palindrome_len()
    if actual != case.expected_max:
        raise RuntimeError(
            "Demo case expectation mismatch:"
            f" {case.name} expected {case.expected_max}"
            f" but received {actual}"
        )

    lines = [f"{case.name}: longest palindrome {actual} (expected: {case.expected_max})"]
    for window in index.iter_of_max():
        lines.append(
            f"  [{window.start}, {window.stop}) {case.text[window.start:window.stop]}"
        )
    return lines


def main() -> None:
    """Execute the demonstration flow for all configured cases."""

    for case in _iter_demo_cases():
        for line in _format_report(case, case.build()):
            print(line)
        print()


if __name__ == "__main__":
    main()
