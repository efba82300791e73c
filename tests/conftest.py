from pathlib import Path
from typing import List, Tuple

TESTDATA = Path(__file__).resolve().parent / "testdata"


def read_lines(name: str) -> List[str]:
    text = (TESTDATA / name).read_text(encoding="utf-8")
    return [line for line in text.splitlines() if line]


def read_cases(name: str) -> List[Tuple[str, str]]:
    """Rows of `input;expected` from tests/testdata/<name>."""
    cases = []
    for line in read_lines(name):
        value, _, expected = line.partition(";")
        cases.append((value, expected))
    return cases
