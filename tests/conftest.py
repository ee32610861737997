import json
from collections import Counter

import pytest


@pytest.fixture
def binary_rules():
    """Equal number of 0s and 1s; ambiguous from length 6 on."""
    return {
        "S": ["0A", "1B"],
        "A": ["0AA", "1S", "1"],
        "B": ["1BB", "0S", "0"],
    }


@pytest.fixture
def grammar_file(tmp_path, binary_rules):
    path = tmp_path / "grammar.json"
    path.write_text(json.dumps(binary_rules))
    return path


def brute_force_counts(rules, max_depth, start="S"):
    """Counts every leftmost derivation of at most `max_depth` rewrites by recursion."""
    counts = Counter()

    def walk(s, steps):
        pos = next((i for i, c in enumerate(s) if c in rules), None)
        if pos is None:
            counts[s] += 1
            return
        if steps == max_depth:
            return
        for production in rules[s[pos]]:
            walk(s[:pos] + production + s[pos + 1:], steps + 1)

    walk(start, 0)
    return dict(counts)


@pytest.fixture
def brute_force():
    return brute_force_counts
