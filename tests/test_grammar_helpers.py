import json

from cfg_strgen.grammar_helpers import (
    load_grammar, serialize_result, reachable_nonterminals, unreachable_nonterminals, get_grammar_stats,
)


def test_load_grammar(grammar_file, binary_rules):
    assert load_grammar(grammar_file) == binary_rules


def test_serialize_result_sorts_sets(tmp_path, capsys):
    path = tmp_path / "out.json"
    serialize_result({"10", "01"}, path)
    assert json.loads(path.read_text()) == ["01", "10"]
    assert "Wrote 2 strings" in capsys.readouterr().out


def test_serialize_derivations(tmp_path):
    path = tmp_path / "out.json"
    serialize_result({"01": [[(0, "0A"), (1, "1")]]}, path)
    assert json.loads(path.read_text()) == {"01": [[[0, "0A"], [1, "1"]]]}


def test_unreachable_nonterminals(binary_rules):
    rules = {**binary_rules, "Z": ["z"]}
    assert reachable_nonterminals(rules) == {"S", "A", "B"}
    assert unreachable_nonterminals(rules) == {"Z"}
    assert unreachable_nonterminals(binary_rules) == set()


def test_grammar_stats_ignore_unreachable(binary_rules):
    rules = {**binary_rules, "Z": ["zzzz"]}
    count_keys, count_rules, average, total = get_grammar_stats(rules)
    assert (count_keys, count_rules, total) == (3, 8, 16)
    assert average == 2.0


def test_grammar_stats_without_start_symbol():
    assert get_grammar_stats({"A": ["a"]}) == (0, 0, 0.0, 0)
