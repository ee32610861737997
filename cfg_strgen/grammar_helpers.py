import json

from cfg_strgen import config

####### <json load helpers> ##########

def load_json_file(file_path):
    with open(file_path, 'r') as file:
        return json.load(file)

# A grammar file is a JSON object mapping each nonterminal to its productions:
#   {"S": ["0A", "1B"], "A": ["0AA", "1S", "1"], "B": ["1BB", "0S", "0"]}
def load_grammar(path) -> dict[str, list[str]]:
    return load_json_file(path)

def to_serializable(result):
    if isinstance(result, set):
        return sorted(result)
    return result

def serialize_result(result, path):
    with open(path, 'w') as f:
        json.dump(to_serializable(result), f, indent=1)
    print(f"Wrote {len(result)} strings to {path}")

def print_grammar(name, rules):
    print(f"{name}:")
    print(json.dumps(rules, indent=1))

####### </json load helpers> ##########

####### <grammar helpers> ##########

def reachable_nonterminals(rules, start_symbol: str = config.start_symbol) -> set[str]:
    reachable = set()

    def _find_reachable_nonterminals(rules, symbol):
        nonlocal reachable
        reachable.add(symbol)
        for production in rules[symbol]:
            for c in production:
                if c in rules:
                    if c not in reachable:
                        _find_reachable_nonterminals(rules, c)

    if start_symbol in rules:
        _find_reachable_nonterminals(rules, start_symbol)
    return reachable

# Dead entries; the generator never rewrites them.
def unreachable_nonterminals(rules, start_symbol: str = config.start_symbol) -> set[str]:
    return rules.keys() - reachable_nonterminals(rules, start_symbol)

def get_grammar_stats(rules, start_symbol: str = config.start_symbol) -> tuple[int, int, float, int]:
    count_keys = 0
    production_lengths = []
    for key in sorted(reachable_nonterminals(rules, start_symbol)):
        count_keys += 1
        for production in rules[key]:
            production_lengths.append(len(production))

    count_rules = len(production_lengths)
    sum_production_lengths = sum(production_lengths)
    average_production_length = sum_production_lengths / count_rules if count_rules else 0.0
    return count_keys, count_rules, average_production_length, sum_production_lengths

####### </grammar helpers> ##########
