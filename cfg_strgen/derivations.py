from cfg_strgen import config
from cfg_strgen.rewrite import leftmost_nonterminal, rewrite

def replay(derivation, rules, start: str = config.start_symbol) -> str:
    '''
        Applies the rewrite records of `derivation` to `start` and returns the
        resulting string. A record is either (position, production) or, for
        low memory derivations, just the production, which then replaces the
        leftmost nonterminal.
    '''
    s = start
    for record in derivation:
        if isinstance(record, str):
            pos = leftmost_nonterminal(s, rules)
            if pos is None:
                raise ValueError(f"no nonterminal left in {s!r} to apply {record!r}")
            production = record
        else:
            pos, production = record
        s = rewrite(s, pos, production)
    return s

def format_record(record) -> str:
    if isinstance(record, str):
        return f"({record})"
    pos, production = record
    return f"({pos}, {production})"

def format_derivation(derivation) -> str:
    return ', '.join(format_record(record) for record in derivation)

# Returns (string, derivation) pairs that do not replay to their string.
def find_mismatches(derivations: dict, rules, start: str = config.start_symbol) -> list:
    mismatches = []
    for s, paths in derivations.items():
        for path in paths:
            if replay(path, rules, start) != s:
                mismatches.append((s, path))
    return mismatches
