def leftmost_nonterminal(s: str, nonterminals) -> int | None:
    for pos, c in enumerate(s):
        if c in nonterminals:
            return pos
    return None

def is_terminal(s: str, nonterminals) -> bool:
    return leftmost_nonterminal(s, nonterminals) is None

def rewrite(s: str, pos: int, production: str) -> str:
    return s[:pos] + production + s[pos+1:]

def expand(s: str, pos: int, productions: list[str]):
    # One successor per alternative, in the order the grammar lists them.
    for production in productions:
        yield rewrite(s, pos, production)
