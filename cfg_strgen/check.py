import logging

from fuzzingbook.Parser import IterativeEarleyParser, non_canonical
from fuzzingbook.GrammarFuzzer import tree_to_string

from cfg_strgen import config

START = "<start>"

def to_fuzzingbook_grammar(rules, start_symbol: str = config.start_symbol) -> dict[str, list[list[str]]]:
    '''
        Converts single character rules to a canonical fuzzingbook grammar,
        where each production is a list of tokens and nonterminal X becomes <X>.
        Terminals containing '<' or '>' could be read as nonterminals by
        fuzzingbook and are not supported.
    '''
    # A start symbol without rules is itself terminal.
    grammar = {START: [[f"<{start_symbol}>" if start_symbol in rules else start_symbol]]}
    for key, productions in rules.items():
        grammar[f"<{key}>"] = [[f"<{c}>" if c in rules else c for c in production] for production in productions]
    return grammar

def make_parser(rules, start_symbol: str = config.start_symbol):
    return IterativeEarleyParser(non_canonical(to_fuzzingbook_grammar(rules, start_symbol)), start_symbol=START)

def can_parse(parser, inp: str) -> bool:
    try:
        for tree in parser.parse(inp):
            if tree_to_string(tree) == inp:
                return True
            logging.info('Invalid match %s' % repr(inp))
    except SyntaxError:
        logging.info('Can not parse - syntax %s' % repr(inp))
    return False

def check_strings(rules, strings, start_symbol: str = config.start_symbol) -> tuple[list[str], list[str]]:
    parser = make_parser(rules, start_symbol)
    valid = []
    invalid = []
    for inp in strings:
        if can_parse(parser, inp):
            valid.append(inp)
        else:
            invalid.append(inp)
    logging.info(f"Membership ({len(valid)}/{len(valid)+len(invalid)})")
    return valid, invalid
