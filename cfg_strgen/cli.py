import sys
import logging
import argparse

from cfg_strgen import config
from cfg_strgen.generator import cfg_string_generator, REPETITION_MODES, COUNT
from cfg_strgen.grammar_helpers import load_grammar, serialize_result, print_grammar, get_grammar_stats, unreachable_nonterminals
from cfg_strgen.derivations import format_derivation, find_mismatches
from cfg_strgen.check import check_strings
from cfg_strgen.report import results_to_frame, write_csv


def configure_logger(level: str, log_file_path: str = None):
    logging.basicConfig(level=level, format=config.log_format)

    if log_file_path:
        # Create a FileHandler to write logs to a file
        file_handler = logging.FileHandler(log_file_path, mode='w')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(config.log_format))
        logging.getLogger().addHandler(file_handler)

def print_strings(strings):
    for s in strings:
        print(s)
    print()

def print_derivations(derivations):
    for s, paths in derivations.items():
        print(f"{s} -> ")
        for path in paths:
            print(format_derivation(path))
        print()
    print()

def print_count(counts):
    for s, count in counts.items():
        print(f"{s} -> {count}")
    print()

def print_stats(rules):
    count_keys, count_rules, average_production_length, sum_production_lengths = get_grammar_stats(rules, config.start_symbol)
    print(f"nonterminals: {count_keys}, alternatives: {count_rules}, average production length: {average_production_length:.2f}, sum production lengths: {sum_production_lengths}")
    not_used = unreachable_nonterminals(rules, config.start_symbol)
    if not_used:
        print('[not_used]', ' '.join(sorted(not_used)))

def print_result(result, derivation: bool, repetition: str):
    if derivation:
        print_derivations(result)
    elif repetition == COUNT:
        print_count(result)
    else:
        print_strings(result)

def check_result(rules, result, derivation: bool) -> bool:
    '''
        Returns False if a generated string is rejected by the Earley parser or a
        derivation does not replay to its string.
    '''
    _, invalid = check_strings(rules, list(result), config.start_symbol)
    for inp in invalid:
        print(f"invalid: {inp!r}")
    mismatches = find_mismatches(result, rules, config.start_symbol) if derivation else []
    for s, path in mismatches:
        print(f"derivation does not replay to {s!r}: {format_derivation(path)}")
    print(f"checked {len(result)} strings: {len(invalid)} invalid, {len(mismatches)} bad derivations")
    return not invalid and not mismatches

def main(argv=None):
    parser = argparse.ArgumentParser(description='Enumerate the strings of a context-free grammar up to a maximum derivation depth.')
    parser.add_argument('--grammar', type=str, help='path to a JSON grammar mapping single character nonterminals to productions (default: built-in example)')
    parser.add_argument('--depth', type=int, default=config.default_max_depth, help='maximum derivation depth')
    parser.add_argument('--derivations', action='store_true', help='also output the derivations of every string')
    parser.add_argument('--repetition', choices=REPETITION_MODES, default=config.default_repetition, help='how strings reachable by several derivations are reported')
    parser.add_argument('--low-memory', dest='low_memory', action='store_true', help='record only the applied productions in derivations, not their positions')
    parser.add_argument('--check', action='store_true', help='parse every generated string with an Earley parser and replay every derivation')
    parser.add_argument('--stats', action='store_true', help='print grammar statistics before generating')
    parser.add_argument('--json', type=str, help='write the result as JSON to this path')
    parser.add_argument('--csv', type=str, help='write the result as a CSV table to this path')
    parser.add_argument('--log', type=str, help='also write the log to this path')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='-v for INFO, -vv for DEBUG logging')
    args = parser.parse_args(argv)

    level = {0: config.log_level, 1: "INFO"}.get(args.verbose, "DEBUG")
    configure_logger(level, args.log)

    if args.grammar:
        rules = load_grammar(args.grammar)
    else:
        rules = config.example_grammar
    if args.verbose:
        print_grammar("grammar", rules)
    if args.stats:
        print_stats(rules)
    if args.low_memory and not args.derivations:
        logging.warning("--low-memory has no effect without --derivations")
    if args.derivations and args.repetition == COUNT:
        logging.warning("--repetition count keeps every derivation when used with --derivations")

    result = cfg_string_generator(rules, args.depth, derivation=args.derivations, repetition=args.repetition, low_memory=args.low_memory)
    print_result(result, args.derivations, args.repetition)

    if args.json:
        serialize_result(result, args.json)
    if args.csv:
        write_csv(results_to_frame(result), args.csv)
    if args.check and not check_result(rules, result, args.derivations):
        sys.exit(1)

if __name__ == "__main__":
    main()
