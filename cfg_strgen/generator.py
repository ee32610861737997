import logging
from collections import namedtuple

from cfg_strgen import config
from cfg_strgen.worklist import BOUNDARY, Worklist, SetWorklist, CountingWorklist, ConservativeMapWorklist, AdditiveMapWorklist
from cfg_strgen.collectors import UniqueCollector, ListCollector, CountCollector, DerivationCollector
from cfg_strgen.rewrite import leftmost_nonterminal, is_terminal, rewrite, expand

DISABLED = "disabled"
ENABLED = "enabled"
COUNT = "count"
REPETITION_MODES = (DISABLED, ENABLED, COUNT)


# Generates strings with a controlled queue: a BOUNDARY entry separates the
# strings of different depths, and the rewriting stops after `max_depth` rounds.
def gen_controlled_queue(rules, max_depth: int, worklist, collector):
    start = config.start_symbol
    worklist.add(start)

    for depth in range(1, max_depth+1):
        worklist.add(BOUNDARY)
        while True:
            s, count = worklist.take()
            if s is BOUNDARY:
                break
            pos = leftmost_nonterminal(s, rules)
            if pos is None:
                collector.add(s, count)
                continue
            # Successors inherit the multiplicity of the string they come from.
            for new_string in expand(s, pos, rules[s[pos]]):
                worklist.add(new_string, count)
        logging.debug(f"round {depth}/{max_depth} done, {len(worklist)} strings pending")

    # Depth exhausted: keep what is already terminal, drop partial strings.
    dropped = 0
    while len(worklist) != 0:
        s, count = worklist.take()
        if is_terminal(s, rules):
            collector.add(s, count)
        else:
            dropped += 1
    logging.debug(f"drained worklist, dropped {dropped} partial strings")

    return collector.result()


# Generates strings and their derivations with a free queue. The depth is
# bounded per derivation by its length instead of by global rounds.
def gen_free_queue(rules, max_depth: int, worklist, collector, low_memory: bool):
    start = config.start_symbol
    worklist.add(start, [()])

    while len(worklist) != 0:
        s, paths = worklist.take()
        pos = leftmost_nonterminal(s, rules)
        if pos is None:
            collector.add(s, paths)
            continue

        base = [path for path in paths if len(path) < max_depth]
        if not base:
            continue

        for production in rules[s[pos]]:
            record = production if low_memory else (pos, production)
            # Fresh tuples per alternative, siblings share no path state.
            worklist.add(rewrite(s, pos, production), [path + (record,) for path in base])

    return collector.result()


Strategy = namedtuple('Strategy', ['algorithm', 'worklist', 'collector'])

controlled_strategies = {
    DISABLED: Strategy(gen_controlled_queue, SetWorklist, UniqueCollector),
    ENABLED: Strategy(gen_controlled_queue, Worklist, ListCollector),
    COUNT: Strategy(gen_controlled_queue, CountingWorklist, CountCollector),
}

# Counting has no meaning for derivations; it keeps every derivation like ENABLED.
derivation_strategies = {
    DISABLED: Strategy(gen_free_queue, ConservativeMapWorklist, lambda: DerivationCollector(additive=False)),
    ENABLED: Strategy(gen_free_queue, AdditiveMapWorklist, lambda: DerivationCollector(additive=True)),
    COUNT: Strategy(gen_free_queue, AdditiveMapWorklist, lambda: DerivationCollector(additive=True)),
}

def select_strategy(derivation: bool, repetition: str) -> Strategy:
    if repetition not in REPETITION_MODES:
        raise ValueError(f"unknown repetition mode {repetition!r}, expected one of {REPETITION_MODES}")
    if derivation:
        return derivation_strategies[repetition]
    return controlled_strategies[repetition]


def cfg_string_generator(rules, max_depth: int, derivation: bool = False, repetition: str = DISABLED, low_memory: bool = False):
    '''
        The switches modify the behavior of the generator as follows:

        * derivation: store derivations. If disabled, a container with the generated
          strings is returned; if enabled, a dict mapping each generated string to a
          list of derivations, each derivation a list of rewrite records.

        * repetition: how repeated strings (ambiguous grammars) are handled.
          DISABLED returns a set, ENABLED a list with duplicates, COUNT a dict of
          string to number of derivations. With derivations, DISABLED keeps one
          derivation per string, ENABLED and COUNT keep all of them.

        * low_memory: records only the applied production instead of
          (position, production). Only relevant with derivations.

        `rules` maps single character nonterminals to their productions and must
        contain the start symbol 'S'. `max_depth` bounds the number of rewrites;
        generation is exponential in it.
    '''
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")
    strategy = select_strategy(derivation, repetition)
    logging.info(f"generating with {strategy.algorithm.__name__}, {strategy.worklist.__name__}, max_depth={max_depth}")

    worklist = strategy.worklist()
    collector = strategy.collector()
    if derivation:
        result = strategy.algorithm(rules, max_depth, worklist, collector, low_memory)
    else:
        result = strategy.algorithm(rules, max_depth, worklist, collector)
    logging.info(f"generated {len(result)} strings")
    return result
