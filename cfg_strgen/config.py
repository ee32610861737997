# Defaults for the generator and the command line driver.

###############################################
################# Generation ##################
###############################################

start_symbol = 'S'

# A depth of 0 means no rewrite has been made, a depth of 1 means every
# alternative of the leftmost nonterminal of the start symbol was applied once.
default_max_depth = 6

default_repetition = "disabled"

# Used when no grammar file is supplied.
example_grammar = {
    "S": ["0A", "1B"],
    "A": ["0AA", "1S", "1"],
    "B": ["1BB", "0S", "0"],
}

###############################################
################### Logging ###################
###############################################

log_level = "WARNING"
log_format = '%(asctime)s - %(levelname)s - %(message)s'
