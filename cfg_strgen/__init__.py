from cfg_strgen.generator import cfg_string_generator, DISABLED, ENABLED, COUNT, REPETITION_MODES
from cfg_strgen.worklist import EmptyWorklistError, BOUNDARY
from cfg_strgen.derivations import replay, format_derivation

__version__ = "0.1.0"
