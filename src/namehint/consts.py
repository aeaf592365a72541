"""High-value constants for the namehint package."""

# Package metadata
PACKAGE_VERSION = "0.3.0"
SERVER_NAME = "namehint"
LOGGER_NAME = "namehint"

# Jaro-Winkler (fixed for compatibility with reference outputs)
JARO_WINKLER_PREFIX_CAP = 4
JARO_WINKLER_SCALING = 0.1

# Composite score weights
WEIGHT_JARO_WINKLER = 0.5
WEIGHT_JACCARD = 0.3
WEIGHT_CONTAINMENT = 0.1
WEIGHT_PREFIX = 0.1

# Prefix bonus and length penalty
MAX_PREFIX_BONUS = 4
PENALTY_PER_CHAR = 0.01
MAX_LENGTH_PENALTY = 0.15

# Ranking
MIN_SIMILARITY_SCORE = 0.35
LONG_INPUT_MIN_SCORE = 0.33
LONG_INPUT_LENGTH = 10  # inputs at least this long use LONG_INPUT_MIN_SCORE
MAX_SUGGESTIONS = 5

# Messages
NO_SUGGESTIONS_MESSAGE = "No similar suggestions found."
DID_YOU_MEAN_PREFIX = "Did you mean"

# Files that can be imported as a module, in lookup order
MODULE_EXTENSIONS = (".py", ".pyi", ".pyx", ".so", ".pyd")
# Compiled extension modules; their file names carry extra tags
EXTENSION_MODULE_SUFFIXES = (".so", ".pyd")
