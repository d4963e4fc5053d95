"""
Pacing constants for word splitting, pivot alignment and delay policies.

Layout constants here are the library defaults; engines read their
effective values from :class:`textspritzer.config.PacerSettings`.
"""

# -----------------------------------------------------------------------------
# Layout
# -----------------------------------------------------------------------------

# Longest segment shown in a single tick before a word is split
MAX_WORD_LENGTH = 13

# Columns to the left of the pivot character
CHARS_LEFT_OF_PIVOT = 3

# Characters a long word prefers to split after
SPLIT_CHARACTERS = ('-', '.')

# Marker appended to a head segment that was cut mid-word
SPLIT_MARKER = '-'

# -----------------------------------------------------------------------------
# Pacing
# -----------------------------------------------------------------------------

MS_PER_MINUTE = 60_000

# -----------------------------------------------------------------------------
# Punctuation
# -----------------------------------------------------------------------------

# Major pause punctuation
MAJOR_PAUSE_PUNCTUATION = {'.', '!', '?', ':'}

# Minor pause punctuation
MINOR_PAUSE_PUNCTUATION = {',', ';', '\u2014', '\u2013'}  # em dash, en dash

ELLIPSIS_STRINGS = {"...", "\u2026"}  # \u2026 = …

# -----------------------------------------------------------------------------
# Delay multipliers (integer multiples of the base inter-word delay)
# -----------------------------------------------------------------------------

MAJOR_PAUSE_MULTIPLIER = 3
MINOR_PAUSE_MULTIPLIER = 2

# Long words get one extra base delay on top of any punctuation pause
LONG_WORD_THRESHOLD = 10
LONG_WORD_EXTRA = 1

# -----------------------------------------------------------------------------
# Brackets and Quotes
# -----------------------------------------------------------------------------

BRACKET_OPENERS = {'(', '[', '{'}
BRACKET_CLOSERS = {')', ']', '}'}

OPENING_QUOTES = {
    '"',        # ASCII double quote
    "'",        # ASCII single quote
    '\u201e',   # „ double low-9 quotation mark
    '\u00ab',   # « left-pointing double angle quotation mark
    '\u2018',   # ' left single quotation mark
    '\u201c',   # " left double quotation mark
}

CLOSING_QUOTES = {
    '"',        # ASCII double quote
    "'",        # ASCII single quote
    '\u201d',   # " right double quotation mark
    '\u00bb',   # » right-pointing double angle quotation mark
    '\u2019',   # ' right single quotation mark
}

ALL_QUOTES = OPENING_QUOTES | CLOSING_QUOTES

# Characters to ignore when looking for terminal punctuation
TRAILING_CLOSERS = CLOSING_QUOTES | BRACKET_CLOSERS

# -----------------------------------------------------------------------------
# Abbreviations
# -----------------------------------------------------------------------------

# Abbreviations whose period should not get a full sentence pause
# Stored lowercase for case-insensitive matching
ABBREVIATIONS = {
    # Titles
    'mr', 'mrs', 'ms', 'dr', 'prof', 'sr', 'jr',
    # Common
    'vs', 'etc', 'inc', 'ltd', 'dept', 'est', 'vol', 'rev',
    # Months
    'jan', 'feb', 'mar', 'apr', 'jun', 'jul', 'aug', 'sep', 'oct', 'nov', 'dec',
    # Ordinals and addresses
    'st', 'nd', 'rd', 'th', 'ave',
    # Latin abbreviations
    'e.g', 'i.e', 'cf', 'al', 'approx', 'fig', 'no',
}
