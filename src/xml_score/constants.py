"""Central constants for the xml_score project."""

# Tag whose text values are summed, and where the sum ends up.
DEFAULT_SCORE_TAG = "Score"
DEFAULT_TARGET_PATH = ("Response", "ResultBlock", "MatchSummary")
DEFAULT_RESULT_KEY = "TotalMatchScore"

# Width of the accumulator; the sum must fit a signed integer of this size.
DEFAULT_INT_BITS = 32

INDENT_FACTOR = 4

# Mapping convention markers. Neither character can start an XML name, so
# they never collide with element tags.
ATTR_PREFIX = "@"
TEXT_KEY = "#text"

FILE_ENCODING = "utf-8"
