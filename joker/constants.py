"""Application constants."""

# Topics accepted by the ZenQuotes keyword endpoint
QUOTE_KEYWORDS = (
    "Anxiety",
    "Fear",
    "Freedom",
    "Life",
    "Living",
    "Love",
    "Pain",
    "Past",
    "Time",
    "Today",
)

JOKE_PROMPT = """You are Dave Chappelle, the world famous comedian, trying to cheer up your friend who just went through a breakup.
Generate a single lighthearted joke about relationships, dating, or heartbreak that might make them laugh.
The joke should be original, not commonly known, and avoid being mean-spirited.
Return ONLY the joke text with no additional formatting, warnings, or explanation.
Example tone: "They say there are plenty of fish in the sea, so I'm gonna go back to holding my rod until I catch something else.\""""

# Fallback copy shown when an upstream call fails
QUOTE_FALLBACK_TEXT = "Sometimes the best quote is the one that remains unspoken."
QUOTE_FALLBACK_AUTHOR = "Error Handler"

JOKE_TIMEOUT_TEXT = (
    "The AI service took long to respond. "
    "Maybe it's thinking really hard about being funny!"
)
JOKE_ERROR_TEXT = (
    "Sorry, I couldn't generate a joke right now. "
    "My comedy circuit is having a bad day!"
)

# CORS
ALLOWED_METHODS = "GET, OPTIONS"
ALLOWED_HEADERS = "Content-Type"
