"""
Which words deserve a lookup affordance in the reader.

Display-side only: the structurer keeps every word, and clients use these
helpers to decide what to make tappable.
"""

import re

# common English function words that don't need translation
STOP_WORDS = frozenset({
    # articles
    "a", "an", "the",
    # pronouns
    "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
    "my", "your", "his", "its", "our", "their", "mine", "yours", "ours", "theirs",
    "this", "that", "these", "those",
    # prepositions
    "in", "on", "at", "to", "for", "with", "by", "from", "of", "about",
    "into", "through", "during", "before", "after", "above", "below",
    "between", "under", "again", "further", "then", "once",
    # conjunctions
    "and", "but", "or", "nor", "so", "yet", "both", "either", "neither",
    "not", "only", "if", "when", "while", "although", "because", "unless",
    # be / have / do
    "be", "is", "am", "are", "was", "were", "been", "being",
    "have", "has", "had", "having",
    "do", "does", "did", "doing", "done",
    # modals
    "can", "could", "will", "would", "shall", "should", "may", "might", "must",
    # common verbs
    "get", "got", "go", "went", "gone", "make", "made",
    # others
    "as", "than", "such", "no", "yes", "very", "just", "also", "too",
    "here", "there", "where", "how", "what", "who", "which", "why", "all",
    "each", "every", "any", "some", "most", "other", "own", "same", "few",
    "more", "now", "over", "up", "down", "out",
})

_PUNCT = re.compile(r"[.,!?;:'\"()\[\]{}]")


def is_stop_word(word: str) -> bool:
    return word.lower() in STOP_WORDS


def clean_word(word: str) -> str:
    return _PUNCT.sub("", word).strip()


def should_show_word_meaning(word: str) -> bool:
    cleaned = clean_word(word)
    if len(cleaned) < 2:
        return False
    if is_stop_word(cleaned):
        return False
    if re.fullmatch(r"[0-9]+", cleaned):
        return False
    return True
