"""Fixed Codeforces tag vocabulary and free-text topic resolution."""

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from loguru import logger

CODEFORCES_TAGS: tuple[str, ...] = (
    "combine-tags-by-or",
    "2-sat",
    "binary search",
    "bitmasks",
    "brute force",
    "chinese remainder theorem",
    "combinatorics",
    "constructive algorithms",
    "data structures",
    "dfs and similar",
    "divide and conquer",
    "dp",
    "dsu",
    "expression parsing",
    "fft",
    "flows",
    "games",
    "geometry",
    "graph matchings",
    "graphs",
    "greedy",
    "hashing",
    "implementation",
    "interactive",
    "math",
    "matrices",
    "meet-in-the-middle",
    "number theory",
    "probabilities",
    "schedules",
    "shortest paths",
    "sortings",
    "string suffix structures",
    "strings",
    "ternary search",
    "trees",
    "two pointers",
)

NGRAM_SIZE = 2


def ngrams(text: str, size: int = NGRAM_SIZE) -> Counter[str]:
    """Bag of overlapping character n-grams of ``text`` (lowercased)."""
    lowered = text.lower()
    return Counter(lowered[i : i + size] for i in range(len(lowered) - size + 1))


def similarity(left: str, right: str, size: int = NGRAM_SIZE) -> float:
    """Multiset Jaccard similarity of the character n-grams of two strings."""
    left_grams = ngrams(left, size)
    right_grams = ngrams(right, size)
    union = sum((left_grams | right_grams).values())
    if union == 0:
        return 0.0
    return sum((left_grams & right_grams).values()) / union


class TagResolver:
    """Resolve user-typed topics to entries of a closed tag vocabulary.

    A case-insensitive exact match wins outright. Otherwise the entry with
    the highest n-gram similarity is chosen. Equal scores are broken by
    vocabulary order: the earliest entry wins. Every topic resolves to
    some tag, so nonsense input still maps to a vocabulary entry.
    """

    def __init__(self, vocabulary: Iterable[str] = CODEFORCES_TAGS, ngram_size: int = NGRAM_SIZE):
        self.vocabulary = tuple(vocabulary)
        if not self.vocabulary:
            raise ValueError("Tag vocabulary must not be empty")
        self.ngram_size = ngram_size
        self._by_lower = {}
        for tag in self.vocabulary:
            self._by_lower.setdefault(tag.lower(), tag)

    def resolve_one(self, topic: str) -> str:
        exact = self._by_lower.get(topic.lower())
        if exact is not None:
            return exact

        best_tag = self.vocabulary[0]
        best_score = -1.0
        for tag in self.vocabulary:
            score = similarity(topic, tag, self.ngram_size)
            # Strict comparison keeps the first entry on ties.
            if score > best_score:
                best_tag, best_score = tag, score

        logger.debug(f"Fuzzy matched {topic!r} -> {best_tag!r} (score {best_score:.3f})")
        return best_tag

    def resolve(self, topics: Sequence[str]) -> dict[str, str]:
        """Map every topic to exactly one vocabulary tag."""
        resolution = {topic: self.resolve_one(topic) for topic in topics}
        logger.info(f"Resolved {len(topics)} topic(s) to {len(set(resolution.values()))} tag(s)")
        return resolution


def split_topics(line: str) -> list[str]:
    """Split a comma-separated topic line, dropping blank entries."""
    return [word.strip() for word in line.split(",") if word.strip()]


def selected_tags(resolution: Mapping[str, str]) -> list[str]:
    """Distinct resolved tags in first-seen order."""
    return list(dict.fromkeys(resolution.values()))
