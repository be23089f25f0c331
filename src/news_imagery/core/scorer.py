"""Relevance scoring of candidate images against an article."""

from typing import AbstractSet, Optional

from news_imagery.core.keywords import extract_keywords, filename_keywords

CATEGORY_MATCH_WEIGHT = 2.0
TITLE_MATCH_WEIGHT = 1.5
STRONG_MATCH_THRESHOLD = 2
STRONG_MATCH_BONUS = 0.5
REUSE_PENALTY = 5.0

CATEGORY_KEYWORDS: dict[str, set[str]] = {
    "breaking ai": {"breaking", "news", "announcement", "launch", "research", "model", "neural", "network"},
    "gen ai": {"generative", "model", "models", "robot", "robots", "neural", "network", "brain", "llm", "chatbot"},
    "ai economy": {"economy", "stock", "stocks", "market", "markets", "money", "finance", "business", "chart", "trading", "dollars"},
    "creative tech": {"creative", "design", "art", "artist", "music", "video", "camera", "studio"},
    "toolbox": {"toolbox", "coding", "code", "developer", "laptop", "software", "programming", "terminal", "tools"},
    "future life": {"future", "robot", "robotics", "city", "health", "home", "human", "space"},
}


def category_keywords(category: Optional[str]) -> set[str]:
    """Keywords that signal a category; unknown categories use their own words."""
    if not category:
        return set()
    return CATEGORY_KEYWORDS.get(category.strip().lower(), extract_keywords(category))


def score_candidate(
    filename: str,
    title_keywords: AbstractSet[str],
    category: Optional[str],
    used_filenames: AbstractSet[str],
) -> float:
    """
    Score one candidate image for an article.

    Args:
        filename: Candidate image filename
        title_keywords: Keywords extracted from the article title
        category: Article category
        used_filenames: Images already chosen in the current render

    Returns:
        +2.0 per category keyword and +1.5 per title keyword found in the
        filename, +0.5 per title match when there are more than two,
        and -5.0 if the image was already used in this render
    """
    candidate = filename_keywords(filename)

    score = CATEGORY_MATCH_WEIGHT * len(candidate & category_keywords(category))

    title_matches = len(candidate & title_keywords)
    score += TITLE_MATCH_WEIGHT * title_matches
    if title_matches > STRONG_MATCH_THRESHOLD:
        score += STRONG_MATCH_BONUS * title_matches

    if filename in used_filenames:
        score -= REUSE_PENALTY

    return score


def rank_candidates(
    candidates: list[str],
    title_keywords: AbstractSet[str],
    category: Optional[str],
    used_filenames: AbstractSet[str],
) -> tuple[float, list[str]]:
    """
    Find the best score and every candidate reaching it.

    Top candidates keep the order of ``candidates`` so that hash-based
    tie-breaking over them is stable.
    """
    if not candidates:
        return 0.0, []

    scores = [
        (filename, score_candidate(filename, title_keywords, category, used_filenames))
        for filename in candidates
    ]
    best = max(score for _, score in scores)
    return best, [filename for filename, score in scores if score == best]
