"""
WAi Championship Scoring Engine - Similarity Rules

Formula:
  sim(a, b) = 2 × |bigrams(a) ∩ bigrams(b)| / (|bigrams(a)| + |bigrams(b)|)
  Score = min(10, round(10 × sim + keyword_bonus, 1))

Rules:
  - Both texts are normalized first (lower-case, trim, collapse whitespace)
  - Empty answer or target → 0
  - Exact match after normalization → 10 (no metric noise on short strings)
  - Bigrams skip whitespace: texts differing only in word spacing score 10
  - Bigrams are counted as a multiset (repeated pairs count repeatedly)
  - Keyword bonus: share of keywords found in the answer × 2, up to +2.0
"""
import re
from collections import Counter
from typing import List, Optional

from wai_game.core.normalizer import normalize_text
from wai_game.utils import round1


MAX_SCORE = 10.0
MAX_KEYWORD_BONUS = 2.0

WHITESPACE = re.compile(r"\s+")

# (threshold, message) checked top-down
FEEDBACK_BANDS = [
    (9.5, "완벽합니다! 🎉"),
    (8.5, "훌륭해요! 🌟"),
    (7.0, "잘했어요! 👏"),
    (5.0, "좋습니다! 👍"),
    (3.0, "아쉬워요 😅"),
]
FALLBACK_FEEDBACK = "다시 시도해보세요 💪"


def bigrams(text: str) -> Counter:
    """Multiset of adjacent-character pairs"""
    return Counter(text[i:i + 2] for i in range(len(text) - 1))


def dice_coefficient(a: str, b: str) -> float:
    """
    Dice coefficient over character bigrams

    Args:
        a: First (already normalized) string
        b: Second (already normalized) string

    Returns:
        Similarity in range [0.0, 1.0]; 0.0 when neither string has a bigram
    """
    bigrams_a = bigrams(a)
    bigrams_b = bigrams(b)
    total = sum(bigrams_a.values()) + sum(bigrams_b.values())
    if total == 0:
        return 0.0

    overlap = sum((bigrams_a & bigrams_b).values())
    return 2.0 * overlap / total


def calculate_similarity(answer: str, target: str) -> float:
    """
    Score the chatbot answer against the target answer

    Args:
        answer: Answer text the team received from the chatbot
        target: Target answer of the question

    Returns:
        Score in range [0.0, 10.0], one decimal place
    """
    if not answer or not target:
        return 0.0

    normalized_answer = normalize_text(answer)
    normalized_target = normalize_text(target)

    if normalized_answer == normalized_target:
        return MAX_SCORE

    compact_answer = WHITESPACE.sub("", normalized_answer)
    compact_target = WHITESPACE.sub("", normalized_target)
    if compact_answer == compact_target:
        return MAX_SCORE

    similarity = dice_coefficient(compact_answer, compact_target)
    return round1(similarity * MAX_SCORE)


def calculate_keyword_bonus(answer: str, target: str, keywords: Optional[List[str]] = None) -> float:
    """
    Bonus for key terms of the target that appear in the answer

    Args:
        answer: Answer text
        target: Target answer (reserved for keyword extraction, unused today)
        keywords: Keywords to look for; an empty list or None gives no bonus

    Returns:
        Bonus in range [0.0, 2.0], one decimal place
    """
    wanted = [normalize_text(k) for k in (keywords or [])]
    if not wanted:
        return 0.0

    normalized_answer = normalize_text(answer)
    matched = sum(1 for keyword in wanted if keyword in normalized_answer)
    return round1(matched / len(wanted) * MAX_KEYWORD_BONUS)


def calculate_score(answer: str, target: str, keywords: Optional[List[str]] = None) -> float:
    """
    Composite score: similarity plus keyword bonus, capped at 10

    Args:
        answer: Answer text the team received from the chatbot
        target: Target answer of the question
        keywords: Optional keywords for the bonus

    Returns:
        Score in range [0.0, 10.0], one decimal place
    """
    base_score = calculate_similarity(answer, target)
    bonus = calculate_keyword_bonus(answer, target, keywords) if keywords else 0.0
    return min(MAX_SCORE, round1(base_score + bonus))


def validate_answer_length(answer: str, min_length: int = 5, max_length: int = 5000) -> bool:
    """Check the trimmed answer length is within [min_length, max_length]"""
    trimmed = (answer or "").strip()
    return min_length <= len(trimmed) <= max_length


def get_score_feedback(score: float) -> str:
    """Encouragement message for a score"""
    for threshold, message in FEEDBACK_BANDS:
        if score >= threshold:
            return message
    return FALLBACK_FEEDBACK
