# -*- coding: utf-8 -*-
"""
passforge Analyzer - Heuristic analysis of a user-supplied password.

Unlike strength.estimate_entropy(), which measures a generation process,
this looks at one concrete string and guesses the pool from the character
classes it contains. Use it for passwords that were not generated here.
"""

import re
import string
from dataclasses import dataclass, field
from typing import List

import numpy as np

from passforge.core.strength import classify_strength, estimate_crack_time

# Pool sizes assumed when a class is present in the sample
CLASS_POOL_SIZES = {
    "lowercase": 26,
    "uppercase": 26,
    "digits": 10,
    "symbols": 32,
}

COMMON_PATTERNS = (
    'password', '123456', 'qwerty', 'admin', 'letmein', 'welcome',
    'monkey', 'dragon', 'master', 'football', 'baseball', 'shadow',
)

SEQUENTIAL_PATTERNS = ('abc', 'def', 'ghi', 'jkl', 'mno', 'pqr', 'stu', 'vwx', 'yz')

_REPEAT_RE = re.compile(r'(.)\1{2,}')

MIN_LENGTH = 8
GOOD_LENGTH = 12
MAX_SCORE = 6

# (max score, rating)
RATINGS = (
    (1, 'very-weak'),
    (2, 'weak'),
    (3, 'fair'),
    (4, 'good'),
    (5, 'strong'),
)


@dataclass
class PasswordAnalysis:
    score: int
    rating: str
    entropy: float
    label: str
    crack_time: str
    feedback: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


def sample_entropy(password: str) -> float:
    """len * log2(pool), the pool guessed from the classes present; 2 decimals."""
    if not password:
        return 0.0

    pool_size = 0
    if any(ch in string.ascii_lowercase for ch in password):
        pool_size += CLASS_POOL_SIZES["lowercase"]
    if any(ch in string.ascii_uppercase for ch in password):
        pool_size += CLASS_POOL_SIZES["uppercase"]
    if any(ch in string.digits for ch in password):
        pool_size += CLASS_POOL_SIZES["digits"]
    if any(not (ch in string.ascii_letters or ch in string.digits) for ch in password):
        pool_size += CLASS_POOL_SIZES["symbols"]

    if pool_size == 0:
        return 0.0
    return round(float(len(password) * np.log2(pool_size)), 2)


def _rating(score: int) -> str:
    for upper, rating in RATINGS:
        if score <= upper:
            return rating
    return 'very-strong'


def analyze_password(password: str) -> PasswordAnalysis:
    """
    Score a password and collect feedback.

    The score (0-6) rewards length and character variety and is penalized
    for common words, sequential runs and repeated characters.
    """
    score = 0
    feedback = []
    suggestions = []

    if len(password) < MIN_LENGTH:
        feedback.append(f"Password is too short (minimum {MIN_LENGTH} characters)")
        suggestions.append(f"Increase password length to at least {MIN_LENGTH} characters")
    elif len(password) >= GOOD_LENGTH:
        score += 2
        feedback.append("Good password length")
    else:
        score += 1
        feedback.append("Acceptable password length")

    classes = (
        (string.ascii_lowercase, "lowercase letters", "Add lowercase letters (a-z)"),
        (string.ascii_uppercase, "uppercase letters", "Add uppercase letters (A-Z)"),
        (string.digits, "numbers", "Add numbers (0-9)"),
        (string.punctuation, "special characters", "Add special characters (!@#$%^&*)"),
    )
    for chars, name, suggestion in classes:
        if any(ch in chars for ch in password):
            score += 1
        else:
            feedback.append(f"Missing {name}")
            suggestions.append(suggestion)

    lowered = password.lower()
    if any(pattern in lowered for pattern in COMMON_PATTERNS):
        score -= 2
        feedback.append("Contains common patterns or words")
        suggestions.append("Avoid common words and patterns")

    if any(pattern in lowered for pattern in SEQUENTIAL_PATTERNS):
        score -= 1
        feedback.append("Contains sequential characters")
        suggestions.append("Avoid sequential character patterns")

    if _REPEAT_RE.search(password):
        score -= 1
        feedback.append("Contains repeated characters")
        suggestions.append("Avoid repeating the same character multiple times")

    entropy = sample_entropy(password)
    return PasswordAnalysis(
        score=max(0, min(MAX_SCORE, score)),
        rating=_rating(score),
        entropy=entropy,
        label=classify_strength(entropy),
        crack_time=estimate_crack_time(entropy),
        feedback=feedback,
        suggestions=suggestions,
    )
