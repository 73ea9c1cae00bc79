"""
Utility functions
"""
import time
import uuid
from decimal import Decimal, ROUND_HALF_UP


def generate_id(prefix: str) -> str:
    """
    Generate a unique entity id

    Format: <prefix>-<epoch ms>-<9 hex chars>

    Example:
        >>> generate_id("team")  # doctest: +SKIP
        'team-1760880000000-3f9c2a1b0'
    """
    millis = int(time.time() * 1000)
    return f"{prefix}-{millis}-{uuid.uuid4().hex[:9]}"


def round1(value: float) -> float:
    """Round half-up to one decimal place (2.25 -> 2.3, not banker's 2.2)"""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
