# trollint/rubrics/__init__.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class RubricResult:
    """
    One scoring axis.
    headline names the strongest contributing reason; justification templates are keyed by it.
    """
    score: float
    max_score: float
    headline: str
    reasons: Dict[str, Any]
