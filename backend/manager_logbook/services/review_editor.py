"""
Automatic moderation of review text.
"""

import re
from typing import Iterable, Optional

from manager_logbook.core.config import settings

_WHITESPACE = re.compile(r"\s+")


class ReviewEditor:
    """Produces the publicly visible text of a review."""
    
    def __init__(self, blocked_words: Optional[Iterable[str]] = None):
        words = settings.REVIEW_BLOCKED_WORDS if blocked_words is None else blocked_words
        words = [w.strip() for w in words if w and w.strip()]
        self._blocked = (
            re.compile(r"\b(" + "|".join(re.escape(w) for w in words) + r")\b", re.IGNORECASE)
            if words
            else None
        )
    
    def auto_edit_review(self, text: str) -> str:
        """Collapse whitespace and mask blocked words with asterisks."""
        edited = _WHITESPACE.sub(" ", text).strip()
        if self._blocked is not None:
            edited = self._blocked.sub(lambda m: "*" * len(m.group(0)), edited)
        return edited
