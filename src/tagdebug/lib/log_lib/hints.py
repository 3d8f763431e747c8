"""
Hint dataclass and global registry.

Domain modules register hints at import time. OutputManager.hint()
handles context filtering, level gating and per-session dedup.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set


@dataclass
class Hint:
    """A templatized hint shown in specific contexts.

    Attributes:
        id: Dot-namespaced identifier (e.g., 'selector.type')
        message: Template string with {var} placeholders for str.format()
        context: Contexts where the hint applies ('error', 'result', 'verbose')
        min_level: Minimum verbosity for display
        category: Grouping key
    """
    id: str
    message: str
    context: Set[str] = field(default_factory=lambda: {'verbose'})
    min_level: int = 1
    category: str = 'general'


_HINTS: Dict[str, Hint] = {}


def register_hint(hint: Hint) -> None:
    """Register a hint. Duplicate IDs overwrite."""
    _HINTS[hint.id] = hint


def register_hints(*hints: Hint) -> None:
    for h in hints:
        register_hint(h)


def get_hint(hint_id: str) -> Optional[Hint]:
    """Look up a hint by ID. Returns None if not found."""
    return _HINTS.get(hint_id)


def get_hints_by_category(category: str) -> List[Hint]:
    return [h for h in _HINTS.values() if h.category == category]
