import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from ..search.models import HighlightColor, PinnedSearchDef


def new_pinned_id() -> str:
    """Generate a unique pinned search id."""
    return f"ps_{uuid.uuid4().hex}"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class PinnedSearch:
    """A pinned search query with its highlight color."""
    pattern: str
    color: HighlightColor = HighlightColor.GREEN
    case_sensitive: bool = False
    disabled: bool = False  # highlight hidden but kept in the list
    id: str = field(default_factory=new_pinned_id)
    created_at: datetime = field(default_factory=_now)

    def to_def(self) -> PinnedSearchDef:
        """Definition handed to the highlight engine."""
        return PinnedSearchDef(
            id=self.id,
            pattern=self.pattern,
            color=self.color,
            case_sensitive=self.case_sensitive,
            disabled=self.disabled,
        )

    def to_dict(self):
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'pattern': self.pattern,
            'color': self.color.value,
            'caseSensitive': self.case_sensitive,
            'disabled': self.disabled,
            'createdAt': self.created_at.isoformat(),
        }

    @staticmethod
    def from_dict(data):
        """Create a pinned search from a dictionary."""
        created_at = data.get('createdAt')
        return PinnedSearch(
            id=data['id'],
            pattern=data['pattern'],
            color=HighlightColor(data.get('color', HighlightColor.GREEN.value)),
            case_sensitive=data.get('caseSensitive', False),
            disabled=data.get('disabled', False),
            created_at=datetime.fromisoformat(created_at) if created_at else _now(),
        )


@dataclass
class PinnedSearches:
    """Ordered collection of pinned searches (pinned-searches.json)."""
    version: int = 1
    pinned_searches: List[PinnedSearch] = field(default_factory=list)

    def add(self, pattern: str) -> PinnedSearch:
        """Pin a new pattern using the least used color."""
        pinned = PinnedSearch(pattern=pattern, color=self.next_color())
        self.pinned_searches.append(pinned)
        return pinned

    def remove(self, pinned_id: str) -> bool:
        """
        Remove a pinned search by id.

        Returns:
            True if a pinned search was removed
        """
        count_before = len(self.pinned_searches)
        self.pinned_searches = [p for p in self.pinned_searches if p.id != pinned_id]
        return len(self.pinned_searches) < count_before

    def get(self, pinned_id: str) -> Optional[PinnedSearch]:
        for pinned in self.pinned_searches:
            if pinned.id == pinned_id:
                return pinned
        return None

    def set_color(self, pinned_id: str, color: HighlightColor) -> bool:
        pinned = self.get(pinned_id)
        if pinned is None:
            return False
        pinned.color = color
        return True

    def toggle_disabled(self, pinned_id: str) -> bool:
        pinned = self.get(pinned_id)
        if pinned is None:
            return False
        pinned.disabled = not pinned.disabled
        return True

    def contains_pattern(self, pattern: str) -> bool:
        return any(p.pattern == pattern for p in self.pinned_searches)

    def next_color(self) -> HighlightColor:
        """Least used palette color; ties go to the earlier palette entry."""
        usage = {color: 0 for color in HighlightColor}
        for pinned in self.pinned_searches:
            usage[pinned.color] += 1
        return min(HighlightColor, key=lambda color: usage[color])

    def to_defs(self) -> List[PinnedSearchDef]:
        """All definitions, disabled ones included, for the engine."""
        return [p.to_def() for p in self.pinned_searches]

    def to_dict(self):
        return {
            'version': self.version,
            'pinnedSearches': [p.to_dict() for p in self.pinned_searches],
        }

    @staticmethod
    def from_dict(data):
        return PinnedSearches(
            version=data.get('version', 1),
            pinned_searches=[PinnedSearch.from_dict(p) for p in data.get('pinnedSearches', [])],
        )

    def __len__(self) -> int:
        return len(self.pinned_searches)
