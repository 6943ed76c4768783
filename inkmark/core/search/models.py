from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping


class HighlightKind(Enum):
    """Which kind of highlight set owns a decoration."""

    TRANSIENT = "transient"
    PERSISTENT = "persistent"


class HighlightColor(Enum):
    """
    Palette for pinned searches.

    Yellow is reserved for the transient search,
    the only one with navigation.
    """

    GREEN = "green"
    BLUE = "blue"
    PINK = "pink"
    ORANGE = "orange"
    PURPLE = "purple"

    @property
    def css_class(self) -> str:
        return f"highlight-{self.value}"


@dataclass(frozen=True)
class MatchSpan:
    """One occurrence inside a text leaf, ``end`` exclusive."""

    start: int
    end: int


@dataclass
class PinnedSearchDef:
    """A pinned search as handed to the highlight engine."""

    id: str
    pattern: str
    color: HighlightColor = HighlightColor.GREEN
    case_sensitive: bool = False
    disabled: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PinnedSearchDef":
        """
        Build a definition from a mapping.

        Accepts both ``caseSensitive`` and ``case_sensitive`` keys.

        Raises:
            KeyError: If ``id`` or ``pattern`` is missing
            ValueError: If ``color`` is not in the palette
            TypeError: If ``caseSensitive`` or ``disabled`` is not a bool
        """
        case_sensitive = data.get("caseSensitive", data.get("case_sensitive", False))
        return cls(
            id=str(data["id"]),
            pattern=str(data["pattern"]),
            color=HighlightColor(data.get("color", HighlightColor.GREEN.value)),
            case_sensitive=_require_bool("caseSensitive", case_sensitive),
            disabled=_require_bool("disabled", data.get("disabled", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "pattern": self.pattern,
            "color": self.color.value,
            "caseSensitive": self.case_sensitive,
            "disabled": self.disabled,
        }


@dataclass
class ContextSnippet:
    """Single-line preview text around a match."""

    text: str
    match_start: int
    match_end: int


@dataclass
class SearchMatch:
    """A match as listed in the search sidebar."""

    index: int
    text: str
    context: str
    context_start: int
    context_end: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "text": self.text,
            "context": self.context,
            "contextStart": self.context_start,
            "contextEnd": self.context_end,
        }


@dataclass
class SearchSnapshot:
    """Full search state sent to listeners after every operation."""

    count: int = 0
    current: int = 0  # 1-based, 0 if none
    query: str = ""
    matches: List[SearchMatch] = field(default_factory=list)
    pinned_matches: Dict[str, List[SearchMatch]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "current": self.current,
            "query": self.query,
            "matches": [m.to_dict() for m in self.matches],
            "pinnedMatches": {
                pinned_id: [m.to_dict() for m in matches]
                for pinned_id, matches in self.pinned_matches.items()
            },
        }


def _require_bool(name: str, value: Any) -> bool:
    # Strings such as "false" are rejected, not coerced
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be a bool, got {type(value).__name__}")
    return value
