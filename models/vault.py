# models/vault.py

"""
vault.py

Data structures for the AI Stock Vault storefront. Nothing here touches a
database: the catalog is seeded once at startup and the per-visit session
state is an immutable value kept in the server-side session store.
"""

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Optional, Tuple

# Filter value that matches every asset
ALL = 'all'


class AssetType(enum.Enum):
    IMAGE = 'image'
    VIDEO = 'video'
    AUDIO = 'audio'


class NotificationKind(enum.Enum):
    SUCCESS = 'success'
    ERROR = 'error'


@dataclass(frozen=True)
class Asset:
    """A catalog entry that can be previewed and redeemed for credits."""
    id: str
    type: AssetType
    title: str
    tags: Tuple[str, ...]
    preview_url: str
    poster: str
    price: int
    credits: int
    duration: Optional[int] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Asset':
        """Builds an asset from a seed record, rejecting malformed entries."""
        try:
            asset_type = AssetType(data['type'])
        except ValueError:
            raise ValueError(f"Unknown asset type '{data['type']}' for asset {data.get('id')}")

        credits = int(data['credits'])
        if credits < 0:
            raise ValueError(f"Asset {data['id']} has a negative credit cost.")

        return cls(
            id=data['id'],
            type=asset_type,
            title=data['title'],
            tags=tuple(t.lower() for t in data.get('tags', [])),
            preview_url=data.get('preview_url', ''),
            poster=data.get('poster', ''),
            price=int(data.get('price', 0)),
            credits=credits,
            duration=data.get('duration'),
            attributes=dict(data.get('attributes') or {}),
        )

    def to_dict(self):
        """Serializes the asset to a dictionary for JSON conversion."""
        return {
            'id': self.id,
            'type': self.type.value,
            'title': self.title,
            'tags': list(self.tags),
            'preview_url': self.preview_url,
            'poster': self.poster,
            'price': self.price,
            'credits': self.credits,
            'duration': self.duration,
            'attributes': dict(self.attributes),
        }


@dataclass(frozen=True)
class Notification:
    """A transient toast. The text is resolved from `key` at render time."""
    key: str
    kind: NotificationKind
    expires_at: float
    params: Dict[str, Any] = field(default_factory=dict)

    def is_visible(self, now: float) -> bool:
        return now < self.expires_at


@dataclass(frozen=True)
class SessionState:
    """Everything one visitor's page needs; recreated on every page load."""
    credits: int
    query: str = ''
    type_filter: str = ALL
    tag_filter: str = ALL
    result_ids: Tuple[str, ...] = ()
    selected_id: Optional[str] = None
    notification: Optional[Notification] = None

    @classmethod
    def initial(cls, credits: int, result_ids: Iterable[str] = ()) -> 'SessionState':
        if credits < 0:
            raise ValueError("Starting credits cannot be negative.")
        return cls(credits=credits, result_ids=tuple(result_ids))

    def evolve(self, **changes) -> 'SessionState':
        return replace(self, **changes)
