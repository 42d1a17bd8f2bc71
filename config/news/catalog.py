"""
In-memory article catalog for the news app.

The catalog is a fixed, ordered collection of ``Article`` records built once
when the app is loaded (see ``NewsConfig.ready``) and never mutated.  There
is no database: every request reads the same immutable value.

Example:
    >>> catalog = build_default_catalog()
    >>> catalog.get(1).category
    'Technology'
    >>> catalog.get(parse_article_id("999")) is None
    True
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, Iterator, Optional

# Sign, optional hex prefix and leading digits of a path segment.
_LEADING_INT_RE = re.compile(r'^\s*([+-]?)(0[xX])?([0-9a-fA-F]*)')
_DECIMAL_RE = re.compile(r'^\d+')


def isoformat_utc(value: datetime) -> str:
    """Render ``value`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    return value.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@dataclass(frozen=True)
class Article:
    """A single static news item."""

    id: int
    headline: str
    summary: str
    category: str
    timestamp: datetime
    image: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data['timestamp'] = isoformat_utc(self.timestamp)
        return data


class Catalog:
    """Fixed, ordered collection of articles with lookup by id."""

    def __init__(self, articles: Iterable[Article]):
        self._articles = tuple(articles)
        self._by_id = {}
        for article in self._articles:
            if article.id in self._by_id:
                raise ValueError(f"Duplicate article id: {article.id}")
            self._by_id[article.id] = article

    def __len__(self) -> int:
        return len(self._articles)

    def __iter__(self) -> Iterator[Article]:
        return iter(self._articles)

    def all(self) -> tuple[Article, ...]:
        return self._articles

    def get(self, article_id: Optional[int]) -> Optional[Article]:
        if article_id is None:
            return None
        return self._by_id.get(article_id)


def parse_article_id(raw: str) -> Optional[int]:
    """
    Parse the ``id`` path segment.

    Only the leading run of digits counts, so ``"3abc"`` resolves to ``3``
    and ``"abc"`` resolves to ``None`` (which matches no article).  A ``0x``
    prefix switches to hexadecimal digits, so ``"0x1"`` resolves to ``1``.
    """
    sign, hex_prefix, digits = _LEADING_INT_RE.match(raw or '').groups()
    if hex_prefix:
        if not digits:
            return None
        value = int(digits, 16)
    else:
        decimal = _DECIMAL_RE.match(digits)
        if not decimal:
            return None
        value = int(decimal.group())
    return -value if sign == '-' else value


# =============================================================================
# Default catalog
# =============================================================================

_PLACEHOLDER = "https://via.placeholder.com/400x250/{bg}/FFFFFF?text={label}+News"

_DEFAULT_ARTICLES = [
    # (headline, summary, category, hours ago, image colour, image label)
    (
        "Breaking: Technology Advances Reshape Global Economy",
        "Latest developments in artificial intelligence and automation are "
        "transforming industries worldwide, creating new opportunities and challenges.",
        "Technology", 0, "FF5722", "Tech",
    ),
    (
        "Climate Summit Reaches Historic Agreement",
        "World leaders unite on ambitious climate targets, promising significant "
        "reduction in carbon emissions over the next decade.",
        "Environment", 1, "4CAF50", "Climate",
    ),
    (
        "Sports: Championship Finals Draw Record Viewership",
        "This year's championship games have attracted the largest television "
        "audience in sporting history.",
        "Sports", 2, "2196F3", "Sports",
    ),
    (
        "Health: New Medical Breakthrough Offers Hope",
        "Researchers announce significant progress in treating chronic diseases, "
        "with clinical trials showing promising results.",
        "Health", 3, "9C27B0", "Health",
    ),
    (
        "Business: Markets Show Strong Recovery Trends",
        "Global financial markets demonstrate resilience with sustained growth "
        "across multiple sectors and regions.",
        "Business", 4, "FF9800", "Business",
    ),
]


def build_default_catalog(now: Optional[datetime] = None) -> Catalog:
    """
    Build the hard-coded catalog.

    Article ``n`` is stamped ``n - 1`` hours before ``now`` (UTC, defaults to
    the current time).
    """
    now = now or datetime.now(timezone.utc)
    return Catalog(
        Article(
            id=index,
            headline=headline,
            summary=summary,
            category=category,
            timestamp=now - timedelta(hours=hours_ago),
            image=_PLACEHOLDER.format(bg=background, label=label),
        )
        for index, (headline, summary, category, hours_ago, background, label)
        in enumerate(_DEFAULT_ARTICLES, 1)
    )
