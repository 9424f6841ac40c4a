"""Shop insights: order counts and earnings over a recent window.

A window token picks both how far back to look and how finely to bucket:

    1h            -> minute buckets
    4h 8h 12h 1d  -> hour buckets
    1w 1m         -> day buckets
    1y            -> month buckets

Buckets are computed in UTC. The series is sparse: a bucket with no orders
is left out, so charting callers must fill the gaps themselves.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timedelta
from enum import Enum

from protean.utils.globals import current_domain

from printing.order.order import OrderStatus, PrintOrder
from printing.shared.clock import as_utc, utcnow


class Granularity(Enum):
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"


class InsightRange(Enum):
    LAST_HOUR = "1h"
    LAST_4_HOURS = "4h"
    LAST_8_HOURS = "8h"
    LAST_12_HOURS = "12h"
    LAST_DAY = "1d"
    LAST_WEEK = "1w"
    LAST_MONTH = "1m"
    LAST_YEAR = "1y"

    @classmethod
    def parse(cls, token) -> "InsightRange":
        """Unknown or missing tokens fall back to the last day."""
        try:
            return cls(token)
        except ValueError:
            return cls.LAST_DAY


_WINDOWS = {
    InsightRange.LAST_HOUR: (timedelta(hours=1), Granularity.MINUTE),
    InsightRange.LAST_4_HOURS: (timedelta(hours=4), Granularity.HOUR),
    InsightRange.LAST_8_HOURS: (timedelta(hours=8), Granularity.HOUR),
    InsightRange.LAST_12_HOURS: (timedelta(hours=12), Granularity.HOUR),
    InsightRange.LAST_DAY: (timedelta(days=1), Granularity.HOUR),
    InsightRange.LAST_WEEK: (timedelta(days=7), Granularity.DAY),
    InsightRange.LAST_MONTH: (timedelta(days=30), Granularity.DAY),
    InsightRange.LAST_YEAR: (timedelta(days=365), Granularity.MONTH),
}


def window_for(insight_range: InsightRange) -> tuple[timedelta, Granularity]:
    return _WINDOWS[insight_range]


def bucket_start(timestamp: datetime, granularity: Granularity) -> datetime:
    """Truncate a timestamp to the start of its UTC bucket."""
    moment = as_utc(timestamp)
    if granularity is Granularity.MINUTE:
        return moment.replace(second=0, microsecond=0)
    if granularity is Granularity.HOUR:
        return moment.replace(minute=0, second=0, microsecond=0)
    if granularity is Granularity.DAY:
        return moment.replace(hour=0, minute=0, second=0, microsecond=0)
    return moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


@dataclass
class OrderStats:
    total_orders: int = 0
    total_earnings: float = 0.0
    completed: int = 0
    processing: int = 0
    failed: int = 0

    def add(self, order: PrintOrder) -> None:
        self.total_orders += 1
        self.total_earnings += float(order.total or 0.0)
        status = OrderStatus(order.status)
        if status is OrderStatus.COMPLETED:
            self.completed += 1
        elif status is OrderStatus.FAILED:
            self.failed += 1
        else:
            self.processing += 1


@dataclass
class InsightBucket:
    bucket: datetime
    stats: OrderStats = field(default_factory=OrderStats)

    def to_dict(self) -> dict:
        return {"bucket": self.bucket.isoformat(), **asdict(self.stats)}


@dataclass
class ShopInsights:
    shop_username: str
    range: InsightRange
    granularity: Granularity
    window_start: datetime
    window_end: datetime
    stats: OrderStats
    buckets: list[InsightBucket]

    def to_dict(self) -> dict:
        return {
            "shop_username": self.shop_username,
            "range": self.range.value,
            "granularity": self.granularity.value,
            "window_start": self.window_start.isoformat(),
            "window_end": self.window_end.isoformat(),
            "stats": asdict(self.stats),
            "buckets": [bucket.to_dict() for bucket in self.buckets],
        }


def summarize(
    orders,
    shop_username: str,
    insight_range: InsightRange,
    now: datetime,
) -> ShopInsights:
    """Aggregate ``orders`` created inside ``[now - span, now]``."""
    span, granularity = window_for(insight_range)
    window_end = as_utc(now)
    window_start = window_end - span

    stats = OrderStats()
    buckets: dict[datetime, InsightBucket] = {}
    for order in orders:
        if order.created_at is None:
            continue
        created_at = as_utc(order.created_at)
        if created_at < window_start or created_at > window_end:
            continue
        stats.add(order)
        key = bucket_start(order.created_at, granularity)
        buckets.setdefault(key, InsightBucket(bucket=key)).stats.add(order)

    return ShopInsights(
        shop_username=shop_username,
        range=insight_range,
        granularity=granularity,
        window_start=window_start,
        window_end=window_end,
        stats=stats,
        buckets=[buckets[key] for key in sorted(buckets)],
    )


def shop_insights(shop_username: str, range_token: str | None = None, now: datetime | None = None) -> ShopInsights:
    """Insights for one shop over the window named by ``range_token``."""
    orders = current_domain.repository_for(PrintOrder).for_shop(shop_username)
    return summarize(orders, shop_username, InsightRange.parse(range_token), now or utcnow())
