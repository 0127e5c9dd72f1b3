"""Translation of HTTP query parameters into typed list-query arguments.

Each listing endpoint declares a :class:`FilterSpec`: the filter keys it
recognizes, the column each one constrains and the matching rule to apply.
:func:`build_list_query` turns the raw request parameters into a
:class:`ListQuery` (page bounds, time range and per-field filter values) that
the repository layer compiles into SQL.

Parsing is deliberately forgiving. An unparsable or out-of-range value is
logged and treated as if the parameter had not been sent; it never produces
an error and never narrows the result set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional

from devman.core.logging import get_logger
from devman.core.metrics import record_filter_fallback
from devman.domain.nullable import to_mac, to_network, try_parse_bool, try_parse_int, try_parse_millis

logger = get_logger(__name__)

MAX_LIMIT = 1000
PAGE_BITS = 32
DEFAULT_LIMIT = 100

ISNULL = "isnull"
ISEMPTY = "isempty"
SENTINELS = frozenset({ISNULL, ISEMPTY})

TIME_KEYS = ("updated_ge", "updated_le", "created_ge", "created_le")


class MatchKind(str, Enum):
    """How a filter value constrains its column."""

    EXACT = "exact"
    LIKE = "like"
    ILIKE = "ilike"
    GE = "ge"
    LE = "le"
    NETWORK = "network"
    MAC = "mac"
    BOOL = "bool"


@dataclass(frozen=True, slots=True)
class FieldFilter:
    """A single recognized filter key.

    ``numeric`` makes EXACT/GE/LE parse the value as an integer and makes
    LIKE/ILIKE match against the column cast to text. ``sentinels`` lists the
    literal values (``isnull``/``isempty``) that become null/empty checks.
    """

    key: str
    column: str
    kind: MatchKind
    sentinels: frozenset[str] = frozenset()
    numeric: bool = False

    def __post_init__(self) -> None:
        unknown = self.sentinels - SENTINELS
        if unknown:
            raise ValueError(f"Unknown sentinel values for {self.key}: {sorted(unknown)}")


@dataclass(frozen=True, slots=True)
class FilterValue:
    """A parsed filter: either a typed operand or a sentinel marker."""

    rule: FieldFilter
    value: Any = None
    sentinel: Optional[str] = None

    @property
    def is_sentinel(self) -> bool:
        return self.sentinel is not None


@dataclass(frozen=True, slots=True)
class PageSpec:
    limit: int = DEFAULT_LIMIT
    offset: int = 0


@dataclass(frozen=True, slots=True)
class TimeRange:
    """Optional record timestamp bounds; ``None`` means unbounded."""

    updated_ge: Optional[datetime] = None
    updated_le: Optional[datetime] = None
    created_ge: Optional[datetime] = None
    created_le: Optional[datetime] = None

    def bounds(self) -> dict[str, datetime]:
        """Return only the bounds that are set, keyed by parameter name."""
        return {key: getattr(self, key) for key in TIME_KEYS if getattr(self, key) is not None}


@dataclass(frozen=True)
class FilterSpec:
    """The filter keys a listing endpoint accepts, plus its default page size."""

    fields: tuple[FieldFilter, ...] = ()
    default_limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        keys = [rule.key for rule in self.fields]
        duplicates = {key for key in keys if keys.count(key) > 1}
        if duplicates:
            raise ValueError(f"Duplicate filter keys: {sorted(duplicates)}")
        if not 1 <= self.default_limit <= MAX_LIMIT:
            raise ValueError(f"default_limit must be within 1 - {MAX_LIMIT}")

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(rule.key for rule in self.fields)


@dataclass(slots=True)
class ListQuery:
    """Everything a repository needs to run one listing query."""

    page: PageSpec = field(default_factory=PageSpec)
    time_range: TimeRange = field(default_factory=TimeRange)
    filters: dict[str, FilterValue] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Rule constructors


def _column_for(key: str, column: Optional[str]) -> str:
    if column:
        return column
    return key[:-2] if key.endswith("_f") else key


def like(key: str, column: Optional[str] = None, *, sentinels=(), numeric: bool = False) -> FieldFilter:
    """Case-sensitive SQL ``LIKE`` pattern."""
    return FieldFilter(key, _column_for(key, column), MatchKind.LIKE, frozenset(sentinels), numeric)


def ilike(key: str, column: Optional[str] = None, *, sentinels=()) -> FieldFilter:
    """Case-insensitive SQL ``ILIKE`` pattern."""
    return FieldFilter(key, _column_for(key, column), MatchKind.ILIKE, frozenset(sentinels))


def exact(key: str, column: Optional[str] = None, *, numeric: bool = False, sentinels=()) -> FieldFilter:
    return FieldFilter(key, _column_for(key, column), MatchKind.EXACT, frozenset(sentinels), numeric)


def at_least(key: str, column: str) -> FieldFilter:
    return FieldFilter(key, column, MatchKind.GE, numeric=True)


def at_most(key: str, column: str) -> FieldFilter:
    return FieldFilter(key, column, MatchKind.LE, numeric=True)


def network(key: str, column: Optional[str] = None) -> FieldFilter:
    """Stored address contained in (or equal to) the given network."""
    return FieldFilter(key, _column_for(key, column), MatchKind.NETWORK)


def mac(key: str, column: Optional[str] = None) -> FieldFilter:
    return FieldFilter(key, _column_for(key, column), MatchKind.MAC)


def boolean(key: str, column: Optional[str] = None) -> FieldFilter:
    return FieldFilter(key, _column_for(key, column), MatchKind.BOOL)


# ---------------------------------------------------------------------------
# Parsing


def _fallback(parameter: str, message: str, *args: Any) -> None:
    logger.info(message, *args)
    record_filter_fallback(parameter)


def parse_page(
    params: Mapping[str, str],
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> PageSpec:
    """Read ``limit``/``offset``, keeping the defaults for invalid values.

    ``limit`` must parse and fall within ``1 - max_limit``; ``offset`` must
    parse as a 32-bit integer and be positive.
    """
    limit = default_limit
    raw = params.get("limit")
    if raw:
        parsed = try_parse_int(raw, bits=PAGE_BITS)
        if parsed is None:
            _fallback("limit", "Invalid limit value. Using default")
        elif 1 <= parsed <= max_limit:
            limit = parsed
        else:
            _fallback("limit", "Value of limit out of range 1 - %d. Using default", max_limit)

    offset = 0
    raw = params.get("offset")
    if raw:
        parsed = try_parse_int(raw, bits=PAGE_BITS)
        if parsed is None:
            _fallback("offset", "Invalid offset value. Using default")
        elif parsed > 0:
            offset = parsed
        else:
            _fallback("offset", "Value of offset out of range > 0. Using default")

    return PageSpec(limit=limit, offset=offset)


def parse_time_range(params: Mapping[str, str]) -> TimeRange:
    """Read the four millisecond timestamp bounds; unparsable ones stay unset."""
    bounds: dict[str, datetime] = {}
    for key in TIME_KEYS:
        raw = params.get(key)
        if not raw:
            continue
        parsed = try_parse_millis(raw)
        if parsed is None:
            _fallback(key, "Invalid %s value. Ignoring time bound", key)
            continue
        bounds[key] = parsed
    return TimeRange(**bounds)


def parse_filter_value(rule: FieldFilter, raw: str) -> Optional[FilterValue]:
    """Convert one raw parameter according to ``rule``; ``None`` drops the filter."""
    if raw in rule.sentinels:
        return FilterValue(rule, sentinel=raw)

    kind = rule.kind
    if kind in (MatchKind.LIKE, MatchKind.ILIKE):
        return FilterValue(rule, value=raw)
    if kind in (MatchKind.EXACT, MatchKind.GE, MatchKind.LE):
        if not rule.numeric:
            return FilterValue(rule, value=raw)
        number = try_parse_int(raw)
        return FilterValue(rule, value=number) if number is not None else None
    if kind is MatchKind.NETWORK:
        net = to_network(raw)
        return FilterValue(rule, value=net) if net is not None else None
    if kind is MatchKind.MAC:
        address = to_mac(raw)
        return FilterValue(rule, value=address) if address is not None else None
    if kind is MatchKind.BOOL:
        flag = try_parse_bool(raw)
        return FilterValue(rule, value=flag) if flag is not None else None
    raise ValueError(f"Unsupported match kind: {kind}")


def parse_filters(params: Mapping[str, str], spec: FilterSpec) -> dict[str, FilterValue]:
    """Parse every recognized, present and non-empty filter key in ``spec`` order."""
    parsed: dict[str, FilterValue] = {}
    for rule in spec.fields:
        raw = params.get(rule.key)
        if not raw:
            continue
        value = parse_filter_value(rule, raw)
        if value is None:
            _fallback(rule.key, "Invalid %s value. Filter not applied", rule.key)
            continue
        parsed[rule.key] = value
    return parsed


def build_list_query(
    params: Mapping[str, str],
    spec: FilterSpec,
    max_limit: int = MAX_LIMIT,
) -> ListQuery:
    """Build the complete listing argument for one request."""
    return ListQuery(
        page=parse_page(params, spec.default_limit, max_limit),
        time_range=parse_time_range(params),
        filters=parse_filters(params, spec),
    )
