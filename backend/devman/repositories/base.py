"""Base repository utilities."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, Optional, Sequence, TypeVar

from sqlalchemy import String, cast, func, select
from sqlalchemy.orm import Session

from devman.db.types import contained_by
from devman.domain.filters import ISEMPTY, ISNULL, FilterValue, ListQuery, MatchKind, TimeRange

TModel = TypeVar("TModel")

_TIME_BOUNDS = {
    "updated_ge": ("updated_on", ">="),
    "updated_le": ("updated_on", "<="),
    "created_ge": ("created_on", ">="),
    "created_le": ("created_on", "<="),
}


class SQLAlchemyRepository(Generic[TModel]):
    """Minimal base repository storing the SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, instance: TModel) -> TModel:
        self.session.add(instance)
        return instance

    def remove(self, instance: TModel) -> None:
        self.session.delete(instance)

    def refresh(self, instance: TModel) -> TModel:
        self.session.refresh(instance)
        return instance

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    def flush(self) -> None:
        self.session.flush()


class FilteredRepository(SQLAlchemyRepository[TModel]):
    """Repository for one table that supports :class:`ListQuery` listings.

    Subclasses set ``model`` and the name of its primary key column.
    """

    model: ClassVar[type]
    id_column: ClassVar[str]

    def _column(self, name: str):
        try:
            return getattr(self.model, name)
        except AttributeError:
            raise ValueError(f"{self.model.__name__} has no column {name!r}") from None

    def _dialect_name(self) -> str:
        return self.session.get_bind().dialect.name

    def get(self, ident: Any) -> Optional[TModel]:
        return self.session.get(self.model, ident)

    def count(self, **scope: Any) -> int:
        stmt = select(func.count()).select_from(self.model)
        for name, value in scope.items():
            stmt = stmt.where(self._column(name) == value)
        return self.session.scalar(stmt) or 0

    def list(self, query: ListQuery, **scope: Any) -> Sequence[TModel]:
        """Run a listing; ``scope`` adds equality constraints (e.g. ``dev_id``)."""
        stmt = select(self.model)
        for name, value in scope.items():
            stmt = stmt.where(self._column(name) == value)
        for condition in self._time_conditions(query.time_range):
            stmt = stmt.where(condition)
        for value in query.filters.values():
            stmt = stmt.where(self._predicate(value))

        stmt = stmt.order_by(self._column(self.id_column).asc())
        if query.page.offset:
            stmt = stmt.offset(query.page.offset)
        stmt = stmt.limit(query.page.limit)
        return self.session.scalars(stmt).all()

    def _time_conditions(self, time_range: TimeRange):
        for key, bound in time_range.bounds().items():
            column_name, operator = _TIME_BOUNDS[key]
            column = self._column(column_name)
            yield column >= bound if operator == ">=" else column <= bound

    def _predicate(self, value: FilterValue):
        rule = value.rule
        column = self._column(rule.column)

        if value.sentinel == ISNULL:
            return column.is_(None)
        if value.sentinel == ISEMPTY:
            target = cast(column, String) if rule.numeric else column
            return target == ""

        kind = rule.kind
        if kind is MatchKind.LIKE:
            target = cast(column, String) if rule.numeric else column
            return target.like(value.value)
        if kind is MatchKind.ILIKE:
            return column.ilike(value.value)
        if kind is MatchKind.GE:
            return column >= value.value
        if kind is MatchKind.LE:
            return column <= value.value
        if kind is MatchKind.NETWORK:
            return contained_by(column, value.value, self._dialect_name())
        # EXACT, MAC and BOOL compare directly; the column type binds the operand.
        return column == value.value
