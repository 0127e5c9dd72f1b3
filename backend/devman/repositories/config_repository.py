"""Configuration variable persistence."""

from __future__ import annotations

from devman.db import Var
from devman.repositories.base import FilteredRepository


class VarRepository(FilteredRepository[Var]):
    model = Var
    id_column = "descr"
