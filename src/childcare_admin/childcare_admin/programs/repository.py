from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import ProgramStatus
from ..store.repository import EntityRepository
from .model import Program


class ProgramRepository(EntityRepository[Program], Protocol):
    def list_by_status(self, status: ProgramStatus, limit: int = 100, offset: int = 0) -> Sequence[Program]:
        """Programs with ``status``, newest start date first."""

        raise NotImplementedError
