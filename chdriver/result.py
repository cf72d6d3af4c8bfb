"""Result of a statement that returns no rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class NotSupportedError(Exception):
    """Raised for operations the server protocol does not provide."""


@dataclass(frozen=True)
class Result:
    """Execution result.

    The server reports neither insert ids nor affected row counts, so both
    are unknown unless given explicitly; asking for an unknown one raises.
    """

    insert_id: Optional[int] = None
    affected: Optional[int] = None

    @staticmethod
    def _known(value: Optional[int], operation: str) -> int:
        if value is None:
            raise NotSupportedError(f"{operation} is not supported")
        return value

    def last_insert_id(self) -> int:
        return self._known(self.insert_id, "LastInsertId")

    def rows_affected(self) -> int:
        return self._known(self.affected, "RowsAffected")