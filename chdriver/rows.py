"""Row iteration over the blocks of a query result, with totals and extremes."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any


class BlockKind(enum.Enum):
    """Role of a block received from the server."""

    DATA = 1
    TOTALS = 2
    EXTREMES = 3


@dataclass
class Block:
    """A column-major chunk of a result: values[column][row]."""

    values: list[list[Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len({len(column) for column in self.values}) > 1:
            raise ValueError("all columns of a block must have the same length")

    @property
    def num_columns(self) -> int:
        return len(self.values)

    @property
    def num_rows(self) -> int:
        return len(self.values[0]) if self.values else 0


class Rows:
    """Rows of a result, read block by block from a stream of (kind, block) pairs.

    Data blocks are read in order; totals and extremes blocks are kept aside
    as further result sets. Empty blocks are skipped.
    """

    def __init__(
        self,
        columns: Sequence[str],
        packets: Iterable[tuple[BlockKind, Block]],
        finish: Callable[[], None] | None = None,
    ) -> None:
        self.columns = list(columns)
        self.error: BaseException | None = None
        self._packets: Iterator[tuple[BlockKind, Block]] = iter(packets)
        self._finish = finish
        self._block: Block | None = None
        self._offset = 0
        self._totals: Block | None = None
        self._extremes: Block | None = None
        self._exhausted = False
        self._closed = False

    def _receive(self) -> Block | None:
        """Return the next non-empty data block, or None at the end of the stream."""
        if self._exhausted:
            return None
        try:
            for kind, block in self._packets:
                if kind not in (BlockKind.DATA, BlockKind.TOTALS, BlockKind.EXTREMES):
                    raise ValueError(f"[rows] unexpected packet [{kind}] from server")
                if block.num_rows == 0:
                    continue
                if kind is BlockKind.DATA:
                    return block
                if kind is BlockKind.TOTALS:
                    self._totals = block
                else:
                    self._extremes = block
        except Exception as exc:
            self.error = exc
            self._exhausted = True
            raise
        self._exhausted = True
        return None

    def next_row(self) -> tuple[Any, ...] | None:
        """Return the next row, or None when there are no more rows."""
        if self._block is None or self._offset >= self._block.num_rows:
            block = self._receive()
            if block is None:
                if self.error is not None:
                    raise self.error
                return None
            self._block = block
            self._offset = 0
        row = tuple(column[self._offset] for column in self._block.values)
        self._offset += 1
        return row

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        while (row := self.next_row()) is not None:
            yield row

    def has_next_result_set(self) -> bool:
        return self._totals is not None or self._extremes is not None

    def next_result_set(self) -> bool:
        """Switch to the totals, then the extremes; return False when neither is left."""
        if self._totals is not None:
            self._block, self._totals = self._totals, None
        elif self._extremes is not None:
            self._block, self._extremes = self._extremes, None
        else:
            return False
        self._offset = 0
        return True

    def close(self) -> None:
        """Drain what is left of the stream and release the query."""
        self.columns = []
        try:
            while self._receive() is not None:
                pass
        except Exception:
            pass
        if not self._closed:
            self._closed = True
            if self._finish is not None:
                self._finish()

    def __enter__(self) -> Rows:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()