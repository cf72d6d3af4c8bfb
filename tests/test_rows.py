import pytest

from chdriver.rows import Block, BlockKind, Rows


def _data(*columns):
    return (BlockKind.DATA, Block([list(column) for column in columns]))


def _failing_packets(failure):
    yield _data([1])
    raise failure


def _counting_packets(consumed):
    for value in (1, 2, 3):
        consumed.append(value)
        yield _data([value])


def _late_failure_packets():
    yield from ()
    raise RuntimeError("late failure")


def test_block_counts():
    block = Block([[1, 2, 3], ["a", "b", "c"]])
    assert block.num_columns == 2
    assert block.num_rows == 3
    assert Block().num_rows == 0


def test_block_rejects_ragged_columns():
    with pytest.raises(ValueError):
        Block([[1, 2], [1]])


def test_rows_across_blocks_in_order():
    packets = [_data([1, 2], ["a", "b"]), _data([3], ["c"])]
    rows = Rows(["n", "s"], packets)
    assert list(rows) == [(1, "a"), (2, "b"), (3, "c")]
    assert rows.next_row() is None


def test_empty_blocks_are_skipped():
    packets = [_data([], []), _data([7], ["x"]), _data([], [])]
    rows = Rows(["n", "s"], packets)
    assert list(rows) == [(7, "x")]


def test_totals_and_extremes_as_further_result_sets():
    packets = [
        _data([1, 2]),
        (BlockKind.TOTALS, Block([[3]])),
        (BlockKind.EXTREMES, Block([[1, 2]])),
    ]
    rows = Rows(["n"], packets)
    assert list(rows) == [(1,), (2,)]
    assert rows.has_next_result_set()
    assert rows.next_result_set() is True
    assert list(rows) == [(3,)]
    assert rows.has_next_result_set()
    assert rows.next_result_set() is True
    assert list(rows) == [(1,), (2,)]
    assert not rows.has_next_result_set()
    assert rows.next_result_set() is False


def test_stream_error_is_raised_and_kept():
    failure = RuntimeError("broken stream")
    rows = Rows(["n"], _failing_packets(failure))
    assert rows.next_row() == (1,)
    with pytest.raises(RuntimeError, match="broken stream"):
        rows.next_row()
    assert rows.error is failure
    with pytest.raises(RuntimeError, match="broken stream"):
        rows.next_row()


def test_unexpected_packet_kind():
    rows = Rows(["n"], [("bogus", Block([[1]]))])
    with pytest.raises(ValueError, match="unexpected packet"):
        rows.next_row()


def test_close_drains_stream_and_calls_finish_once():
    consumed = []
    finished = []
    rows = Rows(["n"], _counting_packets(consumed), finish=lambda: finished.append(True))
    assert rows.next_row() == (1,)
    rows.close()
    assert consumed == [1, 2, 3]
    assert rows.columns == []
    rows.close()
    assert finished == [True]


def test_close_ignores_stream_errors():
    finished = []
    rows = Rows(["n"], _late_failure_packets(), finish=lambda: finished.append(True))
    rows.close()
    assert finished == [True]
    assert isinstance(rows.error, RuntimeError)


def test_context_manager_closes():
    finished = []
    with Rows(["n"], [_data([5])], finish=lambda: finished.append(True)) as rows:
        assert rows.columns == ["n"]
        assert rows.next_row() == (5,)
    assert finished == [True]
    assert rows.columns == []