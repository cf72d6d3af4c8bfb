"""Query settings taken from connection parameters and encoded for the native protocol."""

from __future__ import annotations

import enum
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from urllib.parse import parse_qs

_UINT64_LIMIT = 1 << 64
_DIGITS = re.compile(r"[0-9]+")

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class SettingType(enum.Enum):
    """Data type of a query setting."""

    UINT = 1
    INT = 2
    BOOL = 3
    TIME = 4


_UINT_SETTINGS = (
    "min_compress_block_size",
    "max_compress_block_size",
    "max_block_size",
    "max_insert_block_size",
    "min_insert_block_size_rows",
    "min_insert_block_size_bytes",
    "max_read_buffer_size",
    "max_distributed_connections",
    "max_query_size",
    "interactive_delay",
    "poll_interval",
    "distributed_connections_pool_size",
    "connections_with_failover_max_tries",
    "background_pool_size",
    "background_schedule_pool_size",
    "replication_alter_partitions_sync",
    "replication_alter_columns_timeout",
    "min_count_to_compile",
    "min_count_to_compile_expression",
    "group_by_two_level_threshold",
    "group_by_two_level_threshold_bytes",
    "aggregation_memory_efficient_merge_threads",
    "max_parallel_replicas",
    "parallel_replicas_count",
    "parallel_replica_offset",
    "merge_tree_min_rows_for_concurrent_read",
    "merge_tree_min_bytes_for_concurrent_read",
    "merge_tree_min_rows_for_seek",
    "merge_tree_min_bytes_for_seek",
    "merge_tree_coarse_index_granularity",
    "merge_tree_max_rows_to_use_cache",
    "merge_tree_max_bytes_to_use_cache",
    "mysql_max_rows_to_insert",
    "optimize_min_equality_disjunction_chain_length",
    "min_bytes_to_use_direct_io",
    "mark_cache_min_lifetime",
    "priority",
    "log_queries_cut_to_length",
    "max_concurrent_queries_for_user",
    "insert_quorum",
    "select_sequential_consistency",
    "table_function_remote_max_addresses",
    "read_backoff_max_throughput",
    "read_backoff_min_events",
    "output_format_pretty_max_rows",
    "output_format_pretty_max_column_pad_width",
    "output_format_parquet_row_group_size",
    "http_headers_progress_interval_ms",
    "input_format_allow_errors_num",
    "preferred_block_size_bytes",
    "max_replica_delay_for_distributed_queries",
    "preferred_max_column_in_block_size_bytes",
    "insert_distributed_timeout",
    "odbc_max_field_size",
    "max_rows_to_read",
    "max_bytes_to_read",
    "max_rows_to_group_by",
    "max_bytes_before_external_group_by",
    "max_rows_to_sort",
    "max_bytes_to_sort",
    "max_bytes_before_external_sort",
    "max_bytes_before_remerge_sort",
    "max_result_rows",
    "max_result_bytes",
    "min_execution_speed",
    "max_execution_speed",
    "min_execution_speed_bytes",
    "max_execution_speed_bytes",
    "max_columns_to_read",
    "max_temporary_columns",
    "max_temporary_non_const_columns",
    "max_subquery_depth",
    "max_pipeline_depth",
    "max_ast_depth",
    "max_ast_elements",
    "max_expanded_ast_elements",
    "readonly",
    "max_rows_in_set",
    "max_bytes_in_set",
    "max_rows_in_join",
    "max_bytes_in_join",
    "max_rows_to_transfer",
    "max_bytes_to_transfer",
    "max_rows_in_distinct",
    "max_bytes_in_distinct",
    "max_memory_usage",
    "max_memory_usage_for_user",
    "max_memory_usage_for_all_queries",
    "max_network_bandwidth",
    "max_network_bytes",
    "max_network_bandwidth_for_user",
    "max_network_bandwidth_for_all_users",
    "low_cardinality_max_dictionary_size",
    "max_fetch_partition_retries_count",
    "http_max_multipart_form_data_size",
    "max_partitions_per_insert_block",
    "max_threads",
    "optimize_skip_unused_shards_nesting",
    "force_optimize_skip_unused_shards",
    "force_optimize_skip_unused_shards_nesting",
)

_INT_SETTINGS = (
    "network_zstd_compression_level",
    "http_zlib_compression_level",
    "distributed_ddl_task_timeout",
)

_BOOL_SETTINGS = (
    "extremes",
    "use_uncompressed_cache",
    "replace_running_query",
    "distributed_directory_monitor_batch_inserts",
    "optimize_move_to_prewhere",
    "compile",
    "allow_suspicious_low_cardinality_types",
    "compile_expressions",
    "distributed_aggregation_memory_efficient",
    "skip_unavailable_shards",
    "distributed_group_by_no_merge",
    "optimize_skip_unused_shards",
    "merge_tree_uniform_read_distribution",
    "force_index_by_date",
    "force_primary_key",
    "log_queries",
    "insert_deduplicate",
    "enable_http_compression",
    "http_native_compression_disable_checksumming_on_decompress",
    "output_format_write_statistics",
    "add_http_cors_header",
    "input_format_skip_unknown_fields",
    "input_format_with_names_use_header",
    "input_format_import_nested_json",
    "input_format_defaults_for_omitted_fields",
    "input_format_values_interpret_expressions",
    "output_format_json_quote_64bit_integers",
    "output_format_json_quote_denormals",
    "output_format_json_escape_forward_slashes",
    "output_format_pretty_color",
    "use_client_time_zone",
    "send_progress_in_http_headers",
    "fsync_metadata",
    "join_use_nulls",
    "fallback_to_stale_replicas_for_distributed_queries",
    "insert_distributed_sync",
    "insert_allow_materialized_columns",
    "optimize_throw_if_noop",
    "use_index_for_in_with_subqueries",
    "empty_result_for_aggregation_by_empty_set",
    "allow_distributed_ddl",
    "join_any_take_last_row",
    "format_csv_allow_single_quotes",
    "format_csv_allow_double_quotes",
    "log_profile_events",
    "log_query_settings",
    "log_query_threads",
    "enable_optimize_predicate_expression",
    "low_cardinality_use_single_dictionary_for_part",
    "decimal_check_overflow",
    "prefer_localhost_replica",
    "calculate_text_stack_trace",
    "allow_ddl",
    "parallel_view_processing",
    "enable_debug_queries",
    "enable_unaligned_array_join",
    "low_cardinality_allow_in_native_format",
    "allow_experimental_multiple_joins_emulation",
    "allow_experimental_cross_to_join_conversion",
    "cancel_http_readonly_queries_on_client_close",
    "external_table_functions_use_nulls",
    "allow_experimental_data_skipping_indices",
    "allow_hyperscan",
    "allow_simdjson",
)

_TIME_SETTINGS = (
    "connect_timeout",
    "connect_timeout_with_failover_ms",
    "receive_timeout",
    "send_timeout",
    "tcp_keep_alive_timeout",
    "queue_max_wait_ms",
    "distributed_directory_monitor_sleep_time_ms",
    "insert_quorum_timeout",
    "read_backoff_min_latency_ms",
    "read_backoff_min_interval_between_events_ms",
    "stream_flush_interval_ms",
    "stream_poll_timeout_ms",
    "http_connection_timeout",
    "http_send_timeout",
    "http_receive_timeout",
    "max_execution_time",
    "timeout_before_checking_execution_speed",
)

#: Every known query setting with its data type, in processing order.
QUERY_SETTINGS: tuple[tuple[str, SettingType], ...] = (
    *((name, SettingType.UINT) for name in _UINT_SETTINGS),
    *((name, SettingType.INT) for name in _INT_SETTINGS),
    *((name, SettingType.BOOL) for name in _BOOL_SETTINGS),
    *((name, SettingType.TIME) for name in _TIME_SETTINGS),
)


def encode_uvarint(value: int) -> bytes:
    """Encode an unsigned 64-bit integer as a LEB128 varint."""
    if not 0 <= value < _UINT64_LIMIT:
        raise ValueError(f"value {value} does not fit in an unsigned 64-bit integer")
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def encode_string(value: str) -> bytes:
    """Encode a string as its varint byte length followed by its UTF-8 bytes."""
    raw = value.encode("utf-8")
    return encode_uvarint(len(raw)) + raw


def _parse_uint(text: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text)
    if value >= _UINT64_LIMIT:
        raise ValueError(f"value out of range: {text!r}")
    return value


def _parse_bool(text: str) -> int:
    if text in _TRUE_WORDS:
        return 1
    if text in _FALSE_WORDS:
        return 0
    raise ValueError(f"invalid boolean: {text!r}")


@dataclass
class QuerySettings:
    """Settings to be sent along with a query; values are already encoded as integers."""

    settings: dict[str, int] = field(default_factory=dict)
    text: str = ""

    def is_empty(self) -> bool:
        return not self.settings

    def serialize(self) -> bytes:
        """Return each setting as an encoded name followed by its varint value."""
        return b"".join(
            encode_string(name) + encode_uvarint(value)
            for name, value in self.settings.items()
        )


def _first_value(query: Mapping[str, str | Sequence[str]], name: str) -> str:
    value = query.get(name)
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value[0] if value else ""


def parse_query_settings(query: str | Mapping[str, str | Sequence[str]]) -> QuerySettings:
    """Pick the known settings out of a query string or parameter mapping.

    Empty or absent values are ignored; malformed values raise ValueError.
    """
    if isinstance(query, str):
        query = parse_qs(query, keep_blank_values=True)

    result = QuerySettings()
    pieces: list[str] = []
    for name, kind in QUERY_SETTINGS:
        text = _first_value(query, name)
        if not text:
            continue
        if kind is SettingType.BOOL:
            result.settings[name] = _parse_bool(text)
        else:
            result.settings[name] = _parse_uint(text)
        pieces.append(f"{name}={text}")
    result.text = "&".join(pieces)
    return result