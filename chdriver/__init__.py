"""Client-side building blocks for a columnar database driver: query settings, word matching, TLS registry, value types and result rows."""

__version__ = "0.1.0"
__all__ = ["query_settings", "result", "word_matcher", "tls_config", "types", "rows"]