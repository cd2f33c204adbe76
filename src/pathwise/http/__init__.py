"""Query string encoding and decoding for structured search params."""

from pathwise.http.query import decode_query, decode_value, encode_query, prune_unset

__all__ = ["decode_query", "decode_value", "encode_query", "prune_unset"]
