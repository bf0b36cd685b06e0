"""src/urikit/params/__init__.py

Query parameter storage and serialization for Urikit.
"""

from .codec import decode_query, encode_query
from .tree import Value, ValueTree

__all__ = ["ValueTree", "Value", "decode_query", "encode_query"]
