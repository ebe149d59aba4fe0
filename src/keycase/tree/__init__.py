"""Tree subpackage for JSON key traversal.

Re-exports the public API for the tree module:
- ValueKind: StrEnum of the six JSON value kinds
- classify: maps a decoded JSON value to its ValueKind
- JsonKeyTransformer: renames object keys through a whole JSON value
- convert_json_keys: functional wrapper around JsonKeyTransformer
"""

from keycase.tree.nodes import JsonValue, ValueKind, classify
from keycase.tree.transformer import JsonKeyTransformer, convert_json_keys

__all__ = ["JsonKeyTransformer", "JsonValue", "ValueKind", "classify", "convert_json_keys"]
