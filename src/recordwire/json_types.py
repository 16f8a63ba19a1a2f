"""JSON-like value types used at the wire boundary.

Record trees crossing ``deserialize``/``serialize`` are plain JSON data; these
aliases keep that value space explicit instead of falling back to ``Any``.
"""

from __future__ import annotations

from typing import TypeAlias

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]
WireInput: TypeAlias = str | bytes | bytearray | JSONObject | None
