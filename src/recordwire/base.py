from __future__ import annotations


class RecordBase:
    """Nominal marker for schema-bearing instances.

    The engine modules test against this class rather than ``Record`` so
    they can be imported before the public ``Record`` API is assembled.
    """

    __slots__ = ()
