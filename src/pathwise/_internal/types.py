"""The ``UNSET`` sentinel shared across pathwise modules."""

from typing import Any, Final


class _Unset:
    """Sentinel for "no value", distinct from ``None``.

    ``None`` is an ordinary value (it serializes to JSON ``null``).
    ``UNSET`` means the key should not exist: it leaves template
    placeholders unresolved, is pruned from query strings, and deletes
    keys during a merge.
    """

    __slots__ = ()
    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Unset":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_Unset":
        return self

    def __reduce__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset()
