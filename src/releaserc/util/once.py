from __future__ import annotations

import typing as t

T_co = t.TypeVar("T_co", covariant=True)


class Once(t.Generic[T_co]):
    """Calls a supplier function the first time the object is called and returns the cached value afterwards."""

    def __init__(self, supplier: t.Callable[[], T_co]) -> None:
        self._supplier = supplier
        self._cached = False
        self._value: T_co | None = None

    def __repr__(self) -> str:
        return f"Once({self._supplier!r})"

    def __bool__(self) -> bool:
        return self._cached

    def __call__(self) -> T_co:
        if not self._cached:
            self._value = self._supplier()
            self._cached = True
        return t.cast(T_co, self._value)

    def flush(self) -> None:
        self._cached = False
        self._value = None
