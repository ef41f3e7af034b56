from typing import Any, List


class ParameterBinder:
    """
    Collects positional bind values for one statement.

    Every call to bind() appends the value and returns the ``$N`` placeholder
    pointing at it, so placeholders come out numbered in the order clauses are
    added and always line up with ``values``.
    """

    def __init__(self):
        self._values: List[Any] = []

    def bind(self, value: Any) -> str:
        self._values.append(value)
        return f"${len(self._values)}"

    @property
    def values(self) -> List[Any]:
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)
