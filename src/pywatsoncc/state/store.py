"""In-memory variable store.

This is the only component allowed to merge status patches.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping


class VariableStore:
    """Mapping of variable identifier to its last reported value.

    Merge semantics are append/overwrite only: a key missing from a newer
    patch keeps its previous value, and nothing is ever removed
    automatically.  That includes keys written under a namespace that has
    since been replaced.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def apply(self, patch: Mapping[str, str]) -> None:
        """Overwrite every key in *patch*; other keys are left alone."""
        if not patch:
            return
        self._values.update(patch)

    def get(self, variable_id: str, default: str | None = None) -> str | None:
        return self._values.get(variable_id, default)

    def snapshot(self) -> dict[str, str]:
        """Copy of the current contents."""
        return dict(self._values)

    def __contains__(self, variable_id: object) -> bool:
        return variable_id in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)
