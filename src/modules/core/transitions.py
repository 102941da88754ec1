"""Role-aware status transition tables.

A ``TransitionTable`` maps ``(current_status, role)`` to the set of
statuses that actor may move the record to.  Anything not listed is
rejected; terminal states simply have no outgoing entries.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, Mapping


class TransitionTable:
    def __init__(self, rules: Mapping[str, Mapping[str, Iterable[str]]]) -> None:
        # rules: role -> current status -> allowed next statuses
        self._rules: Dict[str, Dict[str, FrozenSet[str]]] = {
            str(role): {
                str(current): frozenset(str(s) for s in allowed)
                for current, allowed in by_status.items()
            }
            for role, by_status in rules.items()
        }

    def allowed(self, current: str, role: str) -> FrozenSet[str]:
        """Return the statuses *role* may move a record in *current* to."""
        return self._rules.get(str(role), {}).get(str(current), frozenset())

    def can_transition(self, current: str, new: str, role: str) -> bool:
        return str(new) in self.allowed(current, role)

    def is_terminal(self, current: str) -> bool:
        """``True`` when no role can move a record out of *current*."""
        return not any(by_status.get(str(current)) for by_status in self._rules.values())
