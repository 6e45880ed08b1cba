"""LIFO plan stack consumed by the executor."""

from __future__ import annotations

from typing import Iterable, Iterator

from src.planning.actions import SymbolicAction


class Plan:
    """Remaining work, consumed from the top only.

    ``from_sequence`` pushes actions in reverse so that the first action of
    an ordered plan is the first one popped.
    """

    __slots__ = ("_stack",)

    def __init__(self, actions: Iterable[SymbolicAction] = ()) -> None:
        self._stack: list[SymbolicAction] = list(actions)

    @classmethod
    def from_sequence(cls, ordered: Iterable[SymbolicAction]) -> Plan:
        plan = cls()
        for action in reversed(list(ordered)):
            plan.push(action)
        return plan

    def push(self, action: SymbolicAction) -> None:
        self._stack.append(action)

    def pop(self) -> SymbolicAction:
        if not self._stack:
            raise IndexError("pop from an empty plan")
        return self._stack.pop()

    def peek(self) -> SymbolicAction | None:
        return self._stack[-1] if self._stack else None

    @property
    def empty(self) -> bool:
        return not self._stack

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self) -> Iterator[SymbolicAction]:
        """Iterate in execution order (top first)."""
        return reversed(self._stack)

    def __repr__(self) -> str:
        return f"Plan(remaining={len(self._stack)}, next={self.peek()!r})"
