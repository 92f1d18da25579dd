"""
Scheduled node actions: timed moves, waits, callbacks, removal, and the
sequence / repeat combinators that chain them.

Every action keeps its own progress record and is advanced explicitly by
``Node.update(dt)`` once per frame. ``update`` returns True once the action has
finished; ``leftover`` then holds the part of ``dt`` it did not consume so a
``Sequence`` can hand it to the next step in the same frame.
"""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from .vector import Point

if TYPE_CHECKING:
    from .nodes import Node


class Action:
    """Base class. Subclasses implement ``update`` and ``copy``."""

    def __init__(self) -> None:
        self.leftover = 0.0
        self.finished = False

    def update(self, node: Node, dt: float) -> bool:
        raise NotImplementedError

    def copy(self) -> Action:
        """Return a fresh, unstarted action with the same parameters."""
        raise NotImplementedError

    def _finish(self, leftover: float) -> bool:
        self.finished = True
        self.leftover = max(0.0, leftover)
        return True


class MoveTo(Action):
    """Move a node linearly to ``destination`` over ``duration`` seconds."""

    def __init__(self, destination: Point, duration: float) -> None:
        super().__init__()
        self.destination = destination
        self.duration = duration
        self.start: Point | None = None
        self.elapsed = 0.0

    def update(self, node: Node, dt: float) -> bool:
        if self.finished:
            return True
        if self.start is None:
            self.start = node.position
        self.elapsed += dt
        if self.duration <= 0 or self.elapsed >= self.duration:
            node.position = self.destination
            return self._finish(self.elapsed - max(self.duration, 0.0))
        t = self.elapsed / self.duration
        node.position = self.start + (self.destination - self.start) * t
        return False

    def copy(self) -> MoveTo:
        return MoveTo(self.destination, self.duration)


class Wait(Action):
    """Do nothing for ``duration`` seconds."""

    def __init__(self, duration: float) -> None:
        super().__init__()
        self.duration = duration
        self.elapsed = 0.0

    def update(self, node: Node, dt: float) -> bool:
        if self.finished:
            return True
        self.elapsed += dt
        if self.elapsed >= self.duration:
            return self._finish(self.elapsed - self.duration)
        return False

    def copy(self) -> Wait:
        return Wait(self.duration)


class RunBlock(Action):
    """Call ``fn()`` once, instantly."""

    def __init__(self, fn: Callable[[], object]) -> None:
        super().__init__()
        self.fn = fn

    def update(self, node: Node, dt: float) -> bool:
        if not self.finished:
            self.fn()
            self._finish(dt)
        return True

    def copy(self) -> RunBlock:
        return RunBlock(self.fn)


class RemoveFromParent(Action):
    """Detach the running node from the scene graph."""

    def update(self, node: Node, dt: float) -> bool:
        if not self.finished:
            node.remove_from_parent()
            self._finish(dt)
        return True

    def copy(self) -> RemoveFromParent:
        return RemoveFromParent()


class Sequence(Action):
    """Run ``actions`` one after another."""

    def __init__(self, actions: list[Action]) -> None:
        super().__init__()
        self.actions = list(actions)
        self.index = 0

    def update(self, node: Node, dt: float) -> bool:
        if self.finished:
            return True
        while self.index < len(self.actions):
            current = self.actions[self.index]
            if not current.update(node, dt):
                return False
            dt = current.leftover
            self.index += 1
        return self._finish(dt)

    def copy(self) -> Sequence:
        return Sequence([a.copy() for a in self.actions])


class RepeatForever(Action):
    """Restart a fresh copy of ``action`` every time it finishes."""

    def __init__(self, action: Action) -> None:
        super().__init__()
        self.template = action
        self.current = action.copy()

    def update(self, node: Node, dt: float) -> bool:
        while self.current.update(node, dt):
            consumed = dt - self.current.leftover
            dt = self.current.leftover
            self.current = self.template.copy()
            # A cycle that takes no time would spin forever; resume next frame
            if consumed <= 0:
                break
        return False

    def copy(self) -> RepeatForever:
        return RepeatForever(self.template)
