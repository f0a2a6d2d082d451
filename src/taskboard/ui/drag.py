"""Mouse drag-and-drop for tickets.

DraggableMixin goes on the widget being carried; DropTarget goes on the
container that can receive it. The screen routes mouse events to the
active draggable once a drag is under way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.geometry import Offset
from textual.widgets import Static

if TYPE_CHECKING:
    from textual.widget import Widget


class DropTarget:
    """Mixin for widgets that can accept drops.

    Returning False from a hook lets the search continue outwards.
    """

    def drag_over(self, draggable: DraggableMixin, x: int, y: int) -> bool:
        return False

    def drag_away(self, draggable: DraggableMixin) -> None:
        pass

    def try_drop(self, draggable: DraggableMixin, x: int, y: int) -> bool:
        return False


class DraggableMixin:
    """Mixin for widgets that can be dragged.

    Subclasses call _init_draggable() in __init__ and implement
    draggable_make_ghost() and draggable_clicked().
    """

    DRAG_THRESHOLD = 2

    def _init_draggable(self) -> None:
        self._drag_start_pos: Offset | None = None
        self._ghost: Widget | None = None
        self._drag_offset = Offset(0, 0)
        self._current_target: DropTarget | None = None

    def on_mouse_down(self, event) -> None:
        if event.button != 1:
            return
        event.stop()
        event.prevent_default()
        self._drag_start_pos = Offset(event.screen_x, event.screen_y)
        self.capture_mouse()

    def on_mouse_move(self, event) -> None:
        if self._drag_start_pos is None:
            return
        event.stop()
        event.prevent_default()
        dx = abs(event.screen_x - self._drag_start_pos.x)
        dy = abs(event.screen_y - self._drag_start_pos.y)
        if dx > self.DRAG_THRESHOLD or dy > self.DRAG_THRESHOLD:
            self.release_mouse()
            start = self._drag_start_pos
            self._drag_start_pos = None
            self._drag_start(start)

    def on_mouse_up(self, event) -> None:
        event.stop()
        event.prevent_default()
        self.release_mouse()
        if self._drag_start_pos is not None:
            self._drag_start_pos = None
            self.draggable_clicked()

    def _drag_start(self, mouse_pos: Offset) -> None:
        self.add_class("dragging")
        self.screen.set_focus(None)

        region = self.region
        self._drag_offset = Offset(mouse_pos.x - region.x, mouse_pos.y - region.y)

        self._ghost = self.draggable_make_ghost()
        self._ghost.styles.width = region.width
        self._ghost.styles.offset = (region.x, region.y)
        self.screen.mount(self._ghost)

        self.screen._active_draggable = self
        self.screen.capture_mouse()

    def _drag_move(self, x: int, y: int) -> None:
        """Called by the screen on mouse move during a drag."""
        if self._ghost is not None:
            self._ghost.styles.offset = (x - self._drag_offset.x, y - self._drag_offset.y)

        targets = self._drop_targets_at(x, y)
        new_target = targets[0] if targets else None
        if new_target is None:
            # Keep the last placeholder where it was.
            return
        if new_target is not self._current_target and self._current_target is not None:
            self._current_target.drag_away(self)
        self._current_target = new_target
        new_target.drag_over(self, x, y)

    def _drag_finish(self, x: int, y: int) -> None:
        """Called by the screen on mouse-up. Try targets innermost-out."""
        self.screen.release_mouse()

        dropped = any(target.try_drop(self, x, y) for target in self._drop_targets_at(x, y))
        if not dropped and self._current_target is not None:
            dropped = self._current_target.try_drop(self, x, y)

        if not dropped:
            self._drag_cancel()
            return
        self._current_target = None
        self._drag_cleanup()

    def _drag_cancel(self) -> None:
        self.screen.release_mouse()
        if self._current_target is not None:
            self._current_target.drag_away(self)
            self._current_target = None
        self._drag_cleanup()

    def _drag_cleanup(self) -> None:
        if self._ghost is not None:
            self._ghost.remove()
        self._ghost = None
        self._drag_offset = Offset(0, 0)
        self.remove_class("dragging")
        if hasattr(self.screen, "_active_draggable"):
            self.screen._active_draggable = None

    def _drop_targets_at(self, x: int, y: int) -> list[DropTarget]:
        """All DropTargets under the pointer, innermost first, ghost excluded."""
        targets: list[DropTarget] = []
        for widget, _region in self.screen.get_widgets_at(x, y):
            if self._ghost is not None and (widget is self._ghost or self._ghost in widget.ancestors):
                continue
            candidate = widget
            while candidate is not None:
                if isinstance(candidate, DropTarget) and candidate is not self and candidate not in targets:
                    targets.append(candidate)
                candidate = candidate.parent
        return targets

    def draggable_make_ghost(self) -> Widget:
        raise NotImplementedError

    def draggable_clicked(self) -> None:
        raise NotImplementedError


class DragGhost(Static):
    """Floating copy of the ticket being dragged."""

    DEFAULT_CSS = """
    DragGhost {
        layer: overlay;
        height: auto;
        background: $primary;
        padding: 0 1;
        opacity: 0.8;
    }
    """

    def __init__(self, title: str):
        super().__init__(title, markup=False)


class TicketPlaceholder(Static):
    """Marks where a dragged ticket will land."""

    DEFAULT_CSS = """
    TicketPlaceholder {
        width: 100%;
        height: 1;
        margin-bottom: 1;
        border: none;
        background: $primary-darken-2;
    }
    """
