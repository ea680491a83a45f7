"""Editor view contract and a render-free host that drives it.

A window owns a ViewHost; the host hands every view the same
ViewContainer so views can find each other by type, and forwards the
window's lifecycle calls to each view in the order they were added.
"""

from __future__ import annotations

import logging
from typing import Optional

from core.registry import TypeRegistry
from core.unregister import UnregisterTrigger

logger = logging.getLogger(__name__)


class ViewContainer(TypeRegistry):
    """Shared lookup of view instances by type."""


class EditorView:
    """Base for editor views. Every hook defaults to a no-op."""

    container: Optional[ViewContainer] = None

    def init(self, container: ViewContainer) -> None:
        self.container = container

    def on_update(self) -> None:
        pass

    def on_gui(self) -> None:
        pass

    def on_show(self) -> None:
        pass

    def on_hide(self) -> None:
        pass

    def on_dispose(self) -> None:
        pass


class ViewHost:
    """Owns a set of views and their shared container."""

    def __init__(self, container: Optional[ViewContainer] = None):
        self.container = container if container is not None else ViewContainer()
        self.views: list[EditorView] = []
        self.visible = False

    def add_view(self, view: EditorView, register: bool = True) -> EditorView:
        """Attach ``view``, optionally publish it in the container, then init it."""
        if register:
            self.container.register(view)
        view.init(self.container)
        self.views.append(view)
        if self.visible:
            view.on_show()
        return view

    def show(self) -> None:
        if self.visible:
            return
        self.visible = True
        for view in list(self.views):
            view.on_show()

    def hide(self) -> None:
        if not self.visible:
            return
        self.visible = False
        for view in list(self.views):
            view.on_hide()

    def update(self) -> None:
        for view in list(self.views):
            view.on_update()

    def gui(self) -> None:
        if not self.visible:
            return
        for view in list(self.views):
            view.on_gui()

    def dispose(self) -> None:
        """Dispose every view and release the handles tied to it."""
        logger.debug("Disposing %d view(s)", len(self.views))
        self.hide()
        for view in list(self.views):
            view.on_dispose()
            UnregisterTrigger.of(view).fire()
        self.views.clear()
