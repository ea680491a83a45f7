"""
Editor view host tests: container sharing, lifecycle fan-out and the
release of event handles on dispose.
"""

from architecture import Controller
from core.unregister import unregister_when_disposed
from demo.score import AddScore, ScoreChanged
from editor.view import EditorView, ViewContainer, ViewHost


class RecordingView(EditorView):
    def __init__(self, name: str, log: list):
        self.name = name
        self.log = log

    def init(self, container: ViewContainer) -> None:
        super().init(container)
        self.log.append((self.name, "init"))

    def on_update(self) -> None:
        self.log.append((self.name, "update"))

    def on_gui(self) -> None:
        self.log.append((self.name, "gui"))

    def on_show(self) -> None:
        self.log.append((self.name, "show"))

    def on_hide(self) -> None:
        self.log.append((self.name, "hide"))

    def on_dispose(self) -> None:
        self.log.append((self.name, "dispose"))


class ListView(RecordingView):
    pass


class DetailView(RecordingView):
    pass


class TestViewHost:
    def test_views_share_the_container(self):
        log = []
        host = ViewHost()
        list_view = host.add_view(ListView("list", log))
        detail_view = host.add_view(DetailView("detail", log))

        assert list_view.container is host.container
        assert detail_view.container.get(ListView) is list_view
        assert list_view.container.get(DetailView) is detail_view

    def test_lifecycle_fans_out_in_add_order(self):
        log = []
        host = ViewHost()
        host.add_view(ListView("list", log))
        host.add_view(DetailView("detail", log))

        host.show()
        host.update()
        host.gui()
        host.hide()

        assert log == [
            ("list", "init"), ("detail", "init"),
            ("list", "show"), ("detail", "show"),
            ("list", "update"), ("detail", "update"),
            ("list", "gui"), ("detail", "gui"),
            ("list", "hide"), ("detail", "hide"),
        ]

    def test_gui_skipped_while_hidden(self):
        log = []
        host = ViewHost()
        host.add_view(ListView("list", log))

        host.gui()

        assert ("list", "gui") not in log

    def test_view_added_while_visible_is_shown(self):
        log = []
        host = ViewHost()
        host.show()

        host.add_view(ListView("list", log))

        assert log == [("list", "init"), ("list", "show")]

    def test_add_view_without_registering(self):
        host = ViewHost()

        host.add_view(ListView("list", []), register=False)

        assert host.container.get(ListView) is None

    def test_dispose_hides_disposes_and_clears(self):
        log = []
        host = ViewHost()
        host.add_view(ListView("list", log))
        host.show()

        host.dispose()

        assert log[-2:] == [("list", "hide"), ("list", "dispose")]
        assert host.views == []


class ScoreView(EditorView, Controller):
    """A view that listens to the score architecture as a controller."""

    def __init__(self, arch):
        self._arch = arch
        self.seen: list[int] = []

    def get_architecture(self):
        return self._arch

    def init(self, container: ViewContainer) -> None:
        super().init(container)
        unregister_when_disposed(self.register_event(ScoreChanged, self._on_changed), self)

    def _on_changed(self, e: ScoreChanged) -> None:
        self.seen.append(e.score)


class TestViewEventRelease:
    def test_dispose_releases_view_handles(self, score_arch):
        host = ViewHost()
        view = host.add_view(ScoreView(score_arch))

        view.send_command(AddScore(2))
        host.dispose()
        score_arch.send_command(AddScore(3))

        assert view.seen == [2]
