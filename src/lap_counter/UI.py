import typing as tp
from datetime import datetime

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import (
    Button, ContentSwitcher, Footer, Header, Static,
)

from .shared import titled, utcNow
from .channel import Channel
from .errors import StorageUnavailable, WriteFailed
from .formatter import LongStyleFormatter
from .lap_controller import LapController
from .lap_list import LapList
from .store_interface import LapStoreInterface

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding("l", "lap", "Lap."),
        Binding("q", "quit", "Quit."),
    ]

    def __init__(
        self,
        store: LapStoreInterface,
        formatter: LongStyleFormatter | None = None,
        poll_seconds: float = 0.0,
        clock: tp.Callable[[], datetime] = utcNow,
    ) -> None:
        '''
        `poll_seconds`: how often to re-read the store for changes
        made elsewhere. `0` never re-reads.
        '''
        super().__init__()

        self.store = store
        self.poll_seconds = poll_seconds
        self.taps: Channel[None] = Channel()
        self.controller = LapController(
            store, formatter or LongStyleFormatter(), clock=clock,
        )

        self.title = "Laps"

    def run(self, *args, **kw) -> tp.Any | None:
        try:
            return super().run(*args, **kw)
        finally:
            self.controller.deactivate()

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with Horizontal(id="toolbar"):
            yield Static("", id="toolbar-spacer")
            yield Button("Lap", id="lap-btn", variant="primary")
        with ContentSwitcher(id="body", initial="lap-scroller"):
            with titled(VerticalScroll(id="lap-scroller"), 'Laps', skip_bottom=False):
                yield LapList(id="lap-list")
            yield Static("", id="storage-error", markup=False)
        yield Footer(compact=True)

    def on_mount(self) -> None:
        if not self.controller.activate(self, self.taps):
            return
        if self.poll_seconds > 0.0:
            self.set_interval(self.poll_seconds, self.controller.refresh)
        self.query_one('#lap-btn', Button).focus()

    def on_unmount(self) -> None:
        self.controller.deactivate()

    @on(Button.Pressed, '#lap-btn')
    def action_lap(self) -> None:
        self.taps.emit(None)

    def setTitle(self, text: str) -> None:
        self.title = text

    def setRows(self, rows: tp.Sequence[str]) -> None:
        self.query_one('#lap-list', LapList).setRows(rows)

    def showStorageUnavailable(self, error: StorageUnavailable) -> None:
        sError: Static = self.query_one('#storage-error', Static)
        cause = error.__cause__
        text = f'Laps are unavailable.\n\n{error}'
        if cause is not None:
            text += f'\n{cause}'
        sError.update(text)
        switcher: ContentSwitcher = self.query_one('#body', ContentSwitcher)
        switcher.current = 'storage-error'
        self.query_one('#lap-btn', Button).disabled = True
        self.title = "Laps unavailable"

    def reportWriteFailed(self, error: WriteFailed) -> None:
        self.notify(
            str(error), title="Lap not saved", severity="error",
        )
