import typing as tp

from textual.reactive import reactive
from textual.app import RenderResult
from textual.widget import Widget

class LapList(Widget):
    rows: reactive[tuple[str, ...]] = reactive((), layout=True)

    def __init__(
        self, placeholder: str = 'No laps yet.', *args, **kw,
    ) -> None:
        super().__init__(*args, **kw)

        self.placeholder = placeholder
        self.rows = ()

    def setRows(self, rows: tp.Sequence[str]) -> None:
        self.rows = tuple(rows)

    def render(self) -> RenderResult:
        if not self.rows:
            return self.placeholder
        return '\n'.join(self.rows)
