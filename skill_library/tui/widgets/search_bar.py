"""Search Bar Widget - Live search over skill titles and descriptions"""

from textual.binding import Binding
from textual.message import Message
from textual.widgets import Input


class SearchBar(Input):
    """Search input with live filtering; escape clears, then leaves"""

    DEFAULT_CSS = """
    SearchBar {
        width: 1fr;
    }
    """

    BINDINGS = [
        Binding("escape", "clear_search", "Clear Search", show=False),
    ]

    class SearchChanged(Message):
        """Sent when search text changes"""

        def __init__(self, query: str) -> None:
            self.query = query
            super().__init__()

    class Dismissed(Message):
        """Sent when escape is pressed on an empty search"""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("placeholder", "Search title or description... (esc to clear)")
        super().__init__(*args, **kwargs)

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.SearchChanged(event.value))

    def action_clear_search(self) -> None:
        """Empty a non-blank query, otherwise hand focus back to the app."""
        if self.value:
            # Input.Changed follows, which resets the store query
            self.value = ""
        else:
            self.post_message(self.Dismissed())
