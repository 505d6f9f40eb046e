"""Station input state."""

from dataclasses import dataclass, field

from sncf_departures.domain.models.place import Place

MIN_QUERY_LEN = 2


@dataclass
class InputState:
    """Free-text station query and the suggestions it produced.

    Edit times are monotonic clock readings in seconds.
    """

    text: str = ""
    cursor: int = 0
    suggestions: list[Place] = field(default_factory=list)
    selected: int = 0
    last_edit_at: float = 0.0
    last_queried: str = ""
    loading: bool = False
    error: str | None = None

    def insert(self, char: str, now: float) -> None:
        """Insert a character at the cursor."""
        self.text = self.text[: self.cursor] + char + self.text[self.cursor :]
        self.cursor += len(char)
        self.last_edit_at = now

    def backspace(self, now: float) -> None:
        """Delete the character before the cursor."""
        if 0 < self.cursor <= len(self.text):
            self.text = self.text[: self.cursor - 1] + self.text[self.cursor :]
            self.cursor -= 1
            self.last_edit_at = now

    def move_left(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_right(self) -> None:
        if self.cursor < len(self.text):
            self.cursor += 1

    def select_previous(self) -> None:
        if self.selected > 0:
            self.selected -= 1

    def select_next(self) -> None:
        if self.selected + 1 < len(self.suggestions):
            self.selected += 1

    def selected_suggestion(self) -> Place | None:
        """Return the highlighted suggestion, if any."""
        if 0 <= self.selected < len(self.suggestions):
            return self.suggestions[self.selected]
        return None

    def reset(self) -> None:
        """Clear the query, its suggestions and any error."""
        self.text = ""
        self.cursor = 0
        self.suggestions = []
        self.selected = 0
        self.last_queried = ""
        self.loading = False
        self.error = None

    def status_line(self, min_query_len: int = MIN_QUERY_LEN) -> str | None:
        """Message to show instead of the suggestion list, or None to show the list."""
        if self.loading:
            return "Loading..."
        if self.error is not None:
            return f"Error: {self.error}"
        if not self.suggestions and len(self.text) >= min_query_len:
            return "No results"
        return None
