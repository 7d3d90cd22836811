"""Find and replace over a plain-text buffer with a cursor and selection."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = [
    "SearchOptions",
    "TextBuffer",
    "FindReplace",
    "SEARCH_WRAPPED",
    "NO_RESULTS",
]

SEARCH_WRAPPED = "Search wrapped"
NO_RESULTS = "No results"

Span = tuple[int, int]


@dataclass
class SearchOptions:
    """Toggles that control how the find query is matched."""

    match_case: bool = False
    whole_word: bool = False
    regular_expression: bool = False
    highlight_matches: bool = False


@dataclass
class TextBuffer:
    """Text with a cursor; ``anchor`` differs from ``position`` when text is selected."""

    text: str = ""
    position: int = 0
    anchor: int | None = None
    has_focus: bool = False

    def __post_init__(self) -> None:
        if self.anchor is None:
            self.anchor = self.position
        for value in (self.position, self.anchor):
            if not 0 <= value <= len(self.text):
                raise ValueError(f"cursor position {value} is outside the text")

    @property
    def selection_start(self) -> int:
        return min(self.anchor, self.position)

    @property
    def selection_end(self) -> int:
        return max(self.anchor, self.position)

    def has_selection(self) -> bool:
        """Return True if some text is selected."""
        return self.anchor != self.position

    def selected_text(self) -> str:
        """Return the selected text, or an empty string."""
        return self.text[self.selection_start:self.selection_end]

    def insert_text(self, text: str) -> None:
        """Replace the selection (or insert at the cursor) and place the cursor after it."""
        start = self.selection_start
        self.text = self.text[:start] + text + self.text[self.selection_end:]
        self.position = self.anchor = start + len(text)

    def _replace_range(self, start: int, end: int, replacement: str) -> None:
        self.text = self.text[:start] + replacement + self.text[end:]
        delta = len(replacement) - (end - start)

        def adjust(pos: int) -> int:
            if pos <= start:
                return pos
            if pos >= end:
                return pos + delta
            return start + len(replacement)

        self.position = adjust(self.position)
        self.anchor = adjust(self.anchor)


@dataclass
class FindReplace:
    """Searches a :class:`TextBuffer` for a query and replaces matches."""

    buffer: TextBuffer
    options: SearchOptions = field(default_factory=SearchOptions)
    find_text: str = ""
    replace_text: str = ""
    status: str = ""
    status_error: bool = False
    highlights: list[Span] = field(default_factory=list)

    def find_next(self) -> bool:
        """Select the next match after the cursor, wrapping around; return True if found."""
        return self._find_and_select(backwards=False)

    def find_previous(self) -> bool:
        """Select the previous match before the cursor, wrapping around; return True if found."""
        return self._find_and_select(backwards=True)

    def replace(self) -> bool:
        """Replace the selection with the replacement text, finding a match first if needed."""
        if not self.buffer.has_selection():
            self.find_next()
        if self.buffer.has_selection():
            self.buffer.insert_text(self.replace_text)
            return True
        return False

    def replace_all(self) -> int:
        """Replace every match in the buffer and return the number of replacements."""
        position = 0
        count = 0
        while (match := self._find_match(position, position, wrap=False)) is not None:
            start, end = match
            self.buffer._replace_range(start, end, self.replace_text)
            position = start + len(self.replace_text)
            count += 1

        self.status = f"{count} replacement(s)"
        self.status_error = False
        self.buffer.has_focus = True
        return count

    def highlight_matches(self) -> list[Span]:
        """Return the spans of all matches and remember them as highlights.

        When the buffer does not have focus, its cursor is moved to the
        first match ending at or after the current cursor position.
        """
        matches: list[Span] = []
        moved = False
        position = 0
        while (match := self._find_match(position, position, wrap=False)) is not None:
            matches.append(match)
            if (
                not moved
                and not self.buffer.has_focus
                and match[1] >= self.buffer.position
            ):
                self.buffer.anchor, self.buffer.position = match
                moved = True
            position = match[1]

        self.highlights = matches
        if matches:
            self.status = f"{len(matches)} matches"
            self.status_error = False
        return list(matches)

    def set_query_from_selection(self) -> None:
        """Use the buffer's selected text, if any, as the find query."""
        if self.buffer.has_selection():
            self.find_text = self.buffer.selected_text()

    def _find_and_select(self, *, backwards: bool) -> bool:
        match = self._find_match(
            self.buffer.anchor, self.buffer.position, wrap=True, backwards=backwards
        )
        if match is None:
            return False
        self.buffer.anchor, self.buffer.position = match
        return True

    def _pattern(self) -> re.Pattern[str] | None:
        if not self.find_text:
            return None
        source = (
            self.find_text
            if self.options.regular_expression
            else re.escape(self.find_text)
        )
        flags = 0 if self.options.match_case else re.IGNORECASE
        try:
            return re.compile(source, flags)
        except re.error:
            return None

    def _find_match(
        self, anchor: int, position: int, *, wrap: bool = True, backwards: bool = False
    ) -> Span | None:
        pattern = self._pattern()
        self.status = ""
        self.status_error = False

        wraps = 0
        while wraps < 2:
            match = (
                self._search(pattern, anchor, position, backwards)
                if pattern is not None
                else None
            )
            if match is not None:
                return match
            if not wrap:
                break
            anchor = position = len(self.buffer.text) if backwards else 0
            self.status = SEARCH_WRAPPED
            wraps += 1

        self.status = NO_RESULTS
        self.status_error = True
        return None

    def _search(
        self, pattern: re.Pattern[str], anchor: int, position: int, backwards: bool
    ) -> Span | None:
        start, end = sorted((anchor, position))
        if backwards:
            best = None
            for span in self._matches(pattern, 0):
                if span[0] >= start:
                    break
                best = span
            return best
        return next(self._matches(pattern, end), None)

    def _matches(self, pattern: re.Pattern[str], origin: int) -> Iterator[Span]:
        text = self.buffer.text
        pos = origin
        while pos <= len(text):
            match = pattern.search(text, pos)
            if match is None:
                return
            start, end = match.span()
            pos = start + 1
            if start == end:
                continue
            if self.options.whole_word and not _is_whole_word(text, start, end):
                continue
            yield start, end


def _is_whole_word(text: str, start: int, end: int) -> bool:
    before = text[start - 1] if start > 0 else ""
    after = text[end] if end < len(text) else ""
    return not before.isalnum() and not after.isalnum()