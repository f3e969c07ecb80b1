# public/routing/history.py

"""
NAVIGATION HISTORY

Single source of truth for "where is the shopper right now".

- navigate(state): push a new entry; navigating to the URL already shown
  is a no-op (no duplicate entry)
- back()/forward(): move the cursor, entries are kept
- pop(url): the browser moved on its own (popstate / manual URL edit);
  re-derive the state from the URL exactly like an initial load and
  reuse the neighbouring entry when it matches
- each entry carries a data dict so a view restored through back/forward
  can reuse what it loaded instead of fetching again
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .router import RouteState, Router, default_router


@dataclass
class HistoryEntry:
    state: RouteState
    url: str
    data: dict = field(default_factory=dict)


class NavigationHistory:
    def __init__(self, initial_url: str = "/", *, router: Router | None = None):
        self.router = router or default_router
        self._entries: list[HistoryEntry] = [self._entry_for_url(initial_url)]
        self._index = 0

    def _entry_for_url(self, url: str) -> HistoryEntry:
        state = self.router.resolve(url)
        return HistoryEntry(state=state, url=self.router.reverse(state))

    # -----------------------------
    # current position
    # -----------------------------
    @property
    def current(self) -> HistoryEntry:
        return self._entries[self._index]

    @property
    def state(self) -> RouteState:
        return self.current.state

    @property
    def url(self) -> str:
        return self.current.url

    @property
    def can_go_back(self) -> bool:
        return self._index > 0

    @property
    def can_go_forward(self) -> bool:
        return self._index < len(self._entries) - 1

    def __len__(self) -> int:
        return len(self._entries)

    # -----------------------------
    # transitions
    # -----------------------------
    def navigate(self, state: RouteState) -> HistoryEntry:
        url = self.router.reverse(state)
        if url == self.current.url:
            return self.current

        # a new branch drops the forward stack, like a browser does
        del self._entries[self._index + 1:]
        self._entries.append(HistoryEntry(state=self.router.resolve(url), url=url))
        self._index += 1
        return self.current

    def navigate_url(self, url: str) -> HistoryEntry:
        return self.navigate(self.router.resolve(url))

    def back(self) -> HistoryEntry:
        if self.can_go_back:
            self._index -= 1
        return self.current

    def forward(self) -> HistoryEntry:
        if self.can_go_forward:
            self._index += 1
        return self.current

    def pop(self, url: str) -> HistoryEntry:
        fresh = self._entry_for_url(url)

        for idx in (self._index - 1, self._index + 1, self._index):
            if 0 <= idx < len(self._entries) and self._entries[idx].url == fresh.url:
                self._index = idx
                return self.current

        self._entries[self._index] = fresh
        return self.current

    # -----------------------------
    # per-entry view data
    # -----------------------------
    def remember(self, key: str, value: Any) -> None:
        self.current.data[key] = value

    def recall(self, key: str, default: Any = None) -> Any:
        return self.current.data.get(key, default)
