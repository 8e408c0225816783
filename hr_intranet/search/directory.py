"""Read-only employee directory searched by name."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryEntry:
    id: int
    name: str
    email: str

    def public(self) -> dict:
        """Projection safe to return to clients (no email)."""
        return {"id": self.id, "name": self.name}


DEFAULT_ENTRIES = (
    DirectoryEntry(id=1, name="Alice", email="alice@example.com"),
    DirectoryEntry(id=2, name="Bob", email="bob@example.com"),
    DirectoryEntry(id=3, name="Charlie", email="charlie@example.com"),
)


class DirectoryIndex:
    def __init__(self, entries=DEFAULT_ENTRIES):
        self._entries = tuple(entries)
        ids = [entry.id for entry in self._entries]
        if len(set(ids)) != len(ids):
            raise ValueError("Directory entry ids must be unique")

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def search(self, term: str, limit: int = 3) -> list[DirectoryEntry]:
        """Case-insensitive substring match on name, first ``limit`` hits in index order."""
        if limit <= 0:
            return []
        needle = term.lower()
        matches = []
        for entry in self._entries:
            if needle in entry.name.lower():
                matches.append(entry)
                if len(matches) >= limit:
                    break
        return matches
