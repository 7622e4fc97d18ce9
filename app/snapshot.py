from app.schemas.property import PropertyRecord, Snapshot


class SnapshotStore:
    """Holds the one live snapshot; replaced wholesale, never edited in place."""

    def __init__(self) -> None:
        self._current = Snapshot()

    @property
    def current(self) -> Snapshot:
        return self._current

    def publish(self, snapshot: Snapshot) -> None:
        self._current = snapshot

    def find_by_source(self, source_id: str) -> PropertyRecord | None:
        return next((r for r in self._current.records if r.source == source_id), None)
