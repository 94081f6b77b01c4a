"""
Delta tracking

Most numeric fields are stored as the difference from the previous occurrence
of the same field. DeltaTracker keeps one running value per field key.
"""

from typing import Dict

NODE_ID = "node_id"
NODE_LAT = "node_lat"
NODE_LON = "node_lon"
WAY_ID = "way_id"
NODE_REF = "node_ref"
TIMESTAMP = "timestamp"
CHANGESET = "changeset"


class DeltaTracker:
    """Per-key running sums for delta-coded fields"""

    def __init__(self, zero_passthrough: bool = False):
        # zero_passthrough: a raw 0 returns 0 and leaves the running value alone
        self.zero_passthrough = zero_passthrough
        self._running: Dict[str, int] = {}

    def apply(self, raw: int, key: str) -> int:
        """
        Add a raw delta to the running value of `key`

        The first value seen for a key is taken as absolute.

        Args:
            raw: Delta read from the stream
            key: Field key, e.g. NODE_ID

        Returns:
            Reconstructed absolute value
        """
        if raw == 0 and self.zero_passthrough:
            return 0
        if key in self._running:
            value = self._running[key] + raw
        else:
            value = raw
        self._running[key] = value
        return value

    def get(self, key: str) -> int:
        return self._running.get(key, 0)

    def reset(self) -> None:
        self._running.clear()

    def __len__(self) -> int:
        return len(self._running)
