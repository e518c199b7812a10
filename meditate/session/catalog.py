"""
Track Catalog - the fixed set of meditation tracks.

Maps the display titles shown on the home page to the audio asset ids the
audio engine loads. Unknown titles fall back to the first entry rather than
failing.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class Track:
    """
    A playable meditation track.

    Attributes:
        title: Display title (unique within the catalog)
        asset_id: Audio asset basename, without extension
    """
    title: str
    asset_id: str


DEFAULT_TRACKS: tuple[Track, ...] = (
    Track("Deep Meditation to Relax", "relax1"),
    Track("Complete Focus of Mind", "relax2"),
    Track("Relaxing Meditation to Soul", "relax3"),
    Track("Deep Sleep of Mind", "relax4"),
)


class TrackCatalog:
    """Title to asset lookup with a first-entry fallback."""

    def __init__(self, tracks: Optional[tuple[Track, ...]] = None):
        self._tracks = tuple(tracks) if tracks is not None else DEFAULT_TRACKS
        if not self._tracks:
            raise ValueError("TrackCatalog requires at least one track")
        self._by_title = {track.title: track for track in self._tracks}
        if len(self._by_title) != len(self._tracks):
            raise ValueError("Track titles must be unique")

    def __len__(self) -> int:
        return len(self._tracks)

    def __iter__(self) -> Iterator[Track]:
        return iter(self._tracks)

    @property
    def default(self) -> Track:
        return self._tracks[0]

    def titles(self) -> list[str]:
        """Display titles in catalog order."""
        return [track.title for track in self._tracks]

    def resolve(self, title: str) -> str:
        """Return the asset id for *title*, or the first entry's asset when unmatched."""
        track = self._by_title.get(title)
        if track is None:
            return self.default.asset_id
        return track.asset_id

    def track_for(self, title: str) -> Track:
        """Build the Track for a session: the caller's title with the resolved asset."""
        return Track(title=title, asset_id=self.resolve(title))
