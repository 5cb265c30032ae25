"""The song entity."""

from __future__ import annotations

from lofiturtle.domain.value_objects import Duration, FilePath, SongId
from lofiturtle.errors import InvalidSongTitleError

UNKNOWN_ARTIST = "Unknown Artist"
UNKNOWN_ALBUM = "Unknown Album"


class Song:
    """A music track; its id is derived from its file path."""

    __slots__ = ("_id", "_file_path", "_title", "_artist", "_album", "_duration")

    def __init__(
        self,
        file_path: FilePath,
        title: str,
        artist: str,
        album: str,
        duration: Duration,
    ) -> None:
        _check_title(title)
        self._id = SongId.from_path(file_path)
        self._file_path = file_path
        self._title = title.strip()
        self._artist = artist.strip()
        self._album = album.strip()
        self._duration = duration

    @property
    def id(self) -> SongId:
        return self._id

    @property
    def file_path(self) -> FilePath:
        return self._file_path

    @property
    def title(self) -> str:
        return self._title

    @property
    def artist(self) -> str:
        """The artist, or "Unknown Artist" when none is known."""
        return self._artist or UNKNOWN_ARTIST

    @property
    def album(self) -> str:
        """The album, or "Unknown Album" when none is known."""
        return self._album or UNKNOWN_ALBUM

    @property
    def duration(self) -> Duration:
        return self._duration

    @property
    def display_name(self) -> str:
        """"Title - Artist", or just the title when the artist is unknown."""
        artist = self.artist
        if not artist or artist == UNKNOWN_ARTIST:
            return self._title
        return f"{self._title} - {artist}"

    def update_metadata(
        self, title: str, artist: str, album: str, duration: Duration
    ) -> None:
        """Replace the tag data, keeping id and file path."""
        _check_title(title)
        self._title = title.strip()
        self._artist = artist.strip()
        self._album = album.strip()
        self._duration = duration

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Song):
            return NotImplemented
        return (
            self._id,
            self._file_path,
            self._title,
            self._artist,
            self._album,
            self._duration,
        ) == (
            other._id,
            other._file_path,
            other._title,
            other._artist,
            other._album,
            other._duration,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Song(id={self._id.value!r}, file_path={self._file_path.value!r}, "
            f"title={self._title!r}, artist={self._artist!r}, "
            f"album={self._album!r}, duration={self._duration.total_seconds})"
        )


def _check_title(title: str) -> None:
    if not title.strip():
        raise InvalidSongTitleError("Title cannot be empty")