"""The playlist entity and its builder."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from lofiturtle.domain.value_objects import PlaylistId, SongId
from lofiturtle.errors import (
    BusinessRuleViolationError,
    InvalidPlaylistNameError,
    SongNotFoundError,
)

MAX_NAME_LENGTH = 100


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _check_name(name: str, *, check_length: bool = True) -> None:
    if not name.strip():
        raise InvalidPlaylistNameError("Name cannot be empty")
    if check_length and len(name.encode("utf-8")) > MAX_NAME_LENGTH:
        raise InvalidPlaylistNameError(
            f"Name cannot exceed {MAX_NAME_LENGTH} characters"
        )


def _clean_description(description: str | None) -> str | None:
    if description is None:
        return None
    return description.strip() or None


class Playlist:
    """An ordered collection of unique song ids."""

    __slots__ = (
        "_id",
        "_name",
        "_description",
        "_song_ids",
        "_created_at",
        "_updated_at",
    )

    def __init__(self, name: str, description: str | None = None) -> None:
        _check_name(name)
        now = _now()
        self._id = PlaylistId.new()
        self._name = name.strip()
        self._description = _clean_description(description)
        self._song_ids: list[SongId] = []
        self._created_at = now
        self._updated_at = now

    @classmethod
    def from_existing(
        cls,
        playlist_id: PlaylistId,
        name: str,
        description: str | None,
        song_ids: Iterable[SongId],
        created_at: datetime,
        updated_at: datetime,
    ) -> Playlist:
        """Rebuild a stored playlist; only an empty name is rejected."""
        _check_name(name, check_length=False)
        playlist = cls.__new__(cls)
        playlist._id = playlist_id
        playlist._name = name.strip()
        playlist._description = _clean_description(description)
        playlist._song_ids = list(song_ids)
        playlist._created_at = created_at
        playlist._updated_at = updated_at
        return playlist

    @property
    def id(self) -> PlaylistId:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def song_ids(self) -> tuple[SongId, ...]:
        """The song ids in playlist order."""
        return tuple(self._song_ids)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def song_count(self) -> int:
        return len(self._song_ids)

    @property
    def is_empty(self) -> bool:
        return not self._song_ids

    def __len__(self) -> int:
        return len(self._song_ids)

    def __iter__(self):
        return iter(tuple(self._song_ids))

    def contains_song(self, song_id: SongId) -> bool:
        return song_id in self._song_ids

    def __contains__(self, song_id: object) -> bool:
        return song_id in self._song_ids

    def add_song(self, song_id: SongId) -> None:
        """Append a song; a song may appear only once."""
        if self.contains_song(song_id):
            raise BusinessRuleViolationError("Song already exists in playlist")
        self._song_ids.append(song_id)
        self._touch()

    def remove_song(self, song_id: SongId) -> None:
        """Remove a song, raising SongNotFoundError if it is absent."""
        remaining = [sid for sid in self._song_ids if sid != song_id]
        if len(remaining) == len(self._song_ids):
            raise SongNotFoundError(song_id.value)
        self._song_ids = remaining
        self._touch()

    def move_song(self, from_index: int, to_index: int) -> None:
        """Move the song at one position to another."""
        count = len(self._song_ids)
        if not (0 <= from_index < count and 0 <= to_index < count):
            raise BusinessRuleViolationError("Invalid song position")
        song_id = self._song_ids.pop(from_index)
        self._song_ids.insert(to_index, song_id)
        self._touch()

    def clear(self) -> None:
        self._song_ids.clear()
        self._touch()

    def update_metadata(self, name: str, description: str | None) -> None:
        _check_name(name)
        self._name = name.strip()
        self._description = _clean_description(description)
        self._touch()

    @property
    def display_info(self) -> str:
        """Name with the number of songs, e.g. "Mix (2 songs)"."""
        count = self.song_count
        noun = "song" if count == 1 else "songs"
        return f"{self._name} ({count} {noun})"

    def _touch(self) -> None:
        self._updated_at = _now()

    def _state(self) -> tuple:
        return (
            self._id,
            self._name,
            self._description,
            self._song_ids,
            self._created_at,
            self._updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Playlist):
            return NotImplemented
        return self._state() == other._state()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Playlist(id={self._id.value!r}, name={self._name!r}, "
            f"description={self._description!r}, songs={len(self._song_ids)})"
        )


class PlaylistBuilder:
    """Fluent construction of a playlist."""

    def __init__(self) -> None:
        self._name: str | None = None
        self._description: str | None = None
        self._song_ids: list[SongId] = []

    def name(self, name: str) -> PlaylistBuilder:
        self._name = name
        return self

    def description(self, description: str) -> PlaylistBuilder:
        self._description = description
        return self

    def add_song(self, song_id: SongId) -> PlaylistBuilder:
        self._song_ids.append(song_id)
        return self

    def add_songs(self, song_ids: Iterable[SongId]) -> PlaylistBuilder:
        self._song_ids.extend(song_ids)
        return self

    def build(self) -> Playlist:
        """Create the playlist; duplicate songs are dropped."""
        if self._name is None:
            raise InvalidPlaylistNameError("Name is required")
        playlist = Playlist(self._name, self._description)
        for song_id in self._song_ids:
            if not playlist.contains_song(song_id):
                playlist._song_ids.append(song_id)
        return playlist