"""Storage interfaces for songs and playlists."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TypeVar

from lofiturtle.domain.playlist import Playlist
from lofiturtle.domain.song import Song
from lofiturtle.domain.value_objects import FilePath, PlaylistId, SongId

R = TypeVar("R")


class SongRepository(ABC):
    """Persistence of song entities."""

    @abstractmethod
    async def save(self, song: Song) -> None:
        """Store a song, replacing one with the same id."""

    @abstractmethod
    async def find_by_id(self, song_id: SongId) -> Song | None:
        """Return the song with this id, if any."""

    @abstractmethod
    async def find_by_path(self, path: FilePath) -> Song | None:
        """Return the song stored for this file path, if any."""

    @abstractmethod
    async def find_all(self) -> list[Song]:
        """Return every stored song."""

    @abstractmethod
    async def search(self, query: str) -> list[Song]:
        """Return songs whose title, artist or album matches the query."""

    @abstractmethod
    async def exists_by_path(self, path: FilePath) -> bool:
        """Whether a song is stored for this file path."""

    @abstractmethod
    async def delete(self, song_id: SongId) -> None:
        """Remove the song with this id."""

    @abstractmethod
    async def find_by_ids(self, song_ids: Sequence[SongId]) -> list[Song]:
        """Return the stored songs among these ids, in the given order."""

    @abstractmethod
    async def clear_all(self) -> None:
        """Remove every song."""


class PlaylistRepository(ABC):
    """Persistence of playlist entities."""

    @abstractmethod
    async def save(self, playlist: Playlist) -> None:
        """Store a playlist, replacing one with the same id."""

    @abstractmethod
    async def find_by_id(self, playlist_id: PlaylistId) -> Playlist | None:
        """Return the playlist with this id, if any."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Playlist | None:
        """Return the playlist with this name, if any."""

    @abstractmethod
    async def find_all(self) -> list[Playlist]:
        """Return every stored playlist."""

    @abstractmethod
    async def delete(self, playlist_id: PlaylistId) -> None:
        """Remove the playlist with this id."""

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool:
        """Whether a playlist with this name is stored."""


class PlaylistSongRepository(ABC):
    """Persistence of the ordered songs of each playlist."""

    @abstractmethod
    async def add_song_to_playlist(
        self, playlist_id: PlaylistId, song_id: SongId, position: int
    ) -> None:
        """Place a song in a playlist at a position."""

    @abstractmethod
    async def remove_song_from_playlist(
        self, playlist_id: PlaylistId, song_id: SongId
    ) -> None:
        """Take a song out of a playlist."""

    @abstractmethod
    async def get_playlist_songs(self, playlist_id: PlaylistId) -> list[Song]:
        """Return the songs of a playlist in order."""

    @abstractmethod
    async def reorder_playlist_songs(
        self, playlist_id: PlaylistId, song_ids: Sequence[SongId]
    ) -> None:
        """Set the order of a playlist's songs."""

    @abstractmethod
    async def clear_playlist(self, playlist_id: PlaylistId) -> None:
        """Remove all songs from a playlist."""


class UnitOfWork(ABC):
    """Groups repository operations into one transaction."""

    @abstractmethod
    async def begin(self) -> None:
        """Start a transaction."""

    @abstractmethod
    async def commit(self) -> None:
        """Make the transaction's changes permanent."""

    @abstractmethod
    async def rollback(self) -> None:
        """Discard the transaction's changes."""

    @abstractmethod
    async def execute_in_transaction(self, operation: Callable[[], R]) -> R:
        """Run an operation inside a transaction and return its result."""