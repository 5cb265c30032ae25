"""Facade over the song and playlist use cases."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from lofiturtle.application.playlist_management import (
    AddSongToPlaylistRequest,
    AddSongToPlaylistUseCase,
    CreatePlaylistRequest,
    CreatePlaylistUseCase,
    DeletePlaylistRequest,
    DeletePlaylistUseCase,
    GetPlaylistWithSongsRequest,
    GetPlaylistWithSongsUseCase,
    RemoveSongFromPlaylistRequest,
    RemoveSongFromPlaylistUseCase,
)
from lofiturtle.application.song_management import (
    AddSongRequest,
    AddSongUseCase,
    GetSongRequest,
    GetSongUseCase,
    RemoveSongRequest,
    RemoveSongUseCase,
    SearchSongsRequest,
    SearchSongsUseCase,
)
from lofiturtle.domain.playlist import Playlist
from lofiturtle.domain.repositories import (
    PlaylistRepository,
    PlaylistSongRepository,
    SongRepository,
)
from lofiturtle.domain.song import Song
from lofiturtle.domain.value_objects import Duration, FilePath, PlaylistId, SongId
from lofiturtle.errors import ApplicationError


@dataclass(frozen=True)
class SongData:
    """The tag data of one song to be added in a batch."""

    file_path: FilePath
    title: str
    artist: str
    album: str
    duration: Duration


@dataclass(frozen=True)
class BatchError:
    """A song of a batch that could not be added."""

    file_path: FilePath
    error: str


@dataclass
class BatchAddResult:
    """Outcome of adding many songs at once."""

    added_count: int = 0
    updated_count: int = 0
    errors: list[BatchError] = field(default_factory=list)


class MusicLibraryService:
    """One entry point for every library operation."""

    def __init__(
        self,
        song_repository: SongRepository,
        playlist_repository: PlaylistRepository,
        playlist_song_repository: PlaylistSongRepository,
    ) -> None:
        self._add_song = AddSongUseCase(song_repository)
        self._search_songs = SearchSongsUseCase(song_repository)
        self._get_song = GetSongUseCase(song_repository)
        self._remove_song = RemoveSongUseCase(song_repository)
        self._create_playlist = CreatePlaylistUseCase(playlist_repository)
        self._add_song_to_playlist = AddSongToPlaylistUseCase(
            playlist_repository, song_repository, playlist_song_repository
        )
        self._remove_song_from_playlist = RemoveSongFromPlaylistUseCase(
            playlist_repository, playlist_song_repository
        )
        self._get_playlist_with_songs = GetPlaylistWithSongsUseCase(
            playlist_repository, playlist_song_repository
        )
        self._delete_playlist = DeletePlaylistUseCase(
            playlist_repository, playlist_song_repository
        )

    async def add_song(
        self,
        file_path: FilePath,
        title: str,
        artist: str,
        album: str,
        duration: Duration,
    ) -> SongId:
        """Add a song and return its id; an existing path keeps its entry."""
        response = await self._add_song.execute(
            AddSongRequest(file_path, title, artist, album, duration)
        )
        return response.song_id

    async def search_songs(self, query: str) -> list[Song]:
        response = await self._search_songs.execute(SearchSongsRequest(query))
        return response.songs

    async def get_all_songs(self) -> list[Song]:
        return await self.search_songs("")

    async def get_song(self, song_id: SongId) -> Song:
        response = await self._get_song.execute(GetSongRequest(song_id))
        return response.song

    async def remove_song(self, song_id: SongId) -> None:
        await self._remove_song.execute(RemoveSongRequest(song_id))

    async def create_playlist(
        self, name: str, description: str | None = None
    ) -> PlaylistId:
        response = await self._create_playlist.execute(
            CreatePlaylistRequest(name, description)
        )
        return response.playlist_id

    async def add_song_to_playlist(
        self, playlist_id: PlaylistId, song_id: SongId
    ) -> None:
        await self._add_song_to_playlist.execute(
            AddSongToPlaylistRequest(playlist_id, song_id)
        )

    async def remove_song_from_playlist(
        self, playlist_id: PlaylistId, song_id: SongId
    ) -> None:
        await self._remove_song_from_playlist.execute(
            RemoveSongFromPlaylistRequest(playlist_id, song_id)
        )

    async def get_playlist_with_songs(
        self, playlist_id: PlaylistId
    ) -> tuple[Playlist, list[Song]]:
        response = await self._get_playlist_with_songs.execute(
            GetPlaylistWithSongsRequest(playlist_id)
        )
        return response.playlist, response.songs

    async def delete_playlist(self, playlist_id: PlaylistId) -> None:
        await self._delete_playlist.execute(DeletePlaylistRequest(playlist_id))

    async def batch_add_songs(self, songs_data: Iterable[SongData]) -> BatchAddResult:
        """Add many songs, collecting failures instead of stopping at them."""
        result = BatchAddResult()
        for data in songs_data:
            request = AddSongRequest(
                data.file_path, data.title, data.artist, data.album, data.duration
            )
            try:
                response = await self._add_song.execute(request)
            except ApplicationError as error:
                result.errors.append(BatchError(data.file_path, str(error)))
                continue
            if response.was_created:
                result.added_count += 1
            else:
                result.updated_count += 1
        return result