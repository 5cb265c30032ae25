"""Use cases that create, fill, read and delete playlists."""

from __future__ import annotations

from dataclasses import dataclass

from lofiturtle.domain.playlist import Playlist
from lofiturtle.domain.repositories import (
    PlaylistRepository,
    PlaylistSongRepository,
    SongRepository,
)
from lofiturtle.domain.song import Song
from lofiturtle.domain.value_objects import PlaylistId, SongId
from lofiturtle.errors import (
    DomainError,
    DomainFailureError,
    UseCaseFailedError,
    ValidationFailedError,
)


@dataclass(frozen=True)
class CreatePlaylistRequest:
    name: str
    description: str | None = None


@dataclass(frozen=True)
class CreatePlaylistResponse:
    playlist_id: PlaylistId


@dataclass(frozen=True)
class AddSongToPlaylistRequest:
    playlist_id: PlaylistId
    song_id: SongId


@dataclass(frozen=True)
class AddSongToPlaylistResponse:
    playlist_id: PlaylistId
    song_id: SongId


@dataclass(frozen=True)
class RemoveSongFromPlaylistRequest:
    playlist_id: PlaylistId
    song_id: SongId


@dataclass(frozen=True)
class RemoveSongFromPlaylistResponse:
    playlist_id: PlaylistId
    song_id: SongId


@dataclass(frozen=True)
class GetPlaylistWithSongsRequest:
    playlist_id: PlaylistId


@dataclass(frozen=True)
class GetPlaylistWithSongsResponse:
    playlist: Playlist
    songs: list[Song]


@dataclass(frozen=True)
class DeletePlaylistRequest:
    playlist_id: PlaylistId


@dataclass(frozen=True)
class DeletePlaylistResponse:
    playlist_id: PlaylistId


async def _require_playlist(
    repository: PlaylistRepository, playlist_id: PlaylistId
) -> Playlist:
    playlist = await repository.find_by_id(playlist_id)
    if playlist is None:
        raise UseCaseFailedError(f"Playlist not found: {playlist_id.value}")
    return playlist


class CreatePlaylistUseCase:
    """Creates a playlist with a name not yet in use."""

    def __init__(self, playlist_repository: PlaylistRepository) -> None:
        self._playlists = playlist_repository

    async def execute(self, request: CreatePlaylistRequest) -> CreatePlaylistResponse:
        if await self._playlists.exists_by_name(request.name):
            raise ValidationFailedError(f"Playlist '{request.name}' already exists")
        try:
            playlist = Playlist(request.name, request.description)
        except DomainError as error:
            raise DomainFailureError(error) from error
        await self._playlists.save(playlist)
        return CreatePlaylistResponse(playlist_id=playlist.id)


class AddSongToPlaylistUseCase:
    """Appends an existing song to an existing playlist."""

    def __init__(
        self,
        playlist_repository: PlaylistRepository,
        song_repository: SongRepository,
        playlist_song_repository: PlaylistSongRepository,
    ) -> None:
        self._playlists = playlist_repository
        self._songs = song_repository
        self._playlist_songs = playlist_song_repository

    async def execute(
        self, request: AddSongToPlaylistRequest
    ) -> AddSongToPlaylistResponse:
        playlist = await _require_playlist(self._playlists, request.playlist_id)
        if await self._songs.find_by_id(request.song_id) is None:
            raise UseCaseFailedError(f"Song not found: {request.song_id.value}")
        try:
            playlist.add_song(request.song_id)
        except DomainError as error:
            raise DomainFailureError(error) from error
        await self._playlists.save(playlist)
        await self._playlist_songs.add_song_to_playlist(
            request.playlist_id, request.song_id, playlist.song_count - 1
        )
        return AddSongToPlaylistResponse(
            playlist_id=request.playlist_id, song_id=request.song_id
        )


class RemoveSongFromPlaylistUseCase:
    """Takes a song out of a playlist."""

    def __init__(
        self,
        playlist_repository: PlaylistRepository,
        playlist_song_repository: PlaylistSongRepository,
    ) -> None:
        self._playlists = playlist_repository
        self._playlist_songs = playlist_song_repository

    async def execute(
        self, request: RemoveSongFromPlaylistRequest
    ) -> RemoveSongFromPlaylistResponse:
        playlist = await _require_playlist(self._playlists, request.playlist_id)
        try:
            playlist.remove_song(request.song_id)
        except DomainError as error:
            raise DomainFailureError(error) from error
        await self._playlists.save(playlist)
        await self._playlist_songs.remove_song_from_playlist(
            request.playlist_id, request.song_id
        )
        return RemoveSongFromPlaylistResponse(
            playlist_id=request.playlist_id, song_id=request.song_id
        )


class GetPlaylistWithSongsUseCase:
    """Loads a playlist together with its songs in order."""

    def __init__(
        self,
        playlist_repository: PlaylistRepository,
        playlist_song_repository: PlaylistSongRepository,
    ) -> None:
        self._playlists = playlist_repository
        self._playlist_songs = playlist_song_repository

    async def execute(
        self, request: GetPlaylistWithSongsRequest
    ) -> GetPlaylistWithSongsResponse:
        playlist = await _require_playlist(self._playlists, request.playlist_id)
        songs = await self._playlist_songs.get_playlist_songs(request.playlist_id)
        return GetPlaylistWithSongsResponse(playlist=playlist, songs=songs)


class DeletePlaylistUseCase:
    """Empties and then deletes a playlist."""

    def __init__(
        self,
        playlist_repository: PlaylistRepository,
        playlist_song_repository: PlaylistSongRepository,
    ) -> None:
        self._playlists = playlist_repository
        self._playlist_songs = playlist_song_repository

    async def execute(self, request: DeletePlaylistRequest) -> DeletePlaylistResponse:
        await _require_playlist(self._playlists, request.playlist_id)
        await self._playlist_songs.clear_playlist(request.playlist_id)
        await self._playlists.delete(request.playlist_id)
        return DeletePlaylistResponse(playlist_id=request.playlist_id)