"""Use cases that add, find and remove songs in the library."""

from __future__ import annotations

from dataclasses import dataclass

from lofiturtle.domain.repositories import SongRepository
from lofiturtle.domain.song import Song
from lofiturtle.domain.value_objects import Duration, FilePath, SongId
from lofiturtle.errors import DomainError, DomainFailureError, UseCaseFailedError


@dataclass(frozen=True)
class AddSongRequest:
    file_path: FilePath
    title: str
    artist: str
    album: str
    duration: Duration


@dataclass(frozen=True)
class AddSongResponse:
    song_id: SongId
    was_created: bool


@dataclass(frozen=True)
class SearchSongsRequest:
    query: str


@dataclass(frozen=True)
class SearchSongsResponse:
    songs: list[Song]


@dataclass(frozen=True)
class GetSongRequest:
    song_id: SongId


@dataclass(frozen=True)
class GetSongResponse:
    song: Song


@dataclass(frozen=True)
class RemoveSongRequest:
    song_id: SongId


@dataclass(frozen=True)
class RemoveSongResponse:
    song_id: SongId


async def _require_song(repository: SongRepository, song_id: SongId) -> Song:
    song = await repository.find_by_id(song_id)
    if song is None:
        raise UseCaseFailedError(f"Song not found: {song_id.value}")
    return song


class AddSongUseCase:
    """Adds a song unless one is already stored for its file path."""

    def __init__(self, song_repository: SongRepository) -> None:
        self._songs = song_repository

    async def execute(self, request: AddSongRequest) -> AddSongResponse:
        if await self._songs.exists_by_path(request.file_path):
            return AddSongResponse(
                song_id=SongId.from_path(request.file_path), was_created=False
            )
        try:
            song = Song(
                request.file_path,
                request.title,
                request.artist,
                request.album,
                request.duration,
            )
        except DomainError as error:
            raise DomainFailureError(error) from error
        await self._songs.save(song)
        return AddSongResponse(song_id=song.id, was_created=True)


class SearchSongsUseCase:
    """Finds songs by query; a blank query returns every song."""

    def __init__(self, song_repository: SongRepository) -> None:
        self._songs = song_repository

    async def execute(self, request: SearchSongsRequest) -> SearchSongsResponse:
        if not request.query.strip():
            songs = await self._songs.find_all()
        else:
            songs = await self._songs.search(request.query)
        return SearchSongsResponse(songs=songs)


class GetSongUseCase:
    """Looks up one song by id."""

    def __init__(self, song_repository: SongRepository) -> None:
        self._songs = song_repository

    async def execute(self, request: GetSongRequest) -> GetSongResponse:
        song = await _require_song(self._songs, request.song_id)
        return GetSongResponse(song=song)


class RemoveSongUseCase:
    """Removes an existing song from the library."""

    def __init__(self, song_repository: SongRepository) -> None:
        self._songs = song_repository

    async def execute(self, request: RemoveSongRequest) -> RemoveSongResponse:
        await _require_song(self._songs, request.song_id)
        await self._songs.delete(request.song_id)
        return RemoveSongResponse(song_id=request.song_id)