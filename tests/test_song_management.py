from collections.abc import Sequence

import pytest

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
from lofiturtle.domain.repositories import SongRepository
from lofiturtle.domain.song import Song
from lofiturtle.domain.value_objects import Duration, FilePath, SongId
from lofiturtle.errors import (
    DomainFailureError,
    InvalidSongTitleError,
    UseCaseFailedError,
)


class InMemorySongRepository(SongRepository):
    def __init__(self) -> None:
        self.songs: dict[SongId, Song] = {}

    async def save(self, song):
        self.songs[song.id] = song

    async def find_by_id(self, song_id):
        return self.songs.get(song_id)

    async def find_by_path(self, path):
        return next((s for s in self.songs.values() if s.file_path == path), None)

    async def find_all(self):
        return list(self.songs.values())

    async def search(self, query):
        needle = query.lower()
        return [
            s
            for s in self.songs.values()
            if needle in s.title.lower()
            or needle in s.artist.lower()
            or needle in s.album.lower()
        ]

    async def exists_by_path(self, path):
        return await self.find_by_path(path) is not None

    async def delete(self, song_id):
        self.songs.pop(song_id, None)

    async def find_by_ids(self, song_ids: Sequence[SongId]):
        return [self.songs[i] for i in song_ids if i in self.songs]

    async def clear_all(self):
        self.songs.clear()


def make_request(path="/test/song.mp3", title="Test Song"):
    return AddSongRequest(
        file_path=FilePath(path),
        title=title,
        artist="Test Artist",
        album="Test Album",
        duration=Duration.from_seconds(180),
    )


@pytest.mark.asyncio
async def test_add_song_use_case():
    repository = InMemorySongRepository()
    response = await AddSongUseCase(repository).execute(make_request())
    assert response.was_created is True
    assert response.song_id == SongId.from_path(FilePath("/test/song.mp3"))
    assert response.song_id in repository.songs


@pytest.mark.asyncio
async def test_search_songs_use_case():
    repository = InMemorySongRepository()
    await AddSongUseCase(repository).execute(make_request())
    response = await SearchSongsUseCase(repository).execute(
        SearchSongsRequest(query="Test")
    )
    assert len(response.songs) == 1
    assert response.songs[0].title == "Test Song"


@pytest.mark.asyncio
async def test_adding_existing_path_is_not_created_again():
    repository = InMemorySongRepository()
    use_case = AddSongUseCase(repository)
    first = await use_case.execute(make_request())
    second = await use_case.execute(make_request(title="Other Title"))
    assert second.was_created is False
    assert second.song_id == first.song_id
    assert repository.songs[first.song_id].title == "Test Song"


@pytest.mark.asyncio
async def test_add_song_with_empty_title_raises_domain_failure():
    repository = InMemorySongRepository()
    with pytest.raises(DomainFailureError) as info:
        await AddSongUseCase(repository).execute(make_request(title="   "))
    assert isinstance(info.value.domain_error, InvalidSongTitleError)
    assert repository.songs == {}


@pytest.mark.asyncio
async def test_blank_query_returns_all_songs():
    repository = InMemorySongRepository()
    add = AddSongUseCase(repository)
    await add.execute(make_request("/a/one.mp3", "One"))
    await add.execute(make_request("/a/two.mp3", "Two"))
    response = await SearchSongsUseCase(repository).execute(
        SearchSongsRequest(query="  ")
    )
    assert sorted(s.title for s in response.songs) == ["One", "Two"]


@pytest.mark.asyncio
async def test_search_without_match_is_empty():
    repository = InMemorySongRepository()
    await AddSongUseCase(repository).execute(make_request())
    response = await SearchSongsUseCase(repository).execute(
        SearchSongsRequest(query="nothing here")
    )
    assert response.songs == []


@pytest.mark.asyncio
async def test_get_song_returns_stored_song():
    repository = InMemorySongRepository()
    added = await AddSongUseCase(repository).execute(make_request())
    response = await GetSongUseCase(repository).execute(GetSongRequest(added.song_id))
    assert response.song.id == added.song_id
    assert response.song.title == "Test Song"


@pytest.mark.asyncio
async def test_get_missing_song_fails():
    repository = InMemorySongRepository()
    missing = SongId.from_string("missing")
    with pytest.raises(UseCaseFailedError) as info:
        await GetSongUseCase(repository).execute(GetSongRequest(missing))
    assert "missing" in str(info.value)


@pytest.mark.asyncio
async def test_remove_song_deletes_it():
    repository = InMemorySongRepository()
    added = await AddSongUseCase(repository).execute(make_request())
    response = await RemoveSongUseCase(repository).execute(
        RemoveSongRequest(added.song_id)
    )
    assert response.song_id == added.song_id
    assert added.song_id not in repository.songs


@pytest.mark.asyncio
async def test_remove_missing_song_fails():
    repository = InMemorySongRepository()
    with pytest.raises(UseCaseFailedError):
        await RemoveSongUseCase(repository).execute(
            RemoveSongRequest(SongId.from_string("missing"))
        )