from collections.abc import Sequence

import pytest

from lofiturtle.application.music_library_service import (
    BatchAddResult,
    MusicLibraryService,
    SongData,
)
from lofiturtle.domain.playlist import Playlist
from lofiturtle.domain.repositories import (
    PlaylistRepository,
    PlaylistSongRepository,
    SongRepository,
)
from lofiturtle.domain.song import Song
from lofiturtle.domain.value_objects import Duration, FilePath, PlaylistId, SongId
from lofiturtle.errors import (
    DomainFailureError,
    UseCaseFailedError,
    ValidationFailedError,
)


class InMemorySongRepository(SongRepository):
    def __init__(self):
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
        q = query.lower()
        return [
            s
            for s in self.songs.values()
            if q in s.title.lower() or q in s.artist.lower() or q in s.album.lower()
        ]

    async def exists_by_path(self, path):
        return await self.find_by_path(path) is not None

    async def delete(self, song_id):
        self.songs.pop(song_id, None)

    async def find_by_ids(self, song_ids: Sequence[SongId]):
        return [self.songs[i] for i in song_ids if i in self.songs]

    async def clear_all(self):
        self.songs.clear()


class NullPlaylistRepository(PlaylistRepository):
    async def save(self, playlist):
        return None

    async def find_by_id(self, playlist_id):
        return None

    async def find_by_name(self, name):
        return None

    async def find_all(self):
        return []

    async def delete(self, playlist_id):
        return None

    async def exists_by_name(self, name):
        return False


class NullPlaylistSongRepository(PlaylistSongRepository):
    async def add_song_to_playlist(self, playlist_id, song_id, position):
        return None

    async def remove_song_from_playlist(self, playlist_id, song_id):
        return None

    async def get_playlist_songs(self, playlist_id):
        return []

    async def reorder_playlist_songs(self, playlist_id, song_ids):
        return None

    async def clear_playlist(self, playlist_id):
        return None


class InMemoryPlaylistRepository(PlaylistRepository):
    def __init__(self):
        self.playlists: dict[PlaylistId, Playlist] = {}

    async def save(self, playlist):
        self.playlists[playlist.id] = playlist

    async def find_by_id(self, playlist_id):
        return self.playlists.get(playlist_id)

    async def find_by_name(self, name):
        return next((p for p in self.playlists.values() if p.name == name), None)

    async def find_all(self):
        return list(self.playlists.values())

    async def delete(self, playlist_id):
        self.playlists.pop(playlist_id, None)

    async def exists_by_name(self, name):
        return await self.find_by_name(name) is not None


class InMemoryPlaylistSongRepository(PlaylistSongRepository):
    def __init__(self, songs: InMemorySongRepository):
        self._songs = songs
        self.entries: dict[PlaylistId, list[tuple[int, SongId]]] = {}

    async def add_song_to_playlist(self, playlist_id, song_id, position):
        self.entries.setdefault(playlist_id, []).append((position, song_id))

    async def remove_song_from_playlist(self, playlist_id, song_id):
        self.entries[playlist_id] = [
            e for e in self.entries.get(playlist_id, []) if e[1] != song_id
        ]

    async def get_playlist_songs(self, playlist_id):
        ordered = sorted(self.entries.get(playlist_id, []), key=lambda e: e[0])
        return await self._songs.find_by_ids([sid for _, sid in ordered])

    async def reorder_playlist_songs(self, playlist_id, song_ids):
        self.entries[playlist_id] = list(enumerate(song_ids))

    async def clear_playlist(self, playlist_id):
        self.entries.pop(playlist_id, None)


def null_service():
    return MusicLibraryService(
        InMemorySongRepository(), NullPlaylistRepository(), NullPlaylistSongRepository()
    )


def full_service():
    songs = InMemorySongRepository()
    return MusicLibraryService(
        songs, InMemoryPlaylistRepository(), InMemoryPlaylistSongRepository(songs)
    )


@pytest.mark.asyncio
async def test_music_library_service():
    service = null_service()
    song_id = await service.add_song(
        FilePath("/test/song.mp3"),
        "Test Song",
        "Test Artist",
        "Test Album",
        Duration.from_seconds(180),
    )
    song = await service.get_song(song_id)
    assert song.title == "Test Song"
    songs = await service.search_songs("Test")
    assert len(songs) == 1


@pytest.mark.asyncio
async def test_add_song_id_is_derived_from_path():
    service = null_service()
    path = FilePath("/test/song.mp3")
    song_id = await service.add_song(path, "A", "B", "C", Duration.from_seconds(1))
    assert song_id == SongId.from_path(path)


@pytest.mark.asyncio
async def test_get_all_songs_and_remove():
    service = null_service()
    first = await service.add_song(
        FilePath("/a.mp3"), "One", "X", "Y", Duration.from_seconds(10)
    )
    await service.add_song(FilePath("/b.mp3"), "Two", "X", "Y", Duration.from_seconds(20))
    assert len(await service.get_all_songs()) == 2
    await service.remove_song(first)
    remaining = await service.get_all_songs()
    assert [s.title for s in remaining] == ["Two"]
    with pytest.raises(UseCaseFailedError):
        await service.get_song(first)


@pytest.mark.asyncio
async def test_remove_unknown_song_raises():
    service = null_service()
    with pytest.raises(UseCaseFailedError):
        await service.remove_song(SongId.from_string("missing"))


@pytest.mark.asyncio
async def test_batch_add_counts_new_existing_and_failed():
    service = null_service()
    data = [
        SongData(FilePath("/a.mp3"), "A", "X", "Y", Duration.from_seconds(1)),
        SongData(FilePath("/b.mp3"), "B", "X", "Y", Duration.from_seconds(2)),
        SongData(FilePath("/a.mp3"), "A again", "X", "Y", Duration.from_seconds(1)),
        SongData(FilePath("/c.mp3"), "   ", "X", "Y", Duration.from_seconds(3)),
    ]
    result = await service.batch_add_songs(data)
    assert isinstance(result, BatchAddResult)
    assert result.added_count == 2
    assert result.updated_count == 1
    assert len(result.errors) == 1
    assert result.errors[0].file_path == FilePath("/c.mp3")
    assert "Title cannot be empty" in result.errors[0].error


@pytest.mark.asyncio
async def test_add_song_with_blank_title_raises_domain_failure():
    service = null_service()
    with pytest.raises(DomainFailureError):
        await service.add_song(FilePath("/x.mp3"), "", "A", "B", Duration.from_seconds(5))


@pytest.mark.asyncio
async def test_playlist_lifecycle():
    service = full_service()
    a = await service.add_song(FilePath("/a.mp3"), "A", "X", "Y", Duration.from_seconds(1))
    b = await service.add_song(FilePath("/b.mp3"), "B", "X", "Y", Duration.from_seconds(2))
    playlist_id = await service.create_playlist("Mix", "evening")
    await service.add_song_to_playlist(playlist_id, a)
    await service.add_song_to_playlist(playlist_id, b)

    playlist, songs = await service.get_playlist_with_songs(playlist_id)
    assert playlist.name == "Mix"
    assert playlist.description == "evening"
    assert [s.title for s in songs] == ["A", "B"]

    await service.remove_song_from_playlist(playlist_id, a)
    playlist, songs = await service.get_playlist_with_songs(playlist_id)
    assert [s.title for s in songs] == ["B"]
    assert playlist.song_count == 1

    await service.delete_playlist(playlist_id)
    with pytest.raises(UseCaseFailedError):
        await service.get_playlist_with_songs(playlist_id)


@pytest.mark.asyncio
async def test_duplicate_playlist_name_rejected():
    service = full_service()
    await service.create_playlist("Mix")
    with pytest.raises(ValidationFailedError):
        await service.create_playlist("Mix")


@pytest.mark.asyncio
async def test_add_same_song_twice_to_playlist_fails():
    service = full_service()
    a = await service.add_song(FilePath("/a.mp3"), "A", "X", "Y", Duration.from_seconds(1))
    playlist_id = await service.create_playlist("Mix")
    await service.add_song_to_playlist(playlist_id, a)
    with pytest.raises(DomainFailureError):
        await service.add_song_to_playlist(playlist_id, a)