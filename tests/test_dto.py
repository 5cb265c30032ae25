import json
from datetime import datetime

from lofiturtle.application.dto import (
    LibraryStatsDto,
    PlaylistDto,
    PlaylistWithSongsDto,
    SearchResultDto,
    SongDto,
)
from lofiturtle.domain.playlist import Playlist
from lofiturtle.domain.song import Song
from lofiturtle.domain.value_objects import Duration, FilePath, SongId


def make_song(path="/music/song.mp3", title="Test Song", artist="Test Artist", album="Test Album"):
    return Song(FilePath(path), title, artist, album, Duration.from_seconds(180))


def test_song_dto_copies_fields():
    song = make_song()
    dto = SongDto.from_song(song)
    assert dto.id == SongId.from_path(FilePath("/music/song.mp3")).value
    assert dto.file_path == "/music/song.mp3"
    assert dto.title == "Test Song"
    assert dto.artist == "Test Artist"
    assert dto.album == "Test Album"
    assert dto.duration_seconds == 180


def test_song_dto_uses_fallback_names():
    dto = SongDto.from_song(make_song(artist="", album=""))
    assert dto.artist == "Unknown Artist"
    assert dto.album == "Unknown Album"


def test_song_dto_json_round_trip():
    dto = SongDto.from_song(make_song())
    restored = SongDto.from_dict(json.loads(json.dumps(dto.to_dict())))
    assert restored == dto


def test_playlist_dto_copies_fields_and_timestamps():
    playlist = Playlist("Chill", "evening")
    dto = PlaylistDto.from_playlist(playlist)
    assert dto.id == playlist.id.value
    assert dto.name == "Chill"
    assert dto.description == "evening"
    assert datetime.fromisoformat(dto.created_at) == playlist.created_at
    assert datetime.fromisoformat(dto.updated_at) == playlist.updated_at


def test_playlist_dto_without_description():
    dto = PlaylistDto.from_playlist(Playlist("Chill", None))
    assert dto.description is None
    assert PlaylistDto.from_dict(dto.to_dict()) == dto


def test_playlist_with_songs_round_trip():
    songs = [SongDto.from_song(make_song(f"/music/{n}.mp3")) for n in "ab"]
    dto = PlaylistWithSongsDto(PlaylistDto.from_playlist(Playlist("Mix", None)), songs)
    restored = PlaylistWithSongsDto.from_dict(json.loads(json.dumps(dto.to_dict())))
    assert restored == dto
    assert [s.file_path for s in restored.songs] == ["/music/a.mp3", "/music/b.mp3"]


def test_search_result_round_trip():
    songs = [SongDto.from_song(make_song())]
    dto = SearchResultDto(songs=songs, total_count=len(songs), query="Test")
    restored = SearchResultDto.from_dict(dto.to_dict())
    assert restored == dto
    assert restored.total_count == len(restored.songs)


def test_library_stats_round_trip():
    dto = LibraryStatsDto(
        total_songs=3,
        total_playlists=1,
        total_duration_seconds=540,
        unique_artists=2,
        unique_albums=2,
    )
    assert LibraryStatsDto.from_dict(json.loads(json.dumps(dto.to_dict()))) == dto