"""Plain data objects passed out of the application layer."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from lofiturtle.domain.playlist import Playlist
from lofiturtle.domain.song import Song


@dataclass
class SongDto:
    id: str
    file_path: str
    title: str
    artist: str
    album: str
    duration_seconds: int

    @classmethod
    def from_song(cls, song: Song) -> SongDto:
        return cls(
            id=song.id.value,
            file_path=song.file_path.value,
            title=song.title,
            artist=song.artist,
            album=song.album,
            duration_seconds=song.duration.total_seconds,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SongDto:
        return cls(**data)


@dataclass
class PlaylistDto:
    id: str
    name: str
    description: str | None
    created_at: str
    updated_at: str

    @classmethod
    def from_playlist(cls, playlist: Playlist) -> PlaylistDto:
        """Copy a playlist; timestamps become RFC 3339 strings."""
        return cls(
            id=playlist.id.value,
            name=playlist.name,
            description=playlist.description,
            created_at=playlist.created_at.isoformat(),
            updated_at=playlist.updated_at.isoformat(),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlaylistDto:
        return cls(**data)


@dataclass
class PlaylistWithSongsDto:
    playlist: PlaylistDto
    songs: list[SongDto] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlaylistWithSongsDto:
        return cls(
            playlist=PlaylistDto.from_dict(data["playlist"]),
            songs=[SongDto.from_dict(song) for song in data["songs"]],
        )


@dataclass
class SearchResultDto:
    songs: list[SongDto]
    total_count: int
    query: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SearchResultDto:
        return cls(
            songs=[SongDto.from_dict(song) for song in data["songs"]],
            total_count=data["total_count"],
            query=data["query"],
        )


@dataclass
class LibraryStatsDto:
    total_songs: int
    total_playlists: int
    total_duration_seconds: int
    unique_artists: int
    unique_albums: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LibraryStatsDto:
        return cls(**data)