"""Immutable value objects of the music library domain."""

from __future__ import annotations

import hashlib
import uuid
from dataclasses import dataclass, field
from pathlib import PurePath

from lofiturtle.errors import (
    InvalidDurationError,
    InvalidFilePathError,
    InvalidVolumeError,
)


@dataclass(frozen=True)
class SongId:
    """Song identifier; derived deterministically from the file path."""

    value: str

    @classmethod
    def from_path(cls, path: FilePath) -> SongId:
        return cls(hashlib.md5(path.value.encode("utf-8")).hexdigest())

    @classmethod
    def from_string(cls, value: str) -> SongId:
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FilePath:
    """A validated path to an audio file."""

    value: str

    def __post_init__(self) -> None:
        if not self.value.strip():
            raise InvalidFilePathError("Path cannot be empty")
        if "." not in self.value:
            raise InvalidFilePathError("Path must have an extension")

    def _split_name(self) -> tuple[str | None, str | None]:
        name = PurePath(self.value).name
        if not name or name == "..":
            return None, None
        dot = name.rfind(".")
        if dot <= 0:
            return name, None
        return name[:dot], name[dot + 1 :]

    def extension(self) -> str | None:
        """The file extension without the dot, if any."""
        return self._split_name()[1]

    def filename_stem(self) -> str | None:
        """The file name without its extension."""
        return self._split_name()[0]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Duration:
    """A length of time in whole seconds."""

    total_seconds: int

    def __post_init__(self) -> None:
        if self.total_seconds < 0:
            raise InvalidDurationError("Duration cannot be negative")

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        return cls(seconds)

    @classmethod
    def from_minutes_seconds(cls, minutes: int, seconds: int) -> Duration:
        if seconds >= 60:
            raise InvalidDurationError("Seconds must be less than 60")
        return cls(minutes * 60 + seconds)

    @property
    def minutes(self) -> int:
        return self.total_seconds // 60

    @property
    def seconds(self) -> int:
        """The seconds component, 0 to 59."""
        return self.total_seconds % 60

    def format_mm_ss(self) -> str:
        return f"{self.minutes:02}:{self.seconds:02}"

    def format_h_mm_ss(self) -> str:
        hours, rest = divmod(self.total_seconds, 3600)
        minutes, seconds = divmod(rest, 60)
        if hours > 0:
            return f"{hours}:{minutes:02}:{seconds:02}"
        return f"{minutes:02}:{seconds:02}"


@dataclass(frozen=True, order=True)
class Volume:
    """Playback volume between 0.0 and 1.0 inclusive."""

    value: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.value <= 1.0:
            raise InvalidVolumeError(self.value)

    def as_percentage(self) -> int:
        return int(self.value * 100.0)

    def increase(self, step: float) -> Volume:
        return Volume(min(max(self.value + step, 0.0), 1.0))

    def decrease(self, step: float) -> Volume:
        return Volume(min(max(self.value - step, 0.0), 1.0))

    def is_muted(self) -> bool:
        return self.value == 0.0


@dataclass(frozen=True)
class PlaylistId:
    """Playlist identifier; a random UUID unless given."""

    value: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def new(cls) -> PlaylistId:
        return cls()

    @classmethod
    def from_string(cls, value: str) -> PlaylistId:
        return cls(value)

    def __str__(self) -> str:
        return self.value