"""Exception hierarchy for the music player."""

from __future__ import annotations

from typing import Any


class LofiTurtleError(Exception):
    """Base class for player errors; the message is ``"<prefix>: <detail>"``."""

    prefix = "LofiTurtle error"

    def __init__(self, detail: Any) -> None:
        self.detail = str(detail)
        super().__init__(f"{self.prefix}: {self.detail}")


class DatabaseError(LofiTurtleError):
    prefix = "Database error"


class AudioPlaybackError(LofiTurtleError):
    prefix = "Audio playback error"


class FileSystemError(LofiTurtleError):
    prefix = "File system error"


class MusicLibraryError(LofiTurtleError):
    prefix = "Music library error"


class ConfigurationError(LofiTurtleError):
    prefix = "Configuration error"


class TerminalError(LofiTurtleError):
    prefix = "Terminal interface error"


class UnsupportedFormatError(LofiTurtleError):
    prefix = "Audio file format not supported"


class DirectoryNotFoundError(LofiTurtleError):
    prefix = "Music directory not found"


class InvalidCommandError(LofiTurtleError):
    prefix = "Invalid command"


class ChannelError(LofiTurtleError):
    prefix = "Channel communication error"


class DomainError(Exception):
    """A business rule of the domain model was broken."""

    prefix = "Domain error"

    def __init__(self, detail: Any) -> None:
        self.detail = str(detail)
        super().__init__(f"{self.prefix}: {self.detail}")


class InvalidFilePathError(DomainError):
    prefix = "Invalid file path"


class InvalidDurationError(DomainError):
    prefix = "Invalid duration"


class InvalidVolumeError(DomainError):
    prefix = "Invalid volume"

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(value)


class InvalidSongTitleError(DomainError):
    prefix = "Invalid song title"


class InvalidPlaylistNameError(DomainError):
    prefix = "Invalid playlist name"


class BusinessRuleViolationError(DomainError):
    prefix = "Business rule violation"


class SongNotFoundError(DomainError):
    prefix = "Song not found"


class ApplicationError(Exception):
    """An application workflow or repository operation failed."""

    prefix = "Application error"

    def __init__(self, detail: Any) -> None:
        self.detail = str(detail)
        super().__init__(f"{self.prefix}: {self.detail}")


class ValidationFailedError(ApplicationError):
    prefix = "Validation failed"


class UseCaseFailedError(ApplicationError):
    prefix = "Use case failed"


class DomainFailureError(ApplicationError):
    """Wraps a :class:`DomainError` raised while running a use case."""

    prefix = "Domain error"

    def __init__(self, domain_error: DomainError) -> None:
        self.domain_error = domain_error
        super().__init__(domain_error)