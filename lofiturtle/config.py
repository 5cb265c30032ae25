"""Player configuration and settings that persist between sessions."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from lofiturtle.art import AlbumArtConfig
from lofiturtle.cli import DEFAULT_DATABASE, Cli, RepeatModeArg
from lofiturtle.errors import ConfigurationError, DirectoryNotFoundError

logger = logging.getLogger(__name__)

SETTINGS_FILE = "lofiturtle_settings.json"


class RepeatMode(str, Enum):
    NONE = "None"
    SINGLE = "Single"
    PLAYLIST = "Playlist"


_REPEAT_FROM_ARG = {
    RepeatModeArg.NONE: RepeatMode.NONE,
    RepeatModeArg.SINGLE: RepeatMode.SINGLE,
    RepeatModeArg.PLAYLIST: RepeatMode.PLAYLIST,
}


def _clamp_volume(volume: float) -> float:
    return min(max(float(volume), 0.0), 1.0)


@dataclass
class PersistentSettings:
    """Settings kept in a JSON file in the working directory."""

    volume: float = 0.7
    shuffle: bool = False
    repeat_mode: RepeatMode = RepeatMode.NONE

    @staticmethod
    def _path() -> Path:
        return Path(SETTINGS_FILE)

    @classmethod
    def _from_dict(cls, data: Any) -> PersistentSettings:
        if not isinstance(data, dict):
            raise ValueError("settings must be an object")
        volume = data["volume"]
        shuffle = data["shuffle"]
        if isinstance(volume, bool) or not isinstance(volume, (int, float)):
            raise ValueError("volume must be a number")
        if not isinstance(shuffle, bool):
            raise ValueError("shuffle must be a boolean")
        return cls(float(volume), shuffle, RepeatMode(data["repeat_mode"]))

    @classmethod
    def load(cls) -> PersistentSettings:
        """Read the settings file; defaults if it is missing or unreadable."""
        try:
            content = cls._path().read_text(encoding="utf-8")
        except OSError:
            return cls()
        try:
            return cls._from_dict(json.loads(content))
        except (ValueError, KeyError, TypeError):
            logger.warning("Failed to parse settings file, using defaults")
            return cls()

    def save(self) -> None:
        data = asdict(self)
        data["repeat_mode"] = self.repeat_mode.value
        content = json.dumps(data, indent=2)
        try:
            self._path().write_text(content, encoding="utf-8")
        except OSError as error:
            raise ConfigurationError(f"Failed to save settings: {error}") from error

    def update_volume(self, volume: float) -> None:
        """Set the volume, clamped to 0.0..1.0, and save."""
        self.volume = _clamp_volume(volume)
        self.save()


@dataclass
class Config:
    """Runtime configuration of the player."""

    music_dir: Path = field(default_factory=Cli.default_music_dir)
    database_path: Path = Path(DEFAULT_DATABASE)
    verbose: bool = False
    no_scan: bool = False
    tick_rate_ms: int = 250
    default_volume: float = 0.7
    show_art: bool = True
    shuffle: bool = False
    repeat_mode: RepeatMode = RepeatMode.NONE
    album_art_config: AlbumArtConfig = field(default_factory=AlbumArtConfig)
    cli_mode: bool = False

    @classmethod
    def from_cli(cls, cli: Cli) -> Config:
        music_dir = cli.validate_music_dir()
        repeat_mode = (
            _REPEAT_FROM_ARG[cli.repeat] if cli.repeat is not None else RepeatMode.NONE
        )
        show_art = not cli.no_art
        return build_config(
            music_dir=music_dir,
            database_path=cli.database,
            verbose=cli.verbose,
            no_scan=cli.no_scan,
            show_art=show_art,
            shuffle=cli.shuffle,
            repeat_mode=repeat_mode,
            album_art_config=AlbumArtConfig(show_art=show_art),
            cli_mode=cli.cli_mode,
        )


def build_config(
    music_dir: str | Path | None = None,
    database_path: str | Path | None = None,
    verbose: bool | None = None,
    no_scan: bool | None = None,
    tick_rate_ms: int | None = None,
    default_volume: float | None = None,
    show_art: bool | None = None,
    shuffle: bool | None = None,
    repeat_mode: RepeatMode | None = None,
    album_art_config: AlbumArtConfig | None = None,
    cli_mode: bool | None = None,
) -> Config:
    """Build a validated Config; unset options take the defaults."""
    defaults = Config()

    if default_volume is not None and not 0.0 <= default_volume <= 1.0:
        logger.warning(
            "Volume should be between 0.0 and 1.0, got %s", default_volume
        )

    directory = Path(music_dir) if music_dir is not None else defaults.music_dir
    if not directory.exists():
        raise DirectoryNotFoundError(f"Music directory '{directory}' does not exist")
    if not directory.is_dir():
        raise ConfigurationError(f"'{directory}' is not a directory")

    tick = tick_rate_ms if tick_rate_ms is not None else defaults.tick_rate_ms
    if tick == 0:
        raise ConfigurationError("Tick rate must be greater than 0")

    def pick(value, default):
        return default if value is None else value

    return Config(
        music_dir=directory,
        database_path=Path(pick(database_path, defaults.database_path)),
        verbose=pick(verbose, defaults.verbose),
        no_scan=pick(no_scan, defaults.no_scan),
        tick_rate_ms=tick,
        default_volume=(
            _clamp_volume(default_volume)
            if default_volume is not None
            else defaults.default_volume
        ),
        show_art=pick(show_art, defaults.show_art),
        shuffle=pick(shuffle, defaults.shuffle),
        repeat_mode=pick(repeat_mode, defaults.repeat_mode),
        album_art_config=pick(album_art_config, defaults.album_art_config),
        cli_mode=pick(cli_mode, defaults.cli_mode),
    )