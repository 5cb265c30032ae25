"""Command-line argument parsing."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from lofiturtle.errors import ConfigurationError, DirectoryNotFoundError

_VERSION = "0.1.0"
DEFAULT_DATABASE = "music_library.db"


class RepeatModeArg(str, Enum):
    NONE = "none"
    SINGLE = "single"
    PLAYLIST = "playlist"

    def __str__(self) -> str:
        return self.value


class ShuffleMode(str, Enum):
    ON = "on"
    OFF = "off"
    TOGGLE = "toggle"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PlayArgs:
    """Start the interactive player."""

    music_dir: Path | None = None


@dataclass(frozen=True)
class ScanArgs:
    """Scan a music directory into the database."""

    music_dir: Path
    force: bool = False


@dataclass(frozen=True)
class ListArgs:
    """List songs, optionally filtered."""

    artist: str | None = None
    album: str | None = None


@dataclass(frozen=True)
class SearchArgs:
    query: str


@dataclass(frozen=True)
class PlaylistArgs:
    """A playlist action: create, list, show, delete, add, remove or play."""

    action: str
    name: str | None = None
    description: str | None = None
    songs: tuple[str, ...] = ()


@dataclass(frozen=True)
class ShuffleArgs:
    mode: ShuffleMode | None = None


@dataclass(frozen=True)
class RepeatArgs:
    mode: RepeatModeArg


Command = Union[
    PlayArgs, ScanArgs, ListArgs, SearchArgs, PlaylistArgs, ShuffleArgs, RepeatArgs
]


@dataclass
class Cli:
    """Parsed command-line options."""

    music_dir: Path | None = None
    database: Path = Path(DEFAULT_DATABASE)
    verbose: bool = False
    no_scan: bool = False
    show_art: bool = False
    no_art: bool = False
    shuffle: bool = False
    repeat: RepeatModeArg | None = None
    cli_mode: bool = False
    command: Command | None = None

    def get_music_dir(self) -> Path:
        """The chosen music directory, falling back to the platform default."""
        if self.music_dir is not None:
            return self.music_dir
        if isinstance(self.command, PlayArgs) and self.command.music_dir is not None:
            return self.command.music_dir
        return self.default_music_dir()

    @staticmethod
    def default_music_dir() -> Path:
        if sys.platform == "darwin":
            return Path("/Users/Shared/Music")
        if sys.platform == "win32":
            return Path("C:\\Users\\Public\\Music")
        return Path("/home/music")

    def validate_music_dir(self) -> Path:
        """Return the music directory, raising if it is missing or not a directory."""
        music_dir = self.get_music_dir()
        if not music_dir.exists():
            raise DirectoryNotFoundError(
                f"Music directory '{music_dir}' does not exist"
            )
        if not music_dir.is_dir():
            raise ConfigurationError(f"'{music_dir}' is not a directory")
        return music_dir


def _optional_path(value: str | None) -> Path | None:
    return Path(value) if value is not None else None


def _add_playlist_parsers(playlist: argparse.ArgumentParser) -> None:
    actions = playlist.add_subparsers(dest="action", metavar="ACTION", required=True)

    create = actions.add_parser("create", help="Create a new playlist")
    create.add_argument("name", help="Playlist name")
    create.add_argument("-d", "--description", help="Optional description")
    create.set_defaults(
        _command=lambda ns: PlaylistArgs(
            "create", name=ns.name, description=ns.description
        )
    )

    listing = actions.add_parser("list", help="List all playlists")
    listing.set_defaults(_command=lambda ns: PlaylistArgs("list"))

    for action, text in (
        ("show", "Show playlist contents"),
        ("delete", "Delete a playlist"),
        ("play", "Play a playlist"),
    ):
        sub = actions.add_parser(action, help=text)
        sub.add_argument("name", help="Playlist name")
        sub.set_defaults(
            _command=lambda ns, action=action: PlaylistArgs(action, name=ns.name)
        )

    for action, text in (
        ("add", "Add songs to a playlist"),
        ("remove", "Remove songs from a playlist"),
    ):
        sub = actions.add_parser(action, help=text)
        sub.add_argument("playlist", help="Playlist name")
        sub.add_argument("songs", nargs="+", help="Song title or path")
        sub.set_defaults(
            _command=lambda ns, action=action: PlaylistArgs(
                action, name=ns.playlist, songs=tuple(ns.songs)
            )
        )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``lofiturtle`` command."""
    parser = argparse.ArgumentParser(
        prog="lofiturtle", description="A beautiful terminal-based music player"
    )
    parser.add_argument(
        "-m", "--music-dir", metavar="DIR", help="Music directory to scan and play from"
    )
    parser.add_argument(
        "-d",
        "--database",
        metavar="FILE",
        default=DEFAULT_DATABASE,
        help="Database file path",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    parser.add_argument(
        "--no-scan", action="store_true", help="Disable library scanning on startup"
    )
    art = parser.add_mutually_exclusive_group()
    art.add_argument(
        "--show-art", action="store_true", help="Show album art (enabled by default)"
    )
    art.add_argument("--no-art", action="store_true", help="Disable album art")
    parser.add_argument("--shuffle", action="store_true", help="Enable shuffle mode")
    parser.add_argument(
        "--repeat",
        type=RepeatModeArg,
        choices=list(RepeatModeArg),
        help="Set repeat mode",
    )
    parser.add_argument(
        "--cli-mode", action="store_true", help="Use CLI mode instead of TUI"
    )
    parser.add_argument("-V", "--version", action="version", version=_VERSION)

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    play = commands.add_parser("play", help="Start the interactive music player")
    play.add_argument("play_music_dir", nargs="?", metavar="DIR")
    play.set_defaults(
        _command=lambda ns: PlayArgs(_optional_path(ns.play_music_dir))
    )

    scan = commands.add_parser("scan", help="Scan music library and update database")
    scan.add_argument("scan_music_dir", metavar="DIR")
    scan.add_argument(
        "-f", "--force", action="store_true", help="Force rescan of all files"
    )
    scan.set_defaults(
        _command=lambda ns: ScanArgs(Path(ns.scan_music_dir), force=ns.force)
    )

    listing = commands.add_parser("list", help="List all songs in the database")
    listing.add_argument("-a", "--artist", help="Filter by artist")
    listing.add_argument("-A", "--album", help="Filter by album")
    listing.set_defaults(_command=lambda ns: ListArgs(ns.artist, ns.album))

    search = commands.add_parser("search", help="Search for songs")
    search.add_argument("query", help="Search query")
    search.set_defaults(_command=lambda ns: SearchArgs(ns.query))

    playlist = commands.add_parser("playlist", help="Manage playlists")
    _add_playlist_parsers(playlist)

    shuffle = commands.add_parser("shuffle", help="Toggle shuffle mode")
    shuffle.add_argument(
        "mode", nargs="?", type=ShuffleMode, choices=list(ShuffleMode), default=None
    )
    shuffle.set_defaults(_command=lambda ns: ShuffleArgs(ns.mode))

    repeat = commands.add_parser("repeat", help="Set repeat mode")
    repeat.add_argument("mode", type=RepeatModeArg, choices=list(RepeatModeArg))
    repeat.set_defaults(_command=lambda ns: RepeatArgs(ns.mode))

    return parser


def parse_args(argv: Sequence[str] | None = None) -> Cli:
    """Parse arguments into a :class:`Cli`; invalid input exits via argparse."""
    namespace = build_parser().parse_args(argv)
    builder = getattr(namespace, "_command", None)
    return Cli(
        music_dir=_optional_path(namespace.music_dir),
        database=Path(namespace.database),
        verbose=namespace.verbose,
        no_scan=namespace.no_scan,
        show_art=namespace.show_art,
        no_art=namespace.no_art,
        shuffle=namespace.shuffle,
        repeat=namespace.repeat,
        cli_mode=namespace.cli_mode,
        command=builder(namespace) if builder is not None else None,
    )