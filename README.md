# lofiturtle

The library core of a terminal music player:

- **Domain model** (`lofiturtle.domain`): the `Song` and `Playlist` entities and the value objects `SongId`, `FilePath`, `Duration`, `Volume` and `PlaylistId`, each of which checks its own rules.
- **Repository interfaces** (`lofiturtle.domain.repositories`): the abstract asynchronous classes `SongRepository`, `PlaylistRepository`, `PlaylistSongRepository` and `UnitOfWork`.
- **Use cases** (`lofiturtle.application`): adding, searching, fetching and removing songs; creating, filling, emptying, reading and deleting playlists. `MusicLibraryService` puts them all behind one facade of coroutines.
- **Data transfer objects** (`lofiturtle.application.dto`).
- **Album art** as ASCII text, with a note-shaped placeholder (`lofiturtle.art`).
- **Configuration**: argument parsing (`lofiturtle.cli`), persistent settings and a validated `Config` (`lofiturtle.config`).

It needs Python 3.10 or later. Its only runtime dependency is Pillow.

## Value objects

```python
from lofiturtle.domain.value_objects import Duration, FilePath, PlaylistId, SongId, Volume

path = FilePath("/music/rain.mp3")
path.extension()                              # "mp3"
path.filename_stem()                          # "rain"
song_id = SongId.from_path(path)              # MD5 hex digest of the path; the same path gives the same id

Duration.from_seconds(125).format_mm_ss()     # "02:05"
Duration.from_seconds(3725).format_h_mm_ss()  # "1:02:05"
Duration.from_minutes_seconds(2, 5).minutes   # 2

Volume(0.5).as_percentage()                   # 50
Volume(0.5).increase(0.8).value               # 1.0, clamped
PlaylistId.new()                              # a random UUID4
```

An invalid value raises an exception rather than returning a status:

- `InvalidFilePathError` for an empty path or a path with no `.` in it
- `InvalidDurationError` for a negative duration, or for 60 or more seconds passed to `from_minutes_seconds`
- `InvalidVolumeError` for a volume outside 0.0 to 1.0

All three derive from `lofiturtle.errors.DomainError`.

## Songs and playlists

```python
from lofiturtle.domain.playlist import Playlist, PlaylistBuilder
from lofiturtle.domain.song import Song
from lofiturtle.domain.value_objects import Duration, FilePath

song = Song(FilePath("/music/rain.mp3"), "Rain", "", "Night Walks", Duration.from_seconds(180))
song.artist          # "Unknown Artist", because the artist is empty
song.display_name    # "Rain"; with an artist this would read "Rain - <artist>"

playlist = Playlist("Focus", None)
playlist.add_song(song.id)
playlist.display_info   # "Focus (1 song)"
song.id in playlist     # True
```

`Song` strips whitespace from its title, artist and album. It raises `InvalidSongTitleError` for a blank title.

`Playlist` raises `InvalidPlaylistNameError` for a blank name. It raises the same error for a name longer than 100 bytes in UTF-8.

Several playlist operations raise `BusinessRuleViolationError`:

- adding a song that is already in the playlist
- moving a song to or from a position outside the list with `move_song`

`remove_song` raises `SongNotFoundError` if the song is not in the playlist.

Every change updates `updated_at`, which is a timezone-aware UTC datetime.

`Playlist.from_existing` rebuilds a stored playlist. It checks only that the name is not blank.

`PlaylistBuilder` assembles a playlist step by step:

```python
playlist = PlaylistBuilder().name("Mix").description("late night").add_songs(ids).build()
```

`build()` drops duplicate songs. It raises `InvalidPlaylistNameError` if no name was set.

## The library service

`MusicLibraryService` takes three repository instances and exposes coroutines:

```python
from lofiturtle.application.music_library_service import MusicLibraryService, SongData

service = MusicLibraryService(song_repository, playlist_repository, playlist_song_repository)

song_id = await service.add_song(path, "Rain", "Artist", "Album", Duration.from_seconds(180))
matches = await service.search_songs("rain")     # a blank query returns every song
everything = await service.get_all_songs()
playlist_id = await service.create_playlist("Focus", "Songs for deep work")
await service.add_song_to_playlist(playlist_id, song_id)
playlist, songs = await service.get_playlist_with_songs(playlist_id)
await service.remove_song_from_playlist(playlist_id, song_id)
await service.delete_playlist(playlist_id)
```

Adding a song whose path is already stored leaves the stored song alone and returns its id.

Failures are raised as subclasses of `lofiturtle.errors.ApplicationError`:

- `ValidationFailedError` when a playlist name is already taken
- `UseCaseFailedError` when a song or playlist is missing
- `DomainFailureError` when a domain rule is broken; it wraps the original error in `domain_error`

`batch_add_songs` takes an iterable of `SongData` and returns a `BatchAddResult`. The result holds `added_count`, `updated_count`, and one `BatchError` for each song that failed; a failure does not stop the batch.

The individual use cases, such as `AddSongUseCase` and `CreatePlaylistUseCase`, can also be used on their own. They live in `lofiturtle.application.song_management` and `lofiturtle.application.playlist_management`, each with a request and a response dataclass.

`lofiturtle.application.dto` provides plain dataclasses for passing results out of the application layer:

- `SongDto.from_song` and `PlaylistDto.from_playlist`; `PlaylistDto` holds the timestamps as ISO 8601 strings
- `PlaylistWithSongsDto`, `SearchResultDto` and `LibraryStatsDto`

Each one has `to_dict` and `from_dict`.

## Album art

```python
from lofiturtle.art import AlbumArtConfig, AlbumArtRenderer

renderer = AlbumArtRenderer(AlbumArtConfig())   # 40x20 characters by default
text = renderer.generate_placeholder_for_panel(80, 40)
art = renderer.render_album_art_for_panel(image_bytes, 80, 40)
```

`render_album_art` and `image_to_ascii` resize the image to the configured size with Lanczos resampling. Each pixel becomes one character from `" .:-=+*#%@"`, chosen by its luminance scaled by its alpha.

`calculate_optimal_dimensions` sizes the art to the panel:

- the width is 80% of the panel width minus its borders, and at least 16
- the height follows the image's aspect ratio, and is at least 8 but no more than the panel height minus its borders

`calculate_placeholder_dimensions` does the same for the placeholder, treating it as a square image at double height.

Bytes that are not an image raise `ConfigurationError`. With `show_art=False` every render method returns an empty string.

## Command-line options and configuration

`lofiturtle.cli.parse_args(argv)` parses the player's options into a `Cli` dataclass:

- `-m/--music-dir`
- `-d/--database` (default `music_library.db`)
- `-v/--verbose`
- `--no-scan`
- `--show-art` or `--no-art`; the two cannot be given together
- `--shuffle`
- `--repeat none|single|playlist`
- `--cli-mode`
- `-V/--version`

It also parses these subcommands, each into its own dataclass:

- `play [DIR]`
- `scan DIR [-f]`
- `list [-a ARTIST] [-A ALBUM]`
- `search QUERY`
- `playlist create|list|show|delete|add|remove|play ...`
- `shuffle [on|off|toggle]`
- `repeat none|single|playlist`

Invalid input exits through argparse. `build_parser()` returns the underlying `argparse.ArgumentParser`.

`Cli.get_music_dir()` picks the music directory from `--music-dir`, then from `play DIR`, then from the platform default (`Cli.default_music_dir()`).

`Config.from_cli(cli)` turns the parsed options into a validated `Config`. `build_config(...)` builds one directly from keyword arguments; any option left unset takes its default. Both raise errors for a bad directory or tick rate:

- `DirectoryNotFoundError` if the music directory does not exist
- `ConfigurationError` if it is not a directory
- `ConfigurationError` if the tick rate is 0

A default volume outside 0.0 to 1.0 is clamped into range and a warning is logged.

`PersistentSettings` keeps the volume, shuffle and repeat mode in `lofiturtle_settings.json` in the working directory:

- `load()` returns defaults if the file is missing or cannot be parsed
- `save()` raises `ConfigurationError` if the file cannot be written
- `update_volume()` clamps the volume and then saves

## What this package does not do

This package is the library core only. It has:

- no audio playback
- no interactive screen
- no installed command: nothing runs the parsed subcommands
- no scanning of music directories or reading of audio tags, including embedded album art
- no storage: the repository classes are abstract interfaces, so you must supply your own implementations to use `MusicLibraryService` or the use cases