# sc2replay

Building blocks for reading StarCraft II replay data in pure Python, with no
dependencies outside the standard library.

## What it provides

- `sc2replay.bit_packed`: `BitCursor`, an immutable bit position inside a
  byte buffer, and readers for the bit-packed replay encoding. Each reader
  takes a cursor and returns `(new_cursor, value)`:
  `rtake_n_bits`, `take_n_bits_into_int`, `take_bit_array`, `byte_align`,
  `take_unaligned_byte`, `take_fourcc`, `take_null`, `parse_packed_int`
  (offset binary integers) and `parse_bool`.
- `sc2replay.common`: the `ObserveRole`, `GameSpeed` and `GameResult`
  enumerations, and `Vec3D`, a map position. `Vec3D.from_map_coord` scales raw
  coordinates down by a ratio and flips the y axis. `Vec3D.as_list` gives
  `[x, y, z]`.
- `sc2replay.details`: the replay details model (`Details`, `PlayerDetails`,
  `ToonNameDetails`, `Color`, `Thumbnail`). `Details.set_metadata` returns a
  copy carrying the file name and the SHA-256 hex digest of the file contents.
  `Details.get_player_name` returns `region-realm-id-name` for the player in a
  given slot (dropping a clan prefix separated by `<sp/>`), or `""` when no
  player holds that slot.
- `sc2replay.filters`: `SC2ReplayFilters`, common filter settings for event
  streams. `set_player_id_from_user_name` looks up a player's slot by name in
  a `Details`.
- `sc2replay.discovery`: `get_matching_files` walks a directory tree for
  `.SC2Replay` files, limited by number of files and depth; a path that is not
  a directory is returned as the only entry. `json_line` formats one JSON
  record as an element of a printed list (a trailing comma).
- `sc2replay.selection`: `filter_by_version` keeps sources whose `version`
  lies within inclusive bounds, up to a limit, and
  `shortest_unique_prefix_length` finds the shortest prefix length (up to 64)
  that keeps every hash distinct.
- `sc2replay.errors`: the `S2ProtocolError` hierarchy (`MPQError`,
  `UnsupportedProtocolVersion`, `ByteAlignedError`, `BitPackedError`,
  `UnknownTagError`, `DuplicateTagError`, `MissingFieldError`,
  `PathNotADirError`, `UnsupportedEventTypeError`).

## Installation

```
pip install .
```

## Example

```python
from sc2replay.bit_packed import BitCursor, parse_packed_int

cursor = BitCursor(bytes([0x07, 0x75, 0x26, 0x7a]))
cursor, value = parse_packed_int(cursor, 0, 32)
assert value == 125118074
```

```python
from pathlib import Path
from sc2replay.discovery import get_matching_files

replays = get_matching_files(Path("replays"), max_files=100, max_depth=4)
```

Reading past the end of the data raises `sc2replay.errors.BitPackedError`.

## What it does not do

The package holds the pieces listed above and nothing more. It does not open
MPQ archives, decode the protocol header, the details, init data, game,
tracker or message events from a replay file, and it writes no columnar
output files. It has no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```