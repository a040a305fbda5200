"""The replay details: players, map and game settings."""

from __future__ import annotations

import dataclasses
import hashlib
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class ToonNameDetails:
    """The battle.net identity of a player."""

    region: int
    program_id: int
    realm: int
    id: int


@dataclass
class Color:
    a: int
    r: int
    g: int
    b: int


@dataclass
class Thumbnail:
    file: str


@dataclass
class PlayerDetails:
    """One entry of the details player list."""

    name: str
    toon: ToonNameDetails
    race: str
    color: Color
    control: int
    team_id: int
    handicap: int
    observe: int
    result: int
    working_set_slot_id: int | None
    hero: str


_CLAN_SEPARATOR = "<sp/>"


@dataclass
class Details:
    """Game wide information stored in the replay details."""

    player_list: list[PlayerDetails]
    title: str
    difficulty: str
    thumbnail: Thumbnail
    is_blizzard_map: bool
    time_utc: int
    time_local_offset: int
    restart_as_transition_map: bool | None
    disable_recover_game: bool
    description: str
    image_file_path: str
    campaign_index: int
    map_file_name: str
    cache_handles: list[str] = field(default_factory=list)
    mini_save: bool = False
    game_speed: int = 0
    default_difficulty: int = 0
    mod_paths: list[str] = field(default_factory=list)
    ext_fs_replay_file_name: str = ""
    ext_fs_replay_sha256: str = ""
    ext_datetime: datetime | None = None

    def set_metadata(self, file_name: str, file_contents: bytes) -> Details:
        """Return a copy carrying the file name and the SHA-256 of the replay file."""
        return dataclasses.replace(
            self,
            ext_fs_replay_file_name=file_name,
            ext_fs_replay_sha256=hashlib.sha256(bytes(file_contents)).hexdigest(),
        )

    def get_player_name(self, event_player_id: int) -> str:
        """Return ``region-realm-id-name`` for the player in the given slot, or ``""``.

        A clan prefix, separated from the name by ``<sp/>``, is dropped.
        """
        player = next(
            (p for p in self.player_list if p.working_set_slot_id == event_player_id),
            None,
        )
        if player is None:
            return ""
        player_name = player.name.split(_CLAN_SEPARATOR)[-1]
        toon = player.toon
        return f"{toon.region}-{toon.realm}-{toon.id}-{player_name}"