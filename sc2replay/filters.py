"""Common filters to apply while iterating over replay events."""

from __future__ import annotations

from dataclasses import dataclass

from .details import Details


@dataclass
class SC2ReplayFilters:
    """A set of known filters; ``None`` leaves the criterion unused."""

    player_id: int | None = None
    unit_tag: int | None = None
    min_loop: int | None = None
    max_loop: int | None = None
    event_type: str | None = None
    unit_name: str | None = None
    max_events: int | None = None
    include_stats: bool = False

    def set_player_id_from_user_name(self, username: str, details: Details) -> None:
        """Set ``player_id`` to the slot of the player named ``username``.

        When several players carry the name the last one wins; with no match
        the current value is kept.
        """
        for player in details.player_list:
            if player.name == username:
                self.player_id = player.working_set_slot_id