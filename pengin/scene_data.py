"""Per-scene data: its name and which entity each user controls."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

UserIndex = uuid.UUID


@dataclass
class SceneData:
    """A scene's name and the player entity (by UUID) assigned to each user.

    Player UUIDs are kept densely in ``player_uuids``; the two maps link a
    user to a position in that list and back.
    """

    name: str = "No Scene Name"
    player_uuids: List[uuid.UUID] = field(default_factory=list)
    user_to_index: Dict[UserIndex, int] = field(default_factory=dict)
    index_to_user: Dict[int, UserIndex] = field(default_factory=dict)

    def player_uuid(self, user: UserIndex) -> uuid.UUID:
        """The UUID of the player entity of ``user``; raises KeyError if none is set."""
        try:
            return self.player_uuids[self.user_to_index[user]]
        except KeyError:
            raise KeyError(f"user {user} has no player") from None

    def set_player_uuid(self, user: UserIndex, player_uuid: uuid.UUID) -> None:
        """Assign ``player_uuid`` to ``user``, replacing any previous assignment."""
        index = self.user_to_index.get(user)
        if index is None:
            self.player_uuids.append(player_uuid)
            index = len(self.player_uuids) - 1
        else:
            self.player_uuids[index] = player_uuid
        self.user_to_index[user] = index
        self.index_to_user[index] = user

    def remove_player(
        self,
        user: UserIndex,
        user_of_player: Optional[Callable[[uuid.UUID], UserIndex]] = None,
    ) -> bool:
        """Remove the player of ``user``; returns False if the user had none.

        The last player is moved into the freed slot. ``user_of_player`` maps a
        player UUID to the user controlling it; by default the stored mapping
        is used.
        """
        index = self.user_to_index.get(user)
        if index is None:
            return False

        last_index = len(self.player_uuids) - 1
        back_uuid = self.player_uuids[last_index]
        if user_of_player is None:
            back_user = self.index_to_user[last_index]
        else:
            back_user = user_of_player(back_uuid)

        if index != last_index:
            self.player_uuids[index], self.player_uuids[last_index] = (
                self.player_uuids[last_index],
                self.player_uuids[index],
            )
            self.user_to_index[back_user] = index
            self.index_to_user[index] = back_user

        del self.user_to_index[user]
        self.index_to_user.pop(last_index, None)
        self.player_uuids.pop()
        return True