"""Game status state machine

IN_PROGRESS -> ENDED is the only legal move. ENDED is terminal.
"""

from __future__ import annotations

import logging

from .enums import GameStatus
from .exceptions import GameStateError

logger = logging.getLogger(__name__)

VALID_TRANSITIONS: dict[GameStatus, set[GameStatus]] = {
    GameStatus.IN_PROGRESS: {GameStatus.ENDED},
    GameStatus.ENDED: set(),
}


class InvalidStatusTransition(GameStateError):
    """Illegal status transition, e.g. ENDED -> IN_PROGRESS"""

    def __init__(self, current: GameStatus, target: GameStatus):
        message = f"Invalid status transition: {current.name} → {target.name}"
        super().__init__(
            message=message,
            current_state=current.value,
            expected_state=target.value,
        )
        self.from_status = current
        self.to_status = target


class GameStatusFSM:
    """Game status state machine

    Usage::

        fsm = GameStatusFSM()
        fsm.transition(GameStatus.ENDED)        # OK
        fsm.transition(GameStatus.IN_PROGRESS)  # raises InvalidStatusTransition
    """

    def __init__(self) -> None:
        self._status: GameStatus = GameStatus.IN_PROGRESS

    @property
    def current(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status is GameStatus.ENDED

    def transition(self, target: GameStatus) -> None:
        """Move to ``target``

        Raises:
            InvalidStatusTransition: the move is not allowed
        """
        if target not in VALID_TRANSITIONS[self._status]:
            raise InvalidStatusTransition(self._status, target)
        logger.debug("Status transition: %s → %s", self._status.name, target.name)
        self._status = target

    def can_transition(self, target: GameStatus) -> bool:
        return target in VALID_TRANSITIONS[self._status]
