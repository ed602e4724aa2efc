"""Game state — a position plus the history of actions that produced it."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from pacosako.core.action import Action, Place, Promote
from pacosako.core.enums import Color
from pacosako.core.position import Position
from pacosako.core.rules import do_action, has_pending_promotion
from pacosako.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


@dataclass
class ActionRecord:
    """A single entry in the action history."""

    action: Action
    position_before: Position
    turn_ended: bool = False


@dataclass
class GameState:
    """Tracks the current position and the action history of one game.

    Legality beyond the structural checks of the action machine is the
    caller's business. This is a pure data/logic class with no threading.
    """

    settings: GameSettings = field(default_factory=GameSettings)
    position: Position = field(init=False)
    start_position: Position = field(init=False)
    history: list[ActionRecord] = field(default_factory=list, init=False)
    _turn_start: Position = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.setup()

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, position: Position | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_position = position if position is not None else Position.initial()
        self.position = self.start_position
        self._turn_start = self.start_position
        self.history.clear()

    # ── Action application ───────────────────────────────────────────────

    def apply_action(self, action: Action) -> ActionRecord | None:
        """Apply *action*; return its history record, or ``None`` if rejected."""
        before = self.position
        after = do_action(before, action, self.settings.lift_policy)
        if after is None:
            _LOGGER.debug("Illegal action %s for %s", action, before.current_player)
            return None

        turn_ended = self.settings.auto_end_turn and self._completes_turn(action, after)
        if turn_ended:
            after = after.with_current_player(after.current_player.opposite)
            self._turn_start = after

        record = ActionRecord(action, before, turn_ended)
        self.history.append(record)
        self.position = after
        return record

    def undo_last_action(self) -> Action | None:
        """Undo the last action. Returns it, or ``None`` if there is none."""
        if not self.history:
            return None

        record = self.history.pop()
        self.position = record.position_before
        if record.turn_ended:
            self._turn_start = self._find_turn_start()
        return record.action

    @classmethod
    def replay(
        cls,
        actions: Iterable[Action],
        settings: GameSettings | None = None,
        start: Position | None = None,
    ) -> GameState:
        """Rebuild a game from its action history.

        Raises ``ValueError`` on the first action that is rejected.
        """
        state = cls(settings if settings is not None else GameSettings())
        if start is not None:
            state.setup(start)
        for i, action in enumerate(actions):
            if state.apply_action(action) is None:
                raise ValueError(f"Action {i} ({action}) is illegal during replay")
        return state

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.current_player

    @property
    def actions(self) -> list[Action]:
        return [record.action for record in self.history]

    @property
    def action_count(self) -> int:
        return len(self.history)

    @property
    def turn_count(self) -> int:
        """Number of completed turns."""
        return sum(1 for record in self.history if record.turn_ended)

    @property
    def awaiting_promotion(self) -> bool:
        return self.position.is_idle and has_pending_promotion(self.position)

    # ── Internal ─────────────────────────────────────────────────────────

    def _completes_turn(self, action: Action, after: Position) -> bool:
        if isinstance(action, Promote):
            return True
        if not isinstance(action, Place) or not after.is_idle:
            return False
        if has_pending_promotion(after):
            return False
        # Putting a piece back where it was is not a move.
        return after != self._turn_start

    def _find_turn_start(self) -> Position:
        for i in range(len(self.history) - 1, -1, -1):
            if not self.history[i].turn_ended:
                continue
            if i + 1 < len(self.history):
                return self.history[i + 1].position_before
            return self.position
        return self.start_position
