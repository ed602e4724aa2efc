"""Persisted game record: a key plus the action history as JSON text.

The history is stored rather than the final position, together with the
position the game started from and the settings it was played under, so a
record can always be replayed into a full
:class:`~pacosako.game.state.GameState`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from pacosako.core.action import Action
from pacosako.core.enums import LiftPolicy
from pacosako.core.errors import WireFormatError
from pacosako.core.position import Position
from pacosako.core.serde import (
    action_to_dict,
    dict_to_action,
    dict_to_position,
    position_to_dict,
)
from pacosako.game.settings import GameSettings
from pacosako.game.state import GameState

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameRecord:
    key: str
    actions: list[Action] = field(default_factory=list)
    start: Position = field(default_factory=Position.initial)
    settings: GameSettings = field(default_factory=GameSettings)

    @classmethod
    def from_state(cls, key: str, state: GameState) -> GameRecord:
        return cls(key, state.actions, state.start_position, state.settings)

    def to_state(self, settings: GameSettings | None = None) -> GameState:
        """Replay the stored history from the stored start position.

        *settings* overrides the stored settings.
        """
        return GameState.replay(
            self.actions,
            settings if settings is not None else self.settings,
            self.start,
        )

    # ── Storage ──────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "action_history": [action_to_dict(a) for a in self.actions],
            "start_position": position_to_dict(self.start),
            "settings": _settings_to_dict(self.settings),
        }

    @classmethod
    def from_dict(cls, d: Any) -> GameRecord:
        """Decode a stored record.

        ``start_position`` and ``settings`` may be absent; the initial
        position and default settings are used then.
        """
        if not isinstance(d, dict):
            raise WireFormatError("A game record must be an object")
        key = d.get("key")
        history = d.get("action_history")
        if not isinstance(key, str) or not isinstance(history, list):
            raise WireFormatError("A game record needs a string key and a list history")

        record = cls(key, [dict_to_action(item) for item in history])
        if "start_position" in d:
            record.start = dict_to_position(d["start_position"])
        if "settings" in d:
            record.settings = _dict_to_settings(d["settings"])
        return record

    def store(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def load(cls, text: str) -> GameRecord:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise WireFormatError(f"Invalid JSON: {exc.msg}") from exc
        record = cls.from_dict(payload)
        _LOGGER.debug("Loaded game %s with %d actions", record.key, len(record.actions))
        return record


# ── Settings ────────────────────────────────────────────────────────────────


def _settings_to_dict(settings: GameSettings) -> dict[str, Any]:
    return {
        "liftPolicy": settings.lift_policy.name.capitalize(),
        "autoEndTurn": settings.auto_end_turn,
    }


def _dict_to_settings(d: Any) -> GameSettings:
    if not isinstance(d, dict):
        raise WireFormatError("settings must be an object")
    policy = d.get("liftPolicy")
    auto_end_turn = d.get("autoEndTurn")
    if not isinstance(policy, str) or policy.upper() not in LiftPolicy.__members__:
        raise WireFormatError(f"Unknown lift policy: {policy!r}")
    if not isinstance(auto_end_turn, bool):
        raise WireFormatError("autoEndTurn must be a boolean")
    return GameSettings(LiftPolicy[policy.upper()], auto_end_turn)
