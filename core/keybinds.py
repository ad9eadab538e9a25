"""Action keybinds and the session that captures a key to rebind one."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterator, Mapping, Optional

from config import settings
from core.errors import PreconditionError


class ActionId(str, Enum):
    ATTACK = "attack"
    JUMP = "jump"
    LEFT = "left"
    RIGHT = "right"
    CROUCH = "crouch"


# Browser-style and pygame-style names for keys with special labels
SPECIAL_KEY_NAMES = {
    " ": "SPACE",
    "space": "SPACE",
    "arrowup": "UP",
    "arrowdown": "DOWN",
    "arrowleft": "LEFT",
    "arrowright": "RIGHT",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
}


def normalize_key_name(raw_key: str) -> str:
    special = SPECIAL_KEY_NAMES.get(raw_key) or SPECIAL_KEY_NAMES.get(raw_key.lower())
    if special is not None:
        return special
    return raw_key.upper()


def _raw_key(event) -> str:
    """Key label from a string or a ``{"key": ...}`` mapping."""
    raw_key = event["key"] if isinstance(event, Mapping) else event
    if not isinstance(raw_key, str):
        raise PreconditionError(f"key event must carry a key label string, got {event!r}")
    return raw_key


class KeybindMap:
    """Fixed set of actions, each bound to a key name.

    Actions are never added or removed; only their keys change.
    """

    def __init__(self, bindings: Optional[Mapping[str, str]] = None) -> None:
        source = dict(settings.DEFAULT_KEYBINDS)
        if bindings:
            source.update({ActionId(action).value: key for action, key in bindings.items()})
        self._keys: Dict[ActionId, str] = {action: source[action.value] for action in ActionId}

    def __getitem__(self, action) -> str:
        return self._keys[ActionId(action)]

    def __setitem__(self, action, key_name: str) -> None:
        self._keys[ActionId(action)] = key_name

    def __iter__(self) -> Iterator[ActionId]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def as_dict(self) -> Dict[str, str]:
        return {action.value: key for action, key in self._keys.items()}


class KeyRemapSession:
    """Idle -> Awaiting(action) -> Idle.

    ``labels`` mirrors what the key buttons should display: the bound key, or
    the remap prompt for the action awaiting a key.
    """

    def __init__(self, keybinds: KeybindMap) -> None:
        self.keybinds = keybinds
        self.selected_action: Optional[ActionId] = None
        self.awaiting_key = False
        self._labels: Dict[ActionId, str] = {action: keybinds[action] for action in ActionId}

    def labels(self) -> Dict[str, str]:
        return {action.value: label for action, label in self._labels.items()}

    def label(self, action) -> str:
        return self._labels[ActionId(action)]

    def begin_remap(self, action) -> bool:
        action = ActionId(action)
        if self.awaiting_key and self.selected_action is action:
            return False
        if self.awaiting_key and self.selected_action is not None:
            self._restore_label(self.selected_action)
        self.selected_action = action
        self.awaiting_key = True
        self._labels[action] = settings.REMAP_PROMPT
        return True

    def cancel(self) -> None:
        if not self.awaiting_key:
            return
        self._restore_label(self.selected_action)
        self.selected_action = None
        self.awaiting_key = False

    def consume_key(self, event) -> Optional[str]:
        """Bind the awaiting action to this key; returns the bound key name."""
        if not self.awaiting_key or self.selected_action is None:
            return None
        key_name = normalize_key_name(_raw_key(event))
        action = self.selected_action
        self.keybinds[action] = key_name
        self._restore_label(action)
        self.selected_action = None
        self.awaiting_key = False
        logging.info("Remapped %s to %s", action.value, key_name)
        return key_name

    def _restore_label(self, action: ActionId) -> None:
        self._labels[action] = self.keybinds[action]
