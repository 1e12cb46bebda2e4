"""Keyboard keys, controller buttons and input states."""

from __future__ import annotations

import enum


class KeyboardKey(enum.IntEnum):
    BACKSPACE = 0
    TAB = enum.auto()
    RETURN = enum.auto()
    SHIFT = enum.auto()
    LEFT_SHIFT = enum.auto()
    RIGHT_SHIFT = enum.auto()
    CTRL = enum.auto()
    LEFT_CTRL = enum.auto()
    RIGHT_CTRL = enum.auto()
    ALT = enum.auto()
    LEFT_ALT = enum.auto()
    RIGHT_ALT = enum.auto()
    PAUSE = enum.auto()
    CAPSLOCK = enum.auto()
    ESCAPE = enum.auto()
    PAGE_UP = enum.auto()
    PAGE_DOWN = enum.auto()
    HOME = enum.auto()
    END = enum.auto()

    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()

    SPACE_BAR = enum.auto()

    PRINT_SCREEN = enum.auto()
    INSERT = enum.auto()
    DELETE = enum.auto()

    KEY_0 = enum.auto()
    KEY_1 = enum.auto()
    KEY_2 = enum.auto()
    KEY_3 = enum.auto()
    KEY_4 = enum.auto()
    KEY_5 = enum.auto()
    KEY_6 = enum.auto()
    KEY_7 = enum.auto()
    KEY_8 = enum.auto()
    KEY_9 = enum.auto()

    A = enum.auto()
    B = enum.auto()
    C = enum.auto()
    D = enum.auto()
    E = enum.auto()
    F = enum.auto()
    G = enum.auto()
    H = enum.auto()
    I = enum.auto()  # noqa: E741
    J = enum.auto()
    K = enum.auto()
    L = enum.auto()
    M = enum.auto()
    N = enum.auto()
    O = enum.auto()  # noqa: E741
    P = enum.auto()
    Q = enum.auto()
    R = enum.auto()
    S = enum.auto()
    T = enum.auto()
    U = enum.auto()
    V = enum.auto()
    W = enum.auto()
    X = enum.auto()
    Y = enum.auto()
    Z = enum.auto()

    NUM_PAD_0 = enum.auto()
    NUM_PAD_1 = enum.auto()
    NUM_PAD_2 = enum.auto()
    NUM_PAD_3 = enum.auto()
    NUM_PAD_4 = enum.auto()
    NUM_PAD_5 = enum.auto()
    NUM_PAD_6 = enum.auto()
    NUM_PAD_7 = enum.auto()
    NUM_PAD_8 = enum.auto()
    NUM_PAD_9 = enum.auto()

    MULTIPLY = enum.auto()
    ADD = enum.auto()
    SUBTRACT = enum.auto()
    DECIMAL = enum.auto()
    DIVIDE = enum.auto()

    F1 = enum.auto()
    F2 = enum.auto()
    F3 = enum.auto()
    F4 = enum.auto()
    F5 = enum.auto()
    F6 = enum.auto()
    F7 = enum.auto()
    F8 = enum.auto()
    F9 = enum.auto()
    F10 = enum.auto()
    F11 = enum.auto()
    F12 = enum.auto()

    NUMLOCK = enum.auto()
    SCROLLOCK = enum.auto()


class ControllerButton(enum.IntEnum):
    DPAD_UP = 0
    DPAD_DOWN = enum.auto()
    DPAD_LEFT = enum.auto()
    DPAD_RIGHT = enum.auto()

    START = enum.auto()
    BACK = enum.auto()

    LEFT_THUMB = enum.auto()
    RIGHT_THUMB = enum.auto()
    LEFT_SHOULDER = enum.auto()
    RIGHT_SHOULDER = enum.auto()

    A = enum.auto()
    B = enum.auto()
    X = enum.auto()
    Y = enum.auto()


class InputState(enum.IntEnum):
    DOWN_THIS_FRAME = 0
    UP_THIS_FRAME = enum.auto()
    PRESSED = enum.auto()


def _normalise(name: str) -> str:
    return name.replace("_", "").replace(" ", "").lower()


_KEYS_BY_NAME = {_normalise(key.name): key for key in KeyboardKey}


def parse_key(name: str) -> KeyboardKey:
    """Look up a keyboard key by name, ignoring case and underscores.

    Both ``"LeftShift"`` and ``"left_shift"`` give ``KeyboardKey.LEFT_SHIFT``.
    """
    try:
        return _KEYS_BY_NAME[_normalise(name)]
    except KeyError:
        raise ValueError(f"unknown keyboard key: {name!r}") from None