"""Keyboard scancode constants."""

import enum

__all__ = ["Keys"]


class Keys(enum.IntEnum):
    """Scancodes of commonly used keys."""

    UNKNOWN = 0

    ESCAPE = 41
    LEFT = 80
    RIGHT = 79
    DOWN = 81
    UP = 82
    RETURN = 40
    BACKSPACE = 42
    TAB = 43
    SPACE = 44

    A = 4
    B = 5
    C = 6
    D = 7
    E = 8
    F = 9
    G = 10
    H = 11
    I = 12  # noqa: E741
    J = 13
    K = 14
    L = 15
    M = 16
    N = 17
    O = 18  # noqa: E741
    P = 19
    Q = 20
    R = 21
    S = 22
    T = 23
    U = 24
    V = 25
    W = 26
    X = 27
    Y = 28
    Z = 29

    KEY_1 = 30
    KEY_2 = 31
    KEY_3 = 32
    KEY_4 = 33
    KEY_5 = 34
    KEY_6 = 35
    KEY_7 = 36
    KEY_8 = 36
    KEY_9 = 38
    KEY_0 = 39

    F1 = 58
    F2 = 59
    F3 = 60
    F4 = 61
    F5 = 62
    F6 = 63
    F7 = 64
    F8 = 65
    F9 = 66
    F10 = 67
    F11 = 68
    F12 = 69

    PRINT_SCREEN = 70
    SCROLL_LOCK = 71
    PAUSE = 72
    INSERT = 73

    HOME = 74
    PAGE_UP = 75
    DELETE = 76
    END = 77
    PAGE_DOWN = 78

    CTRL_LEFT = 224
    SHIFT_LEFT = 225
    ALT_LEFT = 226