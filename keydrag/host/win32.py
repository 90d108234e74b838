"""
keydrag.host.win32 - The user32 calls the Win32 host makes, via ctypes.

Window geometry, the thread message queue and RegisterHotKey. Nothing
else in keydrag touches ctypes. Importing this module only works on
Windows.
"""

from __future__ import annotations

import ctypes
import ctypes.wintypes

from keydrag.host.rect import Rect

user32 = ctypes.windll.user32
kernel32 = ctypes.windll.kernel32

WM_QUIT = 0x0012
WM_HOTKEY = 0x0312

# SetWindowPos: keep size, z-order and focus
_SWP_MOVE_ONLY = 0x0001 | 0x0004 | 0x0010

# RegisterHotKey modifier flags
MOD_ALT = 0x0001
MOD_CONTROL = 0x0002
MOD_SHIFT = 0x0004
MOD_WIN = 0x0008
MOD_NOREPEAT = 0x4000


# ============================================================================
# Windows
# ============================================================================

def window_rect(hwnd: int) -> Rect | None:
    """Outer rectangle of *hwnd* in screen coordinates, None if it is gone."""
    if not user32.IsWindow(hwnd):
        return None
    r = ctypes.wintypes.RECT()
    if not user32.GetWindowRect(hwnd, ctypes.byref(r)):
        return None
    return Rect.from_ltrb(r.left, r.top, r.right, r.bottom)


def foreground_window() -> int:
    """HWND with keyboard focus, 0 when there is none."""
    return user32.GetForegroundWindow()


def move_window(hwnd: int, x: int, y: int) -> bool:
    """Put the top-left corner of *hwnd* at (x, y)."""
    return bool(user32.SetWindowPos(hwnd, 0, x, y, 0, 0, _SWP_MOVE_ONLY))


# ============================================================================
# Message queue
# ============================================================================

def wait_message() -> ctypes.wintypes.MSG | None:
    """Block for the next message of this thread; None once WM_QUIT arrives."""
    msg = ctypes.wintypes.MSG()
    if user32.GetMessageW(ctypes.byref(msg), 0, 0, 0) <= 0:
        return None
    return msg


def forward_message(msg: ctypes.wintypes.MSG) -> None:
    user32.TranslateMessage(ctypes.byref(msg))
    user32.DispatchMessageW(ctypes.byref(msg))


def current_thread_id() -> int:
    return kernel32.GetCurrentThreadId()


def quit_loop(thread_id: int | None) -> None:
    """Make the message loop running on *thread_id* (or this thread) exit."""
    if thread_id is None:
        user32.PostQuitMessage(0)
    else:
        user32.PostThreadMessageW(thread_id, WM_QUIT, 0, 0)


# ============================================================================
# Hotkeys
# ============================================================================

def register_hotkey(hotkey_id: int, modifiers: int, vk: int) -> bool:
    """System-wide hotkey delivered as WM_HOTKEY to this thread's queue."""
    return bool(user32.RegisterHotKey(None, hotkey_id, modifiers, vk))


def unregister_hotkey(hotkey_id: int) -> bool:
    return bool(user32.UnregisterHotKey(None, hotkey_id))
