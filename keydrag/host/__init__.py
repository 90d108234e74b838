"""
keydrag.host - Host window manager interface.

    - base : Host protocol and placement strategies (portable)
    - rect : Rect geometry (portable)
    - win32, hotkeys, monitor, win32host : Windows implementation
"""
