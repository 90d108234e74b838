"""
keydrag.config - User settings and default keybindings.
"""
