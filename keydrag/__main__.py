"""
keydrag - Entry point.

Run with:  python -m keydrag [--config keydrag.toml] [--verbose]
"""

from __future__ import annotations

import logging
import sys

import click

from keydrag.config.settings import KeydragSettings, load_settings
from keydrag.core.errors import SettingError
from keydrag.extension import Keydrag


class SafeStreamHandler(logging.StreamHandler):
    """Handler that replaces unencodable characters instead of crashing."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            enc = getattr(self.stream, "encoding", "utf-8") or "utf-8"
            safe = msg.encode(enc, errors="replace").decode(enc, errors="replace")
            self.stream.write(safe + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for keydrag."""
    fmt = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    handler = SafeStreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    # Only when nothing else configured logging
    if not root.handlers:
        root.addHandler(handler)


@click.command()
@click.option(
    "-c", "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="TOML file with a [keydrag] table.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log every move and hook dispatch.")
def main(config_path: str | None, verbose: bool) -> None:
    """Move and center the foreground window from the numeric keypad."""
    setup_logging(verbose)

    settings = KeydragSettings()
    if config_path is not None:
        try:
            settings = load_settings(config_path)
        except SettingError as exc:
            raise click.BadParameter(str(exc), param_hint="--config") from exc

    from keydrag.host.monitor import get_monitors
    from keydrag.host.win32host import Win32Host

    host = Win32Host()
    kd = Keydrag(host, settings)
    bound = kd.install_keypad_bindings()

    print("\n" + settings.dump_state())
    print("\n" + host.window_keymap.dump_state() + "\n")
    print("=" * 60)
    print("  keydrag running. Press Ctrl+C to stop.")
    print(f"  Monitors: {len(get_monitors())}")
    print(f"  Commands: {kd.catalog.count}")
    print(f"  Bindings: {bound}")
    print("")
    print("  Keybindings:")
    print(f"    {settings.prefix} + KP_1..9         Move window (KP_5 centers)")
    print(f"    {settings.slow_prefix} + KP_1..9       Move window one pixel")
    print("=" * 60 + "\n")

    host.run()


if __name__ == "__main__":
    main()
