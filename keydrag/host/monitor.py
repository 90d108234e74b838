"""
keydrag.host.monitor - Deteccion del area disponible del monitor.

Usa win32api/win32con de pywin32 para obtener el area de trabajo
(work area) del monitor que contiene una ventana, descontando la
taskbar y otras barras del sistema. La estrategia "centered" centra
la ventana dentro de esa area.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import win32api
import win32con

from keydrag.host.rect import Rect

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Monitor:
    """
    Representa un monitor fisico conectado al sistema.

    Atributos:
        name:       Nombre del dispositivo (ej. r'\\\\.\\DISPLAY1').
        full_rect:  Area total del monitor (resolucion completa).
        work_rect:  Area de trabajo (descontando taskbar y barras).
        is_primary: True si es el monitor principal.
    """

    name: str
    full_rect: Rect
    work_rect: Rect
    is_primary: bool = False


def _monitor_from_handle(hmonitor: object) -> Monitor:
    # info['Monitor'] = (left, top, right, bottom) - area total
    # info['Work']    = (left, top, right, bottom) - area de trabajo
    # info['Device']  = nombre del dispositivo
    # info['Flags']   = 1 si es primario
    info = win32api.GetMonitorInfo(hmonitor)
    return Monitor(
        name=info["Device"],
        full_rect=Rect.from_ltrb(*info["Monitor"]),
        work_rect=Rect.from_ltrb(*info["Work"]),
        is_primary=bool(info["Flags"] & win32con.MONITORINFOF_PRIMARY),
    )


def get_monitors() -> list[Monitor]:
    """
    Enumera todos los monitores conectados al sistema.

    Returns:
        Lista de Monitor ordenada: el primario primero, luego por nombre.
    """
    monitors: list[Monitor] = []

    for hmonitor, _hdc, _rect in win32api.EnumDisplayMonitors(None, None):
        try:
            monitors.append(_monitor_from_handle(hmonitor))
        except win32api.error:
            log.warning("No se pudo obtener info del monitor %s", hmonitor)

    monitors.sort(key=lambda m: (not m.is_primary, m.name))
    log.debug("Monitores detectados: %d", len(monitors))
    return monitors


def monitor_for_window(hwnd: int) -> Monitor:
    """Monitor que contiene la mayor parte de la ventana (o el mas cercano)."""
    hmonitor = win32api.MonitorFromWindow(hwnd, win32con.MONITOR_DEFAULTTONEAREST)
    return _monitor_from_handle(hmonitor)


def work_area_for_window(hwnd: int) -> Rect:
    """Area de trabajo del monitor de la ventana."""
    monitor = monitor_for_window(hwnd)
    log.debug("Work area for %#010x: %s (%s)", hwnd, monitor.work_rect, monitor.name)
    return monitor.work_rect
