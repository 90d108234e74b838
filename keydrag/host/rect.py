"""
keydrag.host.rect - Estructura geometrica Rect.

Rectangulo inmutable que representa un area de pantalla. Se usa para
describir la geometria de una ventana y el area de trabajo del monitor
cuando una estrategia de colocacion calcula una posicion destino.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Rectangulo inmutable definido por posicion (x, y) y dimensiones (w, h).

    Todas las coordenadas estan en pixeles. El origen (0, 0) es la esquina
    superior-izquierda del monitor primario.
    """

    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    def centered_in(self, area: Rect) -> tuple[int, int]:
        """
        Posicion (x, y) que centra este rectangulo dentro de *area*.

        Si el rectangulo es mas grande que el area, el resultado puede
        quedar fuera por arriba/izquierda; no se recorta.
        """
        return (
            area.x + (area.w - self.w) // 2,
            area.y + (area.h - self.h) // 2,
        )

    # ------------------------------------------------------------------
    # Conversion a tupla Win32 (left, top, right, bottom)
    # ------------------------------------------------------------------
    def to_ltrb(self) -> tuple[int, int, int, int]:
        """Retorna (left, top, right, bottom) para compatibilidad Win32."""
        return (self.x, self.y, self.right, self.bottom)

    @classmethod
    def from_ltrb(cls, left: int, top: int, right: int, bottom: int) -> Rect:
        """Crea un Rect desde coordenadas (left, top, right, bottom)."""
        return cls(left, top, right - left, bottom - top)

    def __str__(self) -> str:
        return f"Rect({self.w}x{self.h}+{self.x}+{self.y})"
