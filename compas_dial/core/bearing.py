# File: compas_dial/core/bearing.py
# Project: CompasDial (CPS)
# Version: 0.1.1
# Status: stable
# Date: 2026-10-19
# Purpose: Estado del rumbo (bearing) + efectos de cada cambio (redraw / notificación).
# Notes: No depende de Qt. El widget traduce los efectos a update()/señales.
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional

from compas_dial.utils.errors import CompasValidationError

log = logging.getLogger(__name__)


def bearing_text(value: float) -> str:
    """Texto accesible del rumbo: decimal plano, sin unidad ni redondeo."""
    return str(float(value))


@dataclass(frozen=True)
class BearingChange:
    """Efectos de un set_bearing().

    - redraw: siempre True (el dial depende del rumbo).
    - notification: texto para accesibilidad, o None si el dial no está visible.
    """

    bearing: float
    redraw: bool
    notification: Optional[str] = None


BearingObserver = Callable[[BearingChange], None]


class BearingModel:
    """Rumbo en grados (0 = norte, horario). Sin rango: -45, 400 o 1e6 son válidos."""

    def __init__(self, bearing: float = 0.0) -> None:
        self._bearing = _as_bearing(bearing)
        self._observers: list[BearingObserver] = []

    @property
    def bearing(self) -> float:
        return self._bearing

    def subscribe(self, observer: BearingObserver) -> Callable[[], None]:
        """Registra un observer. Devuelve una función para desregistrarlo."""
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    def set_bearing(self, value: float, *, visible: bool) -> BearingChange:
        """Guarda el rumbo y devuelve los efectos resultantes.

        Raises:
            CompasValidationError: si el valor no es finito (NaN/inf). El rumbo previo se conserva.
        """
        self._bearing = _as_bearing(value)
        change = BearingChange(
            bearing=self._bearing,
            redraw=True,
            notification=bearing_text(self._bearing) if visible else None,
        )
        for obs in list(self._observers):
            obs(change)
        return change

    def accessibility_text(self, *, visible: bool) -> Optional[str]:
        return bearing_text(self._bearing) if visible else None


def _as_bearing(value: float) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise CompasValidationError(f"Rumbo inválido: {value!r}") from e
    if not math.isfinite(v):
        log.warning("Rumbo no finito rechazado: %r", value)
        raise CompasValidationError(f"Rumbo no finito: {value!r}")
    return v
