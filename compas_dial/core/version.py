"""Compas - version constants.

Keep this module tiny and dependency-free. It is imported by many places
(core, render, UI) and must not have side effects.
"""

APP_NAME = "CompasDial"
APP_SHORT = "CPS"

APP_VERSION = "0.1.4"

# Tamaño por defecto (px) cuando el host no propone tamaño.
DEFAULT_SIZE_PX = 200

# Marcas del dial: 24 pasos de 15 grados.
TICK_COUNT = 24
TICK_STEP_DEG = 15.0
TICK_LENGTH_PX = 10.0

# Punta de flecha norte (mitad del ancho, px).
ARROW_HALF_WIDTH_PX = 5.0

# Texto de referencia para la métrica de alto de texto.
# NOTE: se mide una sola vez por renderer; no cambiar sin revisar offsets.
TEXT_HEIGHT_REFERENCE = "yY"
