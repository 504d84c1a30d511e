# File: compas_dial/utils/errors.py
# Project: CompasDial (CPS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Errores tipados del proyecto.
# Notes: El renderer no lanza; estos errores viven en los bordes (input/config/export).
from __future__ import annotations


class CompasError(Exception):
    """Error base del proyecto."""


class CompasValidationError(CompasError):
    """Error de validación (input: rumbo, tamaño, argumentos)."""


class CompasIOError(CompasError):
    """Error de E/S (export SVG/PNG)."""


class CompasSchemaError(CompasValidationError):
    """Configuración de estilo inválida (claves/valores)."""
