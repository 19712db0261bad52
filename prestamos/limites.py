"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:   Límites de las solicitudes de préstamo por tipo: monto máximo
               y número máximo de cuotas. Un límite en None significa que el
               tipo no tiene tope (el fondo solidario se evalúa caso a caso).
--------------------------------------------------------------------------------
"""

from dataclasses import dataclass
from typing import Dict, Optional

from django.db import models


class TipoPrestamo(models.TextChoices):
    MEDICO = "prestamo-medico", "Préstamos Médicos"
    EMERGENCIA = "prestamo-emergencia", "Préstamos de Emergencia"
    LIBRE_DISPOSICION = "prestamo-libre-disposicion", "Préstamos de Libre Disposición"
    FONDO_SOLIDARIO = "fondo-solidario", "Fondo Solidario"


@dataclass(frozen=True)
class LimitePrestamo:
    monto_maximo: Optional[int] = None
    cuotas_maximas: Optional[int] = None


LIMITES_PRESTAMOS: Dict[str, LimitePrestamo] = {
    TipoPrestamo.MEDICO: LimitePrestamo(monto_maximo=500000, cuotas_maximas=12),
    TipoPrestamo.EMERGENCIA: LimitePrestamo(monto_maximo=500000),
    TipoPrestamo.LIBRE_DISPOSICION: LimitePrestamo(monto_maximo=300000, cuotas_maximas=6),
    TipoPrestamo.FONDO_SOLIDARIO: LimitePrestamo(),
}

# Respaldo que se pide adjuntar según el tipo (None = no se piden extras).
DOCUMENTOS_ADICIONALES: Dict[str, Optional[str]] = {
    TipoPrestamo.MEDICO: "Informes médicos, cotizaciones de medicamentos o tratamientos",
    TipoPrestamo.EMERGENCIA: "Documentos que respalden la emergencia (facturas, informes, etc.)",
    TipoPrestamo.LIBRE_DISPOSICION: None,
    TipoPrestamo.FONDO_SOLIDARIO: "Documentos que respalden la situación de emergencia familiar",
}


def formatear_pesos(monto: int) -> str:
    """Monto con separador de miles chileno, ej. '$500.000'."""
    return "$" + f"{monto:,}".replace(",", ".")


def limites_para(tipo: str) -> LimitePrestamo:
    # Un tipo desconocido no tiene límites.
    return LIMITES_PRESTAMOS.get(tipo, LimitePrestamo())


def error_monto(tipo: str, monto: int) -> Optional[str]:
    """Mensaje de error si el monto no es válido para el tipo, o None."""
    if monto <= 0:
        return "El monto solicitado debe ser mayor a 0"
    maximo = limites_para(tipo).monto_maximo
    if maximo and monto > maximo:
        return f"El monto excede el límite máximo de {formatear_pesos(maximo)}"
    return None


def error_cuotas(tipo: str, cuotas: int) -> Optional[str]:
    if cuotas <= 0:
        return "El número de cuotas debe ser mayor a 0"
    maximo = limites_para(tipo).cuotas_maximas
    if maximo and cuotas > maximo:
        return f"Máximo {maximo} cuotas para {TipoPrestamo(tipo).label}"
    return None


def placeholder_monto(tipo: str) -> str:
    """Texto de ayuda del campo monto al cambiar el tipo de solicitud."""
    maximo = limites_para(tipo).monto_maximo
    if maximo:
        return f"Máximo {formatear_pesos(maximo)}"
    return "Monto según necesidad"
