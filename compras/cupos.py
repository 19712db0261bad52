"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:   Política de cupos por temporada para la compra subsidiada de
               gas. Define la temporada (alta de junio a septiembre), el
               máximo de cargas por empresa y por tipo de cilindro, el total
               combinado Lipigas + Abastible y el ajuste del total cuando la
               selección del afiliado lo supera. La fecha siempre se recibe
               como parámetro, nunca se lee el reloj aquí.
--------------------------------------------------------------------------------
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Sequence

from django.db import models


class Temporada(models.TextChoices):
    ALTA = "alta", "Temporada Alta"
    NORMAL = "normal", "Temporada Normal"


class Empresa(models.TextChoices):
    LIPIGAS = "lipigas", "Lipigas"
    ABASTIBLE = "abastible", "Abastible"


class TipoCarga(models.IntegerChoices):
    KG5 = 5, "5kg"
    KG11 = 11, "11kg"
    KG15 = 15, "15kg"
    KG45 = 45, "45kg"


# Meses (1-12) de temporada alta: junio a septiembre.
MESES_TEMPORADA_ALTA = frozenset({6, 7, 8, 9})

# Máximo de cargas que se pueden elegir por empresa (y por cilindro).
MAX_POR_EMPRESA: Dict[str, int] = {
    Temporada.ALTA: 3,
    Temporada.NORMAL: 2,
}

# Máximo mensual sumando ambas marcas.
MAX_TOTAL: Dict[str, int] = {
    Temporada.ALTA: 6,
    Temporada.NORMAL: 4,
}

# Los cilindros de 45kg no suben su límite en temporada alta.
MAX_45KG = 2


@dataclass(frozen=True)
class CargasEmpresa:
    """Cantidad de cargas pedidas a una empresa, por tipo de cilindro."""

    kg5: int = 0
    kg11: int = 0
    kg15: int = 0
    kg45: int = 0

    def por_tipo(self) -> Dict[int, int]:
        return {
            TipoCarga.KG5: self.kg5,
            TipoCarga.KG11: self.kg11,
            TipoCarga.KG15: self.kg15,
            TipoCarga.KG45: self.kg45,
        }

    @property
    def total(self) -> int:
        return self.kg5 + self.kg11 + self.kg15 + self.kg45


@dataclass(frozen=True)
class ResultadoAjuste:
    """Resultado de ajustar_total. 'excedido' indica que hubo que corregir."""

    selecciones: List[int] = field(default_factory=list)
    total: int = 0
    excedido: bool = False


def temporada_para(fecha: date) -> Temporada:
    """Temporada alta si el mes de la fecha está entre junio y septiembre."""
    return Temporada.ALTA if fecha.month in MESES_TEMPORADA_ALTA else Temporada.NORMAL


def max_cargas_por_empresa(temporada: Temporada) -> int:
    return MAX_POR_EMPRESA[temporada]


def max_cargas_total(temporada: Temporada) -> int:
    return MAX_TOTAL[temporada]


def max_cargas_por_tipo(temporada: Temporada, tipo_carga: int) -> int:
    """Límite de un cilindro puntual. 45kg queda en 2 aun en temporada alta."""
    maximo = max_cargas_por_empresa(temporada)
    if tipo_carga == TipoCarga.KG45:
        return min(maximo, MAX_45KG)
    return maximo


def opciones_disponibles(temporada: Temporada) -> List[int]:
    """Opciones del selector por empresa. El 0 significa 'sin selección'."""
    return list(range(max_cargas_por_empresa(temporada) + 1))


def opciones_por_carga(temporada: Temporada, tipo_carga: int) -> List[int]:
    return list(range(max_cargas_por_tipo(temporada, tipo_carga) + 1))


def ajustar_total(selecciones: Sequence[int], temporada: Temporada) -> ResultadoAjuste:
    """
    Suma las selecciones y, si superan el total de la temporada, deja en 0
    la última selección (la última cantidad mayor a 0) y vuelve a sumar.

    Es una sola pasada: si la última selección no alcanza a cubrir el
    exceso, el total devuelto sigue sobre el límite y excedido=True avisa
    al llamador, que vuelve a invocar en el siguiente cambio.
    """
    ajustadas = list(selecciones)
    total = sum(ajustadas)

    if total <= max_cargas_total(temporada):
        return ResultadoAjuste(selecciones=ajustadas, total=total, excedido=False)

    # Busca desde el final la última cantidad elegida.
    for i in range(len(ajustadas) - 1, -1, -1):
        if ajustadas[i] > 0:
            ajustadas[i] = 0
            break

    return ResultadoAjuste(selecciones=ajustadas, total=sum(ajustadas), excedido=True)


def validar_limites(
    lipigas: CargasEmpresa | None,
    abastible: CargasEmpresa | None,
    temporada: Temporada,
) -> List[str]:
    """
    Revisa todos los límites de una solicitud completa antes de enviarla.
    Retorna la lista de mensajes de error (vacía si la solicitud es válida).
    Una empresa en None no fue seleccionada.
    """
    errores: List[str] = []

    for empresa, cargas in ((Empresa.LIPIGAS, lipigas), (Empresa.ABASTIBLE, abastible)):
        if cargas is None:
            continue
        for tipo, cantidad in cargas.por_tipo().items():
            maximo = max_cargas_por_tipo(temporada, tipo)
            if cantidad > maximo:
                errores.append(f"{empresa.label} {TipoCarga(tipo).label}: máximo {maximo}")

    total = sum(c.total for c in (lipigas, abastible) if c is not None)
    limite = max_cargas_total(temporada)
    if total > limite:
        errores.append(f"Total global: máximo {limite} cargas (tiene {total})")

    return errores


def descripcion_temporada(temporada: Temporada) -> str:
    """Texto informativo que acompaña al formulario de gas."""
    if temporada == Temporada.ALTA:
        return (
            "Temporada Alta (Junio-Septiembre): Máximo 3 por carga (2 para 45kg). "
            "TOTAL MENSUAL ENTRE AMBAS MARCAS: 6 cargas"
        )
    return (
        "Temporada Normal (Octubre-Mayo): Máximo 2 por carga. "
        "TOTAL MENSUAL ENTRE AMBAS MARCAS: 4 cargas"
    )
