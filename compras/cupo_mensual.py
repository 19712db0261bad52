"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:   Cálculo del cupo mensual de compras (gas y entretenimiento).
               Recibe las compras previas del afiliado ya leídas desde el
               almacén de documentos y la fecha de referencia; determina
               cuánto ha usado, cuánto le queda y si una nueva solicitud
               cabe en su cupo. También contiene la tabla de precios de
               las entradas de entretenimiento.
--------------------------------------------------------------------------------
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Dict, Iterable, List, Optional, Tuple

from django.db import models

from compras.cupos import CargasEmpresa, Temporada, max_cargas_total, temporada_para


class TipoCompra(models.TextChoices):
    GAS = "gas", "Gas"
    CINE = "cine", "Cine"
    JUMPER = "jumper", "Jumper Trampoline Park"
    GIMNASIO = "gimnasio", "Gimnasio"


# Límites mensuales de entretenimiento. El de gas depende de la temporada.
LIMITES_MENSUALES: Dict[str, int] = {
    TipoCompra.CINE: 4,
    TipoCompra.JUMPER: 6,
    TipoCompra.GIMNASIO: 4,
}

# Precio unitario en pesos chilenos (entrada + combo, o ticket mensual).
PRECIOS: Dict[str, int] = {
    TipoCompra.CINE: 7000,
    TipoCompra.JUMPER: 6500,
    TipoCompra.GIMNASIO: 18000,
}


@dataclass(frozen=True)
class CompraGas:
    """Una compra de gas (previa o solicitada). None = empresa no elegida."""

    fecha: date
    lipigas: Optional[CargasEmpresa] = None
    abastible: Optional[CargasEmpresa] = None
    estado: str = "Procesada"

    @property
    def total_cargas(self) -> int:
        return sum(c.total for c in (self.lipigas, self.abastible) if c is not None)


@dataclass(frozen=True)
class EstadoCupo:
    tipo_compra: str
    total_usado: int
    limite: int
    temporada: Optional[Temporada] = None
    solicitado: int = 0

    @property
    def disponible(self) -> int:
        return self.limite - self.total_usado

    @property
    def puede_comprar(self) -> bool:
        # Con una solicitud evaluada, decide si lo pedido cabe en el cupo.
        if self.solicitado:
            return not self.excede_cupo
        return self.disponible > 0

    @property
    def excede_cupo(self) -> bool:
        return self.solicitado > self.disponible

    @property
    def total_final(self) -> int:
        return self.total_usado + self.solicitado

    @property
    def unidad(self) -> str:
        return "cargas" if self.tipo_compra == TipoCompra.GAS else "entradas"

    @property
    def mensaje(self) -> str:
        if self.solicitado:
            if self.excede_cupo:
                return (
                    f"La compra excede su cupo disponible. Tiene {self.disponible} "
                    f"{self.unidad} disponibles, pero intenta comprar {self.solicitado}"
                )
            return (
                f"Compra válida. Usará {self.solicitado} de sus "
                f"{self.disponible} {self.unidad} disponibles"
            )
        if self.puede_comprar:
            return f"Tiene {self.disponible} {self.unidad} disponibles este mes"
        return f"Ha alcanzado el límite mensual de {self.limite} {self.unidad}"


def rango_mes(fecha: date) -> Tuple[datetime, datetime]:
    """Primer día 00:00:00 y último día 23:59:59 del mes de la fecha."""
    ultimo_dia = calendar.monthrange(fecha.year, fecha.month)[1]
    inicio = datetime.combine(fecha.replace(day=1), time.min)
    fin = datetime.combine(fecha.replace(day=ultimo_dia), time(23, 59, 59))
    return inicio, fin


def compras_del_mes(compras: Iterable[CompraGas], fecha: date) -> List[CompraGas]:
    """Filtra las compras que caen en el mes de la fecha de referencia."""
    inicio, fin = rango_mes(fecha)
    return [c for c in compras if inicio.date() <= c.fecha <= fin.date()]


def total_cargas(compras: Iterable[CompraGas]) -> int:
    return sum(c.total_cargas for c in compras)


def limite_mensual(tipo_compra: str, fecha: date) -> int:
    if tipo_compra == TipoCompra.GAS:
        return max_cargas_total(temporada_para(fecha))
    return LIMITES_MENSUALES[tipo_compra]


def evaluar_cupo(tipo_compra: str, usadas: int, fecha: date) -> EstadoCupo:
    """Estado del cupo del mes sin considerar una solicitud nueva."""
    return validar_cantidad_solicitada(tipo_compra, usadas, 0, fecha)


def validar_cantidad_solicitada(
    tipo_compra: str, usadas: int, solicitadas: int, fecha: date
) -> EstadoCupo:
    """La solicitud cabe si lo pedido no supera lo disponible del mes."""
    temporada = temporada_para(fecha) if tipo_compra == TipoCompra.GAS else None
    return EstadoCupo(
        tipo_compra=tipo_compra,
        total_usado=usadas,
        limite=limite_mensual(tipo_compra, fecha),
        temporada=temporada,
        solicitado=solicitadas,
    )


def monto_total(tipo_compra: str, cantidad: int) -> int:
    # El gas se paga directo a la distribuidora.
    return PRECIOS.get(tipo_compra, 0) * cantidad


def detalle_compras(compras: Iterable[CompraGas]) -> List[Dict[str, str]]:
    """Resumen legible de cada compra, ej. '2 x 5kg Lipigas, 1 x 45kg Abastible'."""
    detalle = []
    for compra in compras:
        descripcion = []
        for nombre, cargas in (("Lipigas", compra.lipigas), ("Abastible", compra.abastible)):
            if cargas is None:
                continue
            for tipo, cantidad in cargas.por_tipo().items():
                if cantidad > 0:
                    descripcion.append(f"{cantidad} x {int(tipo)}kg {nombre}")
        detalle.append({
            "fecha": compra.fecha.strftime("%d-%m-%Y"),
            "descripcion": ", ".join(descripcion),
            "estado": compra.estado or "Procesada",
        })
    return detalle
