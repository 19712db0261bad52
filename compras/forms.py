"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:   Formularios de solicitud de compra: gas subsidiado (Lipigas y
               Abastible) y entradas de entretenimiento. Solo validan; el
               guardado y la subida de comprobantes los hace otra capa. La
               fecha de referencia y las compras previas del mes llegan por
               el constructor.
--------------------------------------------------------------------------------
"""

import logging

from django import forms
from django.utils import timezone

from core.validators import RutField
from compras.cupos import (
    CargasEmpresa,
    Empresa,
    TipoCarga,
    descripcion_temporada,
    opciones_por_carga,
    temporada_para,
    validar_limites,
)
from compras.cupo_mensual import (
    LIMITES_MENSUALES,
    CompraGas,
    TipoCompra,
    compras_del_mes,
    evaluar_cupo,
    monto_total,
    total_cargas,
    validar_cantidad_solicitada,
)

logger = logging.getLogger(__name__)

SI_NO = [("no", "No"), ("si", "Sí")]


def nombre_campo(empresa: str, tipo_carga: int) -> str:
    """Nombre del selector de una carga, ej. 'lipigas45'."""
    return f"{empresa}{int(tipo_carga)}"


class _BootstrapMixin:
    def _estilizar(self):
        for field in self.fields.values():
            # Conserva las clases existentes y agrega 'form-control'.
            existing_class = field.widget.attrs.get("class", "")
            field.widget.attrs["class"] = f"{existing_class} form-control".strip()


# ================== COMPRA DE GAS ==================
class CompraGasForm(_BootstrapMixin, forms.Form):
    rut = RutField(limpio=True)
    compra_lipigas = forms.ChoiceField(label="¿Compra Lipigas?", choices=SI_NO, initial="no")
    compra_abastible = forms.ChoiceField(label="¿Compra Abastible?", choices=SI_NO, initial="no")

    def __init__(self, *args, hoy=None, compras_mes=(), **kwargs):
        super().__init__(*args, **kwargs)
        # La fecha se fija una vez por formulario.
        self.hoy = hoy or timezone.localdate()
        self.temporada = temporada_para(self.hoy)
        self.compras_mes = compras_del_mes(compras_mes, self.hoy)
        self.estado_cupo = evaluar_cupo(TipoCompra.GAS, total_cargas(self.compras_mes), self.hoy)

        # Un selector por empresa y cilindro, con las opciones de la temporada.
        for empresa in Empresa:
            for tipo in TipoCarga:
                opciones = opciones_por_carga(self.temporada, tipo)
                self.fields[nombre_campo(empresa, tipo)] = forms.IntegerField(
                    label=f"{empresa.label} {tipo.label}",
                    min_value=0,
                    initial=0,
                    required=False,
                    widget=forms.Select(
                        choices=[(n, str(n)) for n in opciones],
                        attrs={"class": "gas-select"},
                    ),
                )

        self._estilizar()

    @property
    def info_temporada(self) -> str:
        return descripcion_temporada(self.temporada)

    def _cargas(self, empresa: str) -> CargasEmpresa | None:
        if self.cleaned_data.get(f"compra_{empresa}") != "si":
            # Empresa no elegida: sus selectores cuentan como 0.
            return None
        valores = {
            f"kg{int(tipo)}": self.cleaned_data.get(nombre_campo(empresa, tipo)) or 0
            for tipo in TipoCarga
        }
        return CargasEmpresa(**valores)

    def clean(self):
        cleaned = super().clean()
        lipigas = self._cargas(Empresa.LIPIGAS)
        abastible = self._cargas(Empresa.ABASTIBLE)

        if lipigas is None and abastible is None:
            raise forms.ValidationError(
                "Debe seleccionar al menos una empresa (Lipigas o Abastible).",
                code="sin_empresa",
            )

        errores = validar_limites(lipigas, abastible, self.temporada)
        if errores:
            logger.warning("[COMPRA GAS] Límites excedidos rut=%s: %s", cleaned.get("rut"), errores)
            raise forms.ValidationError(
                [forms.ValidationError(e, code="limite") for e in errores]
            )

        solicitud = CompraGas(fecha=self.hoy, lipigas=lipigas, abastible=abastible)
        self.estado_cupo = validar_cantidad_solicitada(
            TipoCompra.GAS, self.estado_cupo.total_usado, solicitud.total_cargas, self.hoy
        )
        if self.estado_cupo.excede_cupo:
            logger.warning(
                "[COMPRA GAS] Cupo mensual excedido rut=%s usado=%s solicitado=%s limite=%s",
                cleaned.get("rut"),
                self.estado_cupo.total_usado,
                self.estado_cupo.solicitado,
                self.estado_cupo.limite,
            )
            raise forms.ValidationError(self.estado_cupo.mensaje, code="cupo_mensual")

        cleaned["solicitud"] = solicitud
        return cleaned

    def solicitud(self) -> CompraGas:
        """Compra lista para guardar. Solo tiene sentido si is_valid() fue True."""
        return self.cleaned_data["solicitud"]


# ================== COMPRA DE ENTRETENIMIENTO ==================
class CompraEntretenimientoForm(_BootstrapMixin, forms.Form):
    rut = RutField(limpio=True)
    cantidad = forms.TypedChoiceField(label="Cantidad", coerce=int)
    fecha_compra = forms.DateField(
        label="Fecha de compra",
        widget=forms.DateInput(attrs={"type": "date"}),
    )

    def __init__(self, *args, tipo_compra, hoy=None, usadas=0, **kwargs):
        super().__init__(*args, **kwargs)
        if tipo_compra not in LIMITES_MENSUALES:
            raise ValueError(f"Tipo de compra sin cupo mensual: {tipo_compra}")
        self.tipo_compra = tipo_compra
        self.hoy = hoy or timezone.localdate()
        self.estado_cupo = evaluar_cupo(tipo_compra, usadas, self.hoy)

        # Solo se ofrece lo que queda del cupo del mes.
        maximo = max(0, min(self.estado_cupo.disponible, LIMITES_MENSUALES[tipo_compra]))
        self.fields["cantidad"].choices = [("0", "Seleccione cantidad")] + [
            (str(i), str(i)) for i in range(1, maximo + 1)
        ]
        self.fields["fecha_compra"].initial = self.hoy
        self.fields["fecha_compra"].widget.attrs["max"] = self.hoy.isoformat()
        self._estilizar()

    def clean_fecha_compra(self):
        fecha = self.cleaned_data["fecha_compra"]
        if fecha > self.hoy:
            raise forms.ValidationError("La fecha de compra no puede ser futura.")
        return fecha

    def clean(self):
        cleaned = super().clean()
        if not self.estado_cupo.puede_comprar:
            logger.info("[COMPRA %s] Sin cupo rut=%s", self.tipo_compra, cleaned.get("rut"))
            raise forms.ValidationError(self.estado_cupo.mensaje, code="sin_cupo")

        cantidad = cleaned.get("cantidad")
        if cantidad == 0:
            self.add_error("cantidad", "Seleccione una cantidad.")
        elif cantidad:
            self.estado_cupo = validar_cantidad_solicitada(
                self.tipo_compra, self.estado_cupo.total_usado, cantidad, self.hoy
            )
            if self.estado_cupo.excede_cupo:
                self.add_error("cantidad", self.estado_cupo.mensaje)
        return cleaned

    def monto_total(self) -> int:
        return monto_total(self.tipo_compra, self.cleaned_data.get("cantidad") or 0)
