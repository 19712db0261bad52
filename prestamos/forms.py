"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:   Formulario de solicitud de préstamo. Valida datos de contacto,
               RUT, y que el monto y las cuotas no superen el límite del tipo
               de solicitud. La subida de documentos y el guardado los hace
               otra capa.
--------------------------------------------------------------------------------
"""

import logging

from django import forms

from core.validators import RutField
from prestamos.limites import (
    DOCUMENTOS_ADICIONALES,
    TipoPrestamo,
    error_cuotas,
    error_monto,
    limites_para,
    placeholder_monto,
)
from usuarios.forms import NAME_VALIDATOR, TELEFONO_VALIDATOR

logger = logging.getLogger(__name__)


# ================== SOLICITUD DE PRÉSTAMO ==================
class SolicitudPrestamoForm(forms.Form):
    rut = RutField(limpio=True)
    nombre = forms.CharField(label="Nombre completo", max_length=150, validators=[NAME_VALIDATOR])
    email = forms.EmailField(label="Correo electrónico")
    telefono = forms.CharField(label="Teléfono", max_length=13, validators=[TELEFONO_VALIDATOR])
    # Va antes del monto: clean_monto_solicitado necesita el tipo ya limpio.
    tipo_solicitud = forms.ChoiceField(label="Tipo de solicitud", choices=TipoPrestamo.choices)
    monto_solicitado = forms.IntegerField(label="Monto solicitado")
    cuotas = forms.IntegerField(label="Número de cuotas", required=False)
    descripcion = forms.CharField(
        label="Descripción de la solicitud",
        required=False,
        widget=forms.Textarea(attrs={"rows": 4}),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Estética bootstrap
        for field in self.fields.values():
            field.widget.attrs.setdefault("class", "form-control")

        # Si ya viene el tipo, el campo monto muestra su tope.
        tipo = self.data.get("tipo_solicitud") or self.initial.get("tipo_solicitud")
        if tipo:
            limites = limites_para(tipo)
            monto_attrs = self.fields["monto_solicitado"].widget.attrs
            monto_attrs["placeholder"] = placeholder_monto(tipo)
            if limites.monto_maximo:
                monto_attrs["max"] = limites.monto_maximo

    def clean_monto_solicitado(self):
        monto = self.cleaned_data["monto_solicitado"]
        tipo = self.cleaned_data.get("tipo_solicitud", "")
        error = error_monto(tipo, monto)
        if error:
            logger.info("[PRESTAMO] Monto rechazado tipo=%s monto=%s", tipo, monto)
            raise forms.ValidationError(error, code="monto")
        return monto

    def clean_cuotas(self):
        cuotas = self.cleaned_data.get("cuotas")
        if cuotas is None:
            return cuotas
        error = error_cuotas(self.cleaned_data.get("tipo_solicitud", ""), cuotas)
        if error:
            raise forms.ValidationError(error, code="cuotas")
        return cuotas

    @property
    def documentos_adicionales(self):
        """Respaldo que se debe adjuntar para el tipo elegido (o None)."""
        return DOCUMENTOS_ADICIONALES.get(self.cleaned_data.get("tipo_solicitud"))
