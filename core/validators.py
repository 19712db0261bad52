"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:           Contiene validadores personalizados para formularios de
                       Django. Traduce el resultado de core.rut (que nunca
                       lanza errores) en ValidationError con mensajes para el
                       usuario, y define un campo de formulario para RUT.
--------------------------------------------------------------------------------
"""

# Importa la excepción estándar de validación de Django.
from django import forms
from django.core.exceptions import ValidationError

from core.rut import es_rut_valido, formatear_rut, limpiar_rut


def validar_rut(value: str):
    """
    Valida integralmente un RUT (largo y dígito verificador).
    Lanza ValidationError si no es válido.
    """
    if not value:
        raise ValidationError("El RUT es obligatorio.", code="required")

    # Compara el DV calculado con el ingresado.
    if not es_rut_valido(value.strip()):
        raise ValidationError("RUT inválido.", code="invalid_rut")

    # Si todo ok, termina la función sin errores (válido).


class RutField(forms.CharField):
    """
    Campo de texto para RUT. Formatea lo escrito ('12.345.678-5') y
    valida el dígito verificador. Con limpio=True entrega '123456785'.
    """

    default_validators = [validar_rut]

    def __init__(self, *args, limpio: bool = False, **kwargs):
        self.limpio = limpio
        kwargs.setdefault("label", "RUT")
        super().__init__(*args, **kwargs)
        self.widget.attrs.setdefault("placeholder", "12.345.678-9")

    def to_python(self, value):
        value = super().to_python(value)
        if value in self.empty_values:
            return value
        # Formatea igual que el campo en pantalla.
        return formatear_rut(value)

    def clean(self, value):
        value = super().clean(value)
        if self.limpio and value:
            # El DV se guarda siempre en mayúscula.
            return limpiar_rut(value).upper()
        return value
