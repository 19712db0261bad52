"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:           Funciones utilitarias para el manejo del Rol Único
                       Tributario (RUT) chileno. Incluye cálculo de dígito
                       verificador (Módulo 11), limpieza, formateo para
                       mostrar y validación completa. Ninguna función lanza
                       excepciones: una entrada inválida retorna False o el
                       texto sin alterar.
--------------------------------------------------------------------------------
"""

# Importa expresiones regulares.
import re
# Importa dataclass para el tipo valor Rut.
from dataclasses import dataclass

# Largo mínimo del RUT limpio (cuerpo + DV) para considerarlo evaluable.
LARGO_MINIMO = 8

# Caracteres que se aceptan al formatear mientras el usuario escribe.
_NO_RUT = re.compile(r"[^0-9kK]")
# Posiciones donde va un punto de miles dentro del cuerpo.
_MILES = re.compile(r"\B(?=(\d{3})+(?!\d))")


def normalizar_rut(rut: str) -> str:
    """Quita puntos y guiones. No cambia mayúsculas ni valida."""
    return rut.replace(".", "").replace("-", "")


def limpiar_rut(rut: str) -> str:
    """Deja el RUT listo para guardar o buscar (mismo resultado que normalizar_rut)."""
    return normalizar_rut(rut)


def calcular_dv(cuerpo: str) -> str:
    """
    Calcula el dígito verificador usando el algoritmo Módulo 11.
    Un carácter que no es dígito aporta cero, pero igual consume su factor.
    """
    suma, factor = 0, 2
    # Recorre los dígitos del cuerpo de derecha a izquierda multiplicando por la serie 2-7.
    for c in reversed(cuerpo):
        if "0" <= c <= "9":
            suma += int(c) * factor
        factor = 2 if factor == 7 else factor + 1

    # Calcula el resto.
    resto = 11 - (suma % 11)

    # Convierte casos especiales.
    if resto == 11: return "0"
    if resto == 10: return "K"
    return str(resto)


def es_rut_valido(rut: str) -> bool:
    """Valida largo y consistencia matemática del RUT. Nunca lanza error."""
    rut = normalizar_rut(rut)

    # Muy corto para tener cuerpo y dígito verificador.
    if len(rut) < LARGO_MINIMO:
        return False

    cuerpo, dv = rut[:-1], rut[-1].upper()
    # Verifica que el DV calculado coincida con el DV entregado.
    return calcular_dv(cuerpo) == dv


def formatear_rut(rut: str) -> str:
    """
    Formatea como '12.345.678-5' mientras se escribe.
    Se puede aplicar sobre un texto ya formateado sin dañarlo.
    """
    # Elimina todo excepto números y K.
    rut = _NO_RUT.sub("", rut)

    if len(rut) <= 1:
        return rut

    # Separa cuerpo y dígito verificador.
    cuerpo, dv = rut[:-1], rut[-1]
    # Inserta los puntos de miles.
    return f"{_MILES.sub('.', cuerpo)}-{dv}"


@dataclass(frozen=True)
class Rut:
    """RUT ya validado. El DV siempre se guarda en mayúscula."""

    cuerpo: str
    dv: str

    @classmethod
    def desde_texto(cls, texto: str) -> "Rut | None":
        """Retorna un Rut si el texto es válido, o None."""
        if not es_rut_valido(texto):
            return None
        limpio = normalizar_rut(texto)
        return cls(cuerpo=limpio[:-1], dv=limpio[-1].upper())

    @property
    def limpio(self) -> str:
        # Forma de almacenamiento: '123456785'.
        return f"{self.cuerpo}{self.dv}"

    def __str__(self) -> str:
        return formatear_rut(self.limpio)
