"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:   Pruebas unitarias de las utilidades de RUT (Módulo 11, limpieza
               y formateo), del validador y campo de formulario, y del
               comando validar_rut.
--------------------------------------------------------------------------------
"""
import dataclasses
from io import StringIO

from django.core.exceptions import ValidationError
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase

from core.rut import (
    Rut,
    calcular_dv,
    es_rut_valido,
    formatear_rut,
    limpiar_rut,
    normalizar_rut,
)
from core.validators import RutField, validar_rut


# ==========================================
# 1. PRUEBAS UNITARIAS (Lógica pura)
# ==========================================
class ValidacionRutTest(SimpleTestCase):
    def test_rut_oficial_de_ejemplo(self):
        """CP-RUT-001: 12.345.678-5 es válido y con DV 0 no lo es."""
        self.assertIs(es_rut_valido("12345678-5"), True)
        self.assertIs(es_rut_valido("12.345.678-5"), True)
        self.assertIs(es_rut_valido("123456785"), True)
        self.assertIs(es_rut_valido("12345678-0"), False)

    def test_dv_calculado(self):
        """CP-RUT-002: Módulo 11 con la serie 2..7 de derecha a izquierda."""
        self.assertEqual(calcular_dv("12345678"), "5")
        self.assertEqual(calcular_dv("11111111"), "1")
        self.assertEqual(calcular_dv("1234567"), "4")

    def test_dv_cero_y_k(self):
        """CP-RUT-003: Resto 11 se escribe '0' y resto 10 se escribe 'K'."""
        self.assertEqual(calcular_dv("10000004"), "0")
        self.assertEqual(calcular_dv("10000030"), "K")
        self.assertIs(es_rut_valido("10.000.004-0"), True)
        self.assertIs(es_rut_valido("10.000.030-K"), True)
        # El DV ingresado en minúscula también se acepta.
        self.assertIs(es_rut_valido("10000030-k"), True)

    def test_separadores_en_cualquier_posicion(self):
        """CP-RUT-004: Los puntos y el guion no cambian el resultado."""
        for rut in ("12.345.678-5", "12345.678-5", "12.345678-5", "1.2.3.4.5.6.7.8-5", "12345678-5"):
            with self.subTest(rut=rut):
                self.assertIs(es_rut_valido(rut), True)

    def test_dv_incorrecto(self):
        """CP-RUT-005: Cualquier otro DV hace inválido al RUT."""
        for dv in "012346789K":
            with self.subTest(dv=dv):
                self.assertIs(es_rut_valido(f"12345678-{dv}"), False)

    def test_muy_corto(self):
        """CP-RUT-006: Menos de 8 caracteres limpios nunca es válido."""
        self.assertIs(es_rut_valido(""), False)
        self.assertIs(es_rut_valido("1"), False)
        self.assertIs(es_rut_valido("1.234.56-7"), False)

    def test_cuerpo_con_letras_aporta_cero(self):
        """CP-RUT-007: Un carácter no numérico en el cuerpo cuenta como 0."""
        self.assertEqual(calcular_dv("1234567a"), calcular_dv("12345670"))
        self.assertIs(es_rut_valido("1234567a-K"), True)

    def test_nunca_lanza_error(self):
        """CP-RUT-008: Entradas basura retornan False sin excepción."""
        for rut in ("--------", "........", "abcdefghij", "🙂🙂🙂🙂🙂🙂🙂🙂"):
            with self.subTest(rut=rut):
                self.assertIs(es_rut_valido(rut), False)


class LimpiezaRutTest(SimpleTestCase):
    def test_normalizar_quita_puntos_y_guion(self):
        self.assertEqual(normalizar_rut("12.345.678-k"), "12345678k")
        self.assertEqual(normalizar_rut(" 12.345 "), " 12345 ")

    def test_limpiar_es_igual_a_normalizar(self):
        for rut in ("12.345.678-5", "1-9", "", "abc"):
            with self.subTest(rut=rut):
                self.assertEqual(limpiar_rut(rut), normalizar_rut(rut))


class FormateoRutTest(SimpleTestCase):
    def test_formato_con_puntos_y_guion(self):
        """CP-RUT-009: Formato de despliegue '12.345.678-5'."""
        self.assertEqual(formatear_rut("123456785"), "12.345.678-5")
        self.assertEqual(formatear_rut("12345"), "1.234-5")
        self.assertEqual(formatear_rut("1234"), "123-4")
        self.assertEqual(formatear_rut("12"), "1-2")

    def test_entradas_cortas_quedan_igual(self):
        self.assertEqual(formatear_rut(""), "")
        self.assertEqual(formatear_rut("1"), "1")
        self.assertEqual(formatear_rut("k"), "k")

    def test_descarta_caracteres_ajenos(self):
        self.assertEqual(formatear_rut("12 345 678 / 5"), "12.345.678-5")
        # La K conserva la mayúscula o minúscula escrita.
        self.assertEqual(formatear_rut("10000030k"), "10.000.030-k")

    def test_formateo_idempotente(self):
        """CP-RUT-010: Reformatear mientras se escribe no corrompe el texto."""
        escrito = "123456785"
        for i in range(len(escrito) + 1):
            parcial = formatear_rut(escrito[:i])
            with self.subTest(parcial=parcial):
                self.assertEqual(formatear_rut(parcial), parcial)


class RutValorTest(SimpleTestCase):
    def test_desde_texto_valido(self):
        rut = Rut.desde_texto("12.345.678-5")
        self.assertEqual(rut, Rut(cuerpo="12345678", dv="5"))
        self.assertEqual(rut.limpio, "123456785")
        self.assertEqual(str(rut), "12.345.678-5")

    def test_dv_en_mayuscula(self):
        self.assertEqual(Rut.desde_texto("10000030-k").dv, "K")

    def test_desde_texto_invalido(self):
        self.assertIsNone(Rut.desde_texto("12345678-0"))
        self.assertIsNone(Rut.desde_texto(""))

    def test_inmutable(self):
        rut = Rut.desde_texto("12345678-5")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            rut.dv = "K"


# ==========================================
# 2. PRUEBAS DE FORMULARIO (Validador y campo)
# ==========================================
class ValidadorRutTest(SimpleTestCase):
    def test_validar_rut_ok(self):
        validar_rut("12.345.678-5")

    def test_validar_rut_invalido(self):
        with self.assertRaises(ValidationError) as ctx:
            validar_rut("12.345.678-0")
        self.assertEqual(ctx.exception.messages, ["RUT inválido."])

    def test_validar_rut_vacio(self):
        with self.assertRaises(ValidationError):
            validar_rut("")

    def test_campo_formatea(self):
        self.assertEqual(RutField().clean("123456785"), "12.345.678-5")
        self.assertEqual(RutField().clean(" 12345678-5 "), "12.345.678-5")

    def test_campo_limpio(self):
        self.assertEqual(RutField(limpio=True).clean("10.000.030-k"), "10000030K")

    def test_campo_rechaza_dv_incorrecto(self):
        with self.assertRaises(ValidationError) as ctx:
            RutField().clean("12.345.678-0")
        self.assertIn("RUT inválido.", ctx.exception.messages)

    def test_campo_opcional_vacio(self):
        self.assertEqual(RutField(required=False).clean(""), "")

    def test_campo_acepta_cuerpo_de_nueve_digitos(self):
        """CP-RUT-011: Un cuerpo de 9 dígitos formatea a 13 caracteres y es válido."""
        dv = calcular_dv("100000000")
        self.assertEqual(RutField(limpio=True).clean(f"100000000-{dv}"), f"100000000{dv}")
        self.assertEqual(RutField().clean(f"100000000{dv}"), f"100.000.000-{dv}")


# ==========================================
# 3. PRUEBAS DEL COMANDO validar_rut
# ==========================================
class ComandoValidarRutTest(SimpleTestCase):
    def test_rut_valido(self):
        out = StringIO()
        call_command("validar_rut", "123456785", stdout=out)
        self.assertIn("12.345.678-5: válido", out.getvalue())

    def test_rut_invalido_sugiere_dv(self):
        out = StringIO()
        with self.assertRaises(CommandError):
            call_command("validar_rut", "12345678-5", "12345678-0", stdout=out)
        salida = out.getvalue()
        self.assertIn("12.345.678-5: válido", salida)
        self.assertIn("12.345.678-0: inválido (DV esperado 5)", salida)
