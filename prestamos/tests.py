"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:   Pruebas de los límites de préstamos por tipo y del formulario
               de solicitud de préstamo.
--------------------------------------------------------------------------------
"""
from django.test import SimpleTestCase

from prestamos.forms import SolicitudPrestamoForm
from prestamos.limites import (
    LIMITES_PRESTAMOS,
    TipoPrestamo,
    error_cuotas,
    error_monto,
    formatear_pesos,
    limites_para,
    placeholder_monto,
)

RUT_OK = "12.345.678-5"


# ==========================================
# 1. PRUEBAS UNITARIAS (Límites por tipo)
# ==========================================
class LimitesPrestamoTest(SimpleTestCase):
    def test_tabla_de_limites(self):
        """CP-PRE-001: Montos y cuotas máximas de cada tipo de préstamo."""
        self.assertEqual(limites_para(TipoPrestamo.MEDICO).monto_maximo, 500000)
        self.assertEqual(limites_para(TipoPrestamo.MEDICO).cuotas_maximas, 12)
        self.assertEqual(limites_para(TipoPrestamo.EMERGENCIA).monto_maximo, 500000)
        self.assertIsNone(limites_para(TipoPrestamo.EMERGENCIA).cuotas_maximas)
        self.assertEqual(limites_para(TipoPrestamo.LIBRE_DISPOSICION).monto_maximo, 300000)
        self.assertEqual(limites_para(TipoPrestamo.LIBRE_DISPOSICION).cuotas_maximas, 6)
        self.assertIsNone(limites_para(TipoPrestamo.FONDO_SOLIDARIO).monto_maximo)
        self.assertIsNone(limites_para(TipoPrestamo.FONDO_SOLIDARIO).cuotas_maximas)
        self.assertEqual(set(LIMITES_PRESTAMOS), set(TipoPrestamo))

    def test_monto_en_el_limite_es_valido(self):
        """CP-PRE-002: El tope es inclusivo; solo se rechaza lo que lo supera."""
        casos = [
            (TipoPrestamo.MEDICO, 500000),
            (TipoPrestamo.EMERGENCIA, 500000),
            (TipoPrestamo.LIBRE_DISPOSICION, 300000),
        ]
        for tipo, maximo in casos:
            with self.subTest(tipo=tipo):
                self.assertIsNone(error_monto(tipo, maximo))
                self.assertEqual(
                    error_monto(tipo, maximo + 1),
                    f"El monto excede el límite máximo de {formatear_pesos(maximo)}",
                )

    def test_fondo_solidario_sin_tope(self):
        """CP-PRE-003: El fondo solidario no tiene monto ni cuotas máximas."""
        self.assertIsNone(error_monto(TipoPrestamo.FONDO_SOLIDARIO, 5000000))
        self.assertIsNone(error_cuotas(TipoPrestamo.FONDO_SOLIDARIO, 48))

    def test_monto_no_positivo(self):
        for tipo in TipoPrestamo:
            with self.subTest(tipo=tipo):
                self.assertEqual(error_monto(tipo, 0), "El monto solicitado debe ser mayor a 0")
                self.assertEqual(error_monto(tipo, -1), "El monto solicitado debe ser mayor a 0")

    def test_cuotas_maximas(self):
        """CP-PRE-004: Médico hasta 12 cuotas, libre disposición hasta 6."""
        self.assertIsNone(error_cuotas(TipoPrestamo.MEDICO, 12))
        self.assertEqual(
            error_cuotas(TipoPrestamo.MEDICO, 13), "Máximo 12 cuotas para Préstamos Médicos"
        )
        self.assertIsNone(error_cuotas(TipoPrestamo.LIBRE_DISPOSICION, 6))
        self.assertEqual(
            error_cuotas(TipoPrestamo.LIBRE_DISPOSICION, 7),
            "Máximo 6 cuotas para Préstamos de Libre Disposición",
        )
        # Emergencia tiene tope de monto pero no de cuotas.
        self.assertIsNone(error_cuotas(TipoPrestamo.EMERGENCIA, 36))
        self.assertEqual(error_cuotas(TipoPrestamo.MEDICO, 0), "El número de cuotas debe ser mayor a 0")

    def test_tipo_desconocido_sin_limites(self):
        self.assertIsNone(error_monto("otro", 10000000))
        self.assertIsNone(error_cuotas("otro", 99))

    def test_formato_y_placeholder(self):
        self.assertEqual(formatear_pesos(500000), "$500.000")
        self.assertEqual(formatear_pesos(1500), "$1.500")
        self.assertEqual(formatear_pesos(0), "$0")
        self.assertEqual(placeholder_monto(TipoPrestamo.LIBRE_DISPOSICION), "Máximo $300.000")
        self.assertEqual(placeholder_monto(TipoPrestamo.FONDO_SOLIDARIO), "Monto según necesidad")


# ==========================================
# 2. PRUEBAS DE FORMULARIO (Solicitud de préstamo)
# ==========================================
class SolicitudPrestamoFormTest(SimpleTestCase):
    def datos(self, **extra):
        base = {
            "rut": RUT_OK,
            "nombre": "María Pérez",
            "email": "maria@example.com",
            "telefono": "+56912345678",
            "tipo_solicitud": TipoPrestamo.MEDICO,
            "monto_solicitado": "250000",
            "cuotas": "6",
            "descripcion": "Tratamiento dental",
        }
        base.update(extra)
        return base

    def test_solicitud_valida(self):
        form = SolicitudPrestamoForm(data=self.datos())
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data["rut"], "123456785")
        self.assertEqual(form.cleaned_data["monto_solicitado"], 250000)
        self.assertEqual(
            form.documentos_adicionales,
            "Informes médicos, cotizaciones de medicamentos o tratamientos",
        )

    def test_medico_excede_monto(self):
        """CP-PRE-005: Préstamo médico sobre $500.000 se rechaza."""
        form = SolicitudPrestamoForm(data=self.datos(monto_solicitado="500001"))
        self.assertFalse(form.is_valid())
        self.assertIn(
            "El monto excede el límite máximo de $500.000", form.errors["monto_solicitado"]
        )

    def test_medico_excede_cuotas(self):
        form = SolicitudPrestamoForm(data=self.datos(cuotas="13"))
        self.assertFalse(form.is_valid())
        self.assertIn("Máximo 12 cuotas para Préstamos Médicos", form.errors["cuotas"])

    def test_emergencia_sin_tope_de_cuotas(self):
        """CP-PRE-006: Emergencia limita el monto, no las cuotas."""
        form = SolicitudPrestamoForm(
            data=self.datos(tipo_solicitud=TipoPrestamo.EMERGENCIA, monto_solicitado="500000", cuotas="24")
        )
        self.assertTrue(form.is_valid(), form.errors)

        form = SolicitudPrestamoForm(
            data=self.datos(tipo_solicitud=TipoPrestamo.EMERGENCIA, monto_solicitado="600000")
        )
        self.assertFalse(form.is_valid())
        self.assertIn("monto_solicitado", form.errors)

    def test_libre_disposicion_limites(self):
        """CP-PRE-007: Libre disposición hasta $300.000 y 6 cuotas."""
        form = SolicitudPrestamoForm(
            data=self.datos(
                tipo_solicitud=TipoPrestamo.LIBRE_DISPOSICION, monto_solicitado="300001", cuotas="7"
            )
        )
        self.assertFalse(form.is_valid())
        self.assertIn(
            "El monto excede el límite máximo de $300.000", form.errors["monto_solicitado"]
        )
        self.assertIn(
            "Máximo 6 cuotas para Préstamos de Libre Disposición", form.errors["cuotas"]
        )

    def test_fondo_solidario_sin_limites(self):
        """CP-PRE-008: Fondo solidario acepta cualquier monto positivo y cuotas."""
        form = SolicitudPrestamoForm(
            data=self.datos(
                tipo_solicitud=TipoPrestamo.FONDO_SOLIDARIO, monto_solicitado="3000000", cuotas="48"
            )
        )
        self.assertTrue(form.is_valid(), form.errors)

    def test_monto_cero(self):
        form = SolicitudPrestamoForm(
            data=self.datos(tipo_solicitud=TipoPrestamo.FONDO_SOLIDARIO, monto_solicitado="0")
        )
        self.assertFalse(form.is_valid())
        self.assertIn("El monto solicitado debe ser mayor a 0", form.errors["monto_solicitado"])

    def test_cuotas_opcionales(self):
        form = SolicitudPrestamoForm(data=self.datos(cuotas=""))
        self.assertTrue(form.is_valid(), form.errors)
        self.assertIsNone(form.cleaned_data["cuotas"])

    def test_tipo_invalido_no_evalua_monto(self):
        form = SolicitudPrestamoForm(data=self.datos(tipo_solicitud="otro", monto_solicitado="9000000"))
        self.assertFalse(form.is_valid())
        self.assertIn("tipo_solicitud", form.errors)
        self.assertNotIn("monto_solicitado", form.errors)

    def test_rut_invalido(self):
        form = SolicitudPrestamoForm(data=self.datos(rut="12.345.678-0"))
        self.assertFalse(form.is_valid())
        self.assertIn("RUT inválido.", form.errors["rut"])

    def test_placeholder_segun_tipo(self):
        form = SolicitudPrestamoForm(initial={"tipo_solicitud": TipoPrestamo.LIBRE_DISPOSICION})
        attrs = form.fields["monto_solicitado"].widget.attrs
        self.assertEqual(attrs["placeholder"], "Máximo $300.000")
        self.assertEqual(attrs["max"], 300000)
        self.assertIn("form-control", attrs["class"])
