"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:   Pruebas de la política de cupos de gas por temporada, del cupo
               mensual (gas y entretenimiento), de los formularios de compra
               y del comando cupos_gas.
--------------------------------------------------------------------------------
"""
from datetime import date, datetime
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase

from compras.cupos import (
    CargasEmpresa,
    Temporada,
    TipoCarga,
    ajustar_total,
    max_cargas_por_empresa,
    max_cargas_por_tipo,
    max_cargas_total,
    opciones_disponibles,
    opciones_por_carga,
    temporada_para,
    validar_limites,
)
from compras.cupo_mensual import (
    CompraGas,
    TipoCompra,
    compras_del_mes,
    detalle_compras,
    evaluar_cupo,
    limite_mensual,
    monto_total,
    rango_mes,
    total_cargas,
    validar_cantidad_solicitada,
)
from compras.forms import CompraEntretenimientoForm, CompraGasForm

RUT_OK = "12.345.678-5"
JULIO = date(2026, 7, 10)
ENERO = date(2026, 1, 20)


# ==========================================
# 1. PRUEBAS UNITARIAS (Temporada y límites)
# ==========================================
class TemporadaTest(SimpleTestCase):
    def test_julio_es_temporada_alta(self):
        """CP-GAS-001: Julio es temporada alta y enero temporada normal."""
        self.assertEqual(temporada_para(date(2026, 7, 1)), Temporada.ALTA)
        self.assertEqual(temporada_para(date(2026, 1, 1)), Temporada.NORMAL)

    def test_bordes_de_temporada(self):
        self.assertEqual(temporada_para(date(2026, 5, 31)), Temporada.NORMAL)
        self.assertEqual(temporada_para(date(2026, 6, 1)), Temporada.ALTA)
        self.assertEqual(temporada_para(date(2026, 9, 30)), Temporada.ALTA)
        self.assertEqual(temporada_para(date(2026, 10, 1)), Temporada.NORMAL)

    def test_acepta_datetime(self):
        self.assertEqual(temporada_para(datetime(2026, 8, 15, 23, 59)), Temporada.ALTA)

    def test_maximos_por_temporada(self):
        self.assertEqual(max_cargas_por_empresa(Temporada.ALTA), 3)
        self.assertEqual(max_cargas_por_empresa(Temporada.NORMAL), 2)
        self.assertEqual(max_cargas_total(Temporada.ALTA), 6)
        self.assertEqual(max_cargas_total(Temporada.NORMAL), 4)

    def test_limite_45kg(self):
        """CP-GAS-002: El cilindro de 45kg no pasa de 2 en temporada alta."""
        self.assertEqual(max_cargas_por_tipo(Temporada.ALTA, TipoCarga.KG45), 2)
        self.assertEqual(max_cargas_por_tipo(Temporada.ALTA, TipoCarga.KG11), 3)
        self.assertEqual(max_cargas_por_tipo(Temporada.NORMAL, TipoCarga.KG45), 2)
        self.assertEqual(max_cargas_por_tipo(Temporada.NORMAL, TipoCarga.KG5), 2)


class OpcionesTest(SimpleTestCase):
    def test_opciones_disponibles(self):
        """CP-GAS-003: Opciones del selector, partiendo en 0 (sin selección)."""
        self.assertEqual(opciones_disponibles(Temporada.ALTA), [0, 1, 2, 3])
        self.assertEqual(opciones_disponibles(Temporada.NORMAL), [0, 1, 2])

    def test_opciones_se_generan_de_nuevo(self):
        opciones = opciones_disponibles(Temporada.ALTA)
        opciones.append(99)
        self.assertEqual(opciones_disponibles(Temporada.ALTA), [0, 1, 2, 3])

    def test_opciones_por_carga(self):
        self.assertEqual(opciones_por_carga(Temporada.ALTA, TipoCarga.KG45), [0, 1, 2])
        self.assertEqual(opciones_por_carga(Temporada.ALTA, TipoCarga.KG15), [0, 1, 2, 3])
        self.assertEqual(opciones_por_carga(Temporada.NORMAL, TipoCarga.KG15), [0, 1, 2])


class AjusteTotalTest(SimpleTestCase):
    def test_exceso_resetea_la_ultima(self):
        """CP-GAS-004: [3,3,2] en alta suma 8, se deja en 0 la última."""
        resultado = ajustar_total([3, 3, 2], Temporada.ALTA)
        self.assertEqual(resultado.selecciones, [3, 3, 0])
        self.assertEqual(resultado.total, 6)
        self.assertIs(resultado.excedido, True)

    def test_dentro_del_limite(self):
        """CP-GAS-005: [1,2] en temporada normal queda igual."""
        resultado = ajustar_total([1, 2], Temporada.NORMAL)
        self.assertEqual(resultado.selecciones, [1, 2])
        self.assertEqual(resultado.total, 3)
        self.assertIs(resultado.excedido, False)

    def test_justo_en_el_limite(self):
        resultado = ajustar_total([2, 2], Temporada.NORMAL)
        self.assertEqual(resultado.total, 4)
        self.assertIs(resultado.excedido, False)

    def test_una_sola_pasada(self):
        """CP-GAS-006: Si la última no cubre el exceso, el total sigue alto."""
        resultado = ajustar_total([2, 2, 2, 1], Temporada.NORMAL)
        self.assertEqual(resultado.selecciones, [2, 2, 2, 0])
        self.assertEqual(resultado.total, 6)
        self.assertIs(resultado.excedido, True)

    def test_ceros_al_final_no_cuentan_como_seleccion(self):
        resultado = ajustar_total([3, 3, 1, 0], Temporada.ALTA)
        self.assertEqual(resultado.selecciones, [3, 3, 0, 0])
        self.assertEqual(resultado.total, 6)

    def test_no_modifica_la_entrada(self):
        selecciones = [3, 3, 2]
        ajustar_total(selecciones, Temporada.ALTA)
        self.assertEqual(selecciones, [3, 3, 2])

    def test_lista_vacia(self):
        resultado = ajustar_total([], Temporada.NORMAL)
        self.assertEqual(resultado.selecciones, [])
        self.assertEqual(resultado.total, 0)


class ValidarLimitesTest(SimpleTestCase):
    def test_solicitud_valida(self):
        errores = validar_limites(CargasEmpresa(kg5=2, kg11=1), CargasEmpresa(kg45=2), Temporada.ALTA)
        self.assertEqual(errores, [])

    def test_exceso_por_tipo(self):
        errores = validar_limites(CargasEmpresa(kg45=3), None, Temporada.ALTA)
        self.assertEqual(errores, ["Lipigas 45kg: máximo 2"])

    def test_exceso_total(self):
        errores = validar_limites(
            CargasEmpresa(kg5=3, kg11=3), CargasEmpresa(kg15=1), Temporada.ALTA
        )
        self.assertEqual(errores, ["Total global: máximo 6 cargas (tiene 7)"])

    def test_reporta_todos_los_errores(self):
        errores = validar_limites(None, CargasEmpresa(kg5=3, kg11=3), Temporada.NORMAL)
        self.assertEqual(errores, [
            "Abastible 5kg: máximo 2",
            "Abastible 11kg: máximo 2",
            "Total global: máximo 4 cargas (tiene 6)",
        ])


# ==========================================
# 2. PRUEBAS UNITARIAS (Cupo mensual)
# ==========================================
class CupoMensualTest(SimpleTestCase):
    def setUp(self):
        self.compras = [
            CompraGas(fecha=date(2026, 1, 5), lipigas=CargasEmpresa(kg5=2)),
            CompraGas(fecha=date(2026, 1, 31), abastible=CargasEmpresa(kg11=1, kg45=1)),
            CompraGas(fecha=date(2025, 12, 31), lipigas=CargasEmpresa(kg15=2)),
        ]

    def test_rango_mes(self):
        inicio, fin = rango_mes(date(2024, 2, 10))
        self.assertEqual(inicio, datetime(2024, 2, 1, 0, 0, 0))
        self.assertEqual(fin, datetime(2024, 2, 29, 23, 59, 59))

    def test_compras_del_mes(self):
        del_mes = compras_del_mes(self.compras, ENERO)
        self.assertEqual(len(del_mes), 2)
        self.assertEqual(total_cargas(del_mes), 4)

    def test_limites_mensuales(self):
        self.assertEqual(limite_mensual(TipoCompra.GAS, JULIO), 6)
        self.assertEqual(limite_mensual(TipoCompra.GAS, ENERO), 4)
        self.assertEqual(limite_mensual(TipoCompra.CINE, JULIO), 4)
        self.assertEqual(limite_mensual(TipoCompra.JUMPER, ENERO), 6)
        self.assertEqual(limite_mensual(TipoCompra.GIMNASIO, ENERO), 4)

    def test_cupo_disponible(self):
        """CP-CUP-001: Con 4 cargas usadas en julio quedan 2."""
        estado = evaluar_cupo(TipoCompra.GAS, 4, JULIO)
        self.assertEqual(estado.disponible, 2)
        self.assertIs(estado.puede_comprar, True)
        self.assertEqual(estado.temporada, Temporada.ALTA)
        self.assertEqual(estado.mensaje, "Tiene 2 cargas disponibles este mes")

    def test_cupo_agotado(self):
        """CP-CUP-002: Con 4 cargas usadas en enero no queda cupo."""
        estado = evaluar_cupo(TipoCompra.GAS, 4, ENERO)
        self.assertEqual(estado.disponible, 0)
        self.assertIs(estado.puede_comprar, False)
        self.assertEqual(estado.mensaje, "Ha alcanzado el límite mensual de 4 cargas")

    def test_solicitud_excede_cupo(self):
        estado = validar_cantidad_solicitada(TipoCompra.CINE, 1, 4, ENERO)
        self.assertIs(estado.excede_cupo, True)
        self.assertEqual(estado.total_final, 5)
        self.assertIsNone(estado.temporada)
        self.assertEqual(
            estado.mensaje,
            "La compra excede su cupo disponible. Tiene 3 entradas disponibles, pero intenta comprar 4",
        )

    def test_solicitud_que_excede_no_puede_comprar(self):
        """CP-CUP-003: Con una solicitud evaluada, puede_comprar depende de lo pedido."""
        self.assertIs(validar_cantidad_solicitada(TipoCompra.CINE, 1, 4, ENERO).puede_comprar, False)
        self.assertIs(validar_cantidad_solicitada(TipoCompra.CINE, 1, 3, ENERO).puede_comprar, True)
        self.assertIs(validar_cantidad_solicitada(TipoCompra.GAS, 2, 3, ENERO).puede_comprar, False)

    def test_solicitud_dentro_del_cupo(self):
        estado = validar_cantidad_solicitada(TipoCompra.GAS, 1, 3, ENERO)
        self.assertIs(estado.excede_cupo, False)
        self.assertEqual(estado.mensaje, "Compra válida. Usará 3 de sus 3 cargas disponibles")

    def test_monto_total(self):
        self.assertEqual(monto_total(TipoCompra.CINE, 2), 14000)
        self.assertEqual(monto_total(TipoCompra.JUMPER, 2), 13000)
        self.assertEqual(monto_total(TipoCompra.GIMNASIO, 1), 18000)
        self.assertEqual(monto_total(TipoCompra.GAS, 3), 0)

    def test_detalle_compras(self):
        compra = CompraGas(
            fecha=date(2026, 7, 3),
            lipigas=CargasEmpresa(kg5=2),
            abastible=CargasEmpresa(kg45=1),
        )
        self.assertEqual(detalle_compras([compra]), [{
            "fecha": "03-07-2026",
            "descripcion": "2 x 5kg Lipigas, 1 x 45kg Abastible",
            "estado": "Procesada",
        }])


# ==========================================
# 3. PRUEBAS DE FORMULARIOS
# ==========================================
class CompraGasFormTest(SimpleTestCase):
    def datos(self, **extra):
        base = {"rut": RUT_OK, "compra_lipigas": "no", "compra_abastible": "no"}
        base.update(extra)
        return base

    def test_compra_valida(self):
        """CP-FORM-001: Solicitud dentro de los límites de temporada alta."""
        form = CompraGasForm(
            data=self.datos(compra_lipigas="si", lipigas5="2", lipigas11="1"),
            hoy=JULIO,
        )
        self.assertTrue(form.is_valid(), form.errors)
        solicitud = form.solicitud()
        self.assertEqual(solicitud.lipigas, CargasEmpresa(kg5=2, kg11=1))
        self.assertIsNone(solicitud.abastible)
        self.assertEqual(solicitud.total_cargas, 3)
        self.assertEqual(form.cleaned_data["rut"], "123456785")

    def test_sin_empresa(self):
        form = CompraGasForm(data=self.datos(), hoy=JULIO)
        self.assertFalse(form.is_valid())
        self.assertIn(
            "Debe seleccionar al menos una empresa (Lipigas o Abastible).",
            form.non_field_errors(),
        )

    def test_empresa_no_elegida_no_suma(self):
        form = CompraGasForm(
            data=self.datos(compra_lipigas="si", lipigas5="1", abastible5="3", abastible11="3"),
            hoy=ENERO,
        )
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.solicitud().total_cargas, 1)

    def test_exceso_45kg(self):
        form = CompraGasForm(data=self.datos(compra_lipigas="si", lipigas45="3"), hoy=JULIO)
        with self.assertLogs("compras.forms", level="WARNING"):
            self.assertFalse(form.is_valid())
        self.assertIn("Lipigas 45kg: máximo 2", form.non_field_errors())

    def test_exceso_total_temporada_normal(self):
        form = CompraGasForm(
            data=self.datos(
                compra_lipigas="si", lipigas5="2", lipigas11="2",
                compra_abastible="si", abastible5="1",
            ),
            hoy=ENERO,
        )
        self.assertFalse(form.is_valid())
        self.assertIn("Total global: máximo 4 cargas (tiene 5)", form.non_field_errors())

    def test_cupo_mensual_excedido(self):
        """CP-FORM-002: Las compras previas del mes descuentan cupo."""
        compras_mes = [
            CompraGas(fecha=date(2026, 1, 5), lipigas=CargasEmpresa(kg5=2)),
            CompraGas(fecha=date(2025, 12, 30), lipigas=CargasEmpresa(kg5=2)),
        ]
        form = CompraGasForm(
            data=self.datos(compra_lipigas="si", lipigas5="2", lipigas11="1"),
            hoy=ENERO,
            compras_mes=compras_mes,
        )
        self.assertEqual(form.estado_cupo.total_usado, 2)
        self.assertFalse(form.is_valid())
        self.assertIn(
            "La compra excede su cupo disponible. Tiene 2 cargas disponibles, pero intenta comprar 3",
            form.non_field_errors(),
        )

    def test_rut_invalido(self):
        form = CompraGasForm(
            data=self.datos(rut="12.345.678-0", compra_lipigas="si", lipigas5="1"),
            hoy=JULIO,
        )
        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors["rut"], ["RUT inválido."])

    def test_opciones_segun_temporada(self):
        form = CompraGasForm(hoy=JULIO)
        self.assertEqual([v for v, _ in form.fields["lipigas5"].widget.choices], [0, 1, 2, 3])
        self.assertEqual([v for v, _ in form.fields["abastible45"].widget.choices], [0, 1, 2])
        self.assertIn("Temporada Alta", form.info_temporada)

        form = CompraGasForm(hoy=ENERO)
        self.assertEqual([v for v, _ in form.fields["lipigas5"].widget.choices], [0, 1, 2])
        self.assertIn("Temporada Normal", form.info_temporada)


class CompraEntretenimientoFormTest(SimpleTestCase):
    HOY = date(2026, 3, 10)

    def datos(self, **extra):
        base = {"rut": RUT_OK, "cantidad": "2", "fecha_compra": "2026-03-09"}
        base.update(extra)
        return base

    def test_compra_valida(self):
        form = CompraEntretenimientoForm(
            data=self.datos(), tipo_compra=TipoCompra.CINE, hoy=self.HOY, usadas=1
        )
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data["cantidad"], 2)
        self.assertEqual(form.monto_total(), 14000)

    def test_opciones_limitadas_por_cupo(self):
        form = CompraEntretenimientoForm(tipo_compra=TipoCompra.CINE, hoy=self.HOY, usadas=1)
        self.assertEqual([v for v, _ in form.fields["cantidad"].choices], ["0", "1", "2", "3"])

    def test_sin_cupo(self):
        form = CompraEntretenimientoForm(
            data=self.datos(cantidad="1"), tipo_compra=TipoCompra.GIMNASIO, hoy=self.HOY, usadas=4
        )
        self.assertFalse(form.is_valid())
        self.assertIn("Ha alcanzado el límite mensual de 4 entradas", form.non_field_errors())

    def test_fecha_futura(self):
        form = CompraEntretenimientoForm(
            data=self.datos(fecha_compra="2026-03-11"), tipo_compra=TipoCompra.JUMPER, hoy=self.HOY
        )
        self.assertFalse(form.is_valid())
        self.assertIn("La fecha de compra no puede ser futura.", form.errors["fecha_compra"])

    def test_cantidad_cero(self):
        form = CompraEntretenimientoForm(
            data=self.datos(cantidad="0"), tipo_compra=TipoCompra.JUMPER, hoy=self.HOY
        )
        self.assertFalse(form.is_valid())
        self.assertIn("Seleccione una cantidad.", form.errors["cantidad"])

    def test_tipo_sin_cupo_mensual(self):
        with self.assertRaises(ValueError):
            CompraEntretenimientoForm(tipo_compra=TipoCompra.GAS, hoy=self.HOY)


# ==========================================
# 4. PRUEBAS DEL COMANDO cupos_gas
# ==========================================
class ComandoCuposGasTest(SimpleTestCase):
    def test_temporada_alta(self):
        out = StringIO()
        call_command("cupos_gas", "--fecha", "2026-07-01", stdout=out)
        salida = out.getvalue()
        self.assertIn("2026-07-01: Temporada Alta", salida)
        self.assertIn("Máximo por empresa: 3", salida)
        self.assertIn("Total mensual (ambas marcas): 6", salida)
        self.assertIn(" - 45kg: 0, 1, 2", salida)

    def test_temporada_normal(self):
        out = StringIO()
        call_command("cupos_gas", "--fecha", "2026-01-15", stdout=out)
        self.assertIn("Total mensual (ambas marcas): 4", out.getvalue())

    def test_fecha_invalida(self):
        with self.assertRaises(CommandError):
            call_command("cupos_gas", "--fecha", "15/01/2026", stdout=StringIO())
