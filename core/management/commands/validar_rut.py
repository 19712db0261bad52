"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:   Comando de gestión para revisar uno o más RUT desde la consola.
               Muestra el RUT formateado y si su dígito verificador es correcto.
--------------------------------------------------------------------------------
"""
from django.core.management.base import BaseCommand, CommandError  # Clase base para crear comandos personalizados

from core.rut import calcular_dv, es_rut_valido, formatear_rut, limpiar_rut


class Command(BaseCommand):
    # Texto de ayuda que aparece al ejecutar python manage.py help validar_rut
    help = "Valida y formatea RUT chilenos. Ej: python manage.py validar_rut 12.345.678-5"

    def add_arguments(self, parser):
        parser.add_argument("ruts", nargs="+", help="RUT a revisar (con o sin puntos y guion)")

    def handle(self, *args, **options):
        invalidos = 0

        for rut in options["ruts"]:
            formateado = formatear_rut(rut)
            if es_rut_valido(rut):
                self.stdout.write(self.style.SUCCESS(f"{formateado}: válido"))
                continue

            invalidos += 1
            limpio = limpiar_rut(rut)
            # Si alcanza a tener cuerpo, sugiere el DV correcto.
            if len(limpio) > 1:
                self.stdout.write(self.style.ERROR(
                    f"{formateado}: inválido (DV esperado {calcular_dv(limpio[:-1])})"
                ))
            else:
                self.stdout.write(self.style.ERROR(f"{rut!r}: inválido"))

        if invalidos:
            # Termina con código de salida 1 para usarlo en scripts.
            raise CommandError(f"{invalidos} RUT inválido(s).", returncode=1)
