"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:   Comando de gestión que muestra los cupos de gas vigentes para
               una fecha: temporada, máximo por empresa, total mensual y las
               opciones de cada cilindro.
--------------------------------------------------------------------------------
"""
from datetime import date

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from compras.cupos import (
    TipoCarga,
    descripcion_temporada,
    max_cargas_por_empresa,
    max_cargas_total,
    opciones_por_carga,
    temporada_para,
)


class Command(BaseCommand):
    help = "Muestra los cupos de gas de la temporada. Ej: python manage.py cupos_gas --fecha 2026-07-01"

    def add_arguments(self, parser):
        parser.add_argument(
            "--fecha",
            help="Fecha de referencia YYYY-MM-DD (por defecto, hoy en TIME_ZONE)",
        )

    def handle(self, *args, **options):
        if options.get("fecha"):
            try:
                fecha = date.fromisoformat(options["fecha"])
            except ValueError:
                raise CommandError(f"Fecha inválida: {options['fecha']!r}. Use YYYY-MM-DD.")
        else:
            fecha = timezone.localdate()

        temporada = temporada_para(fecha)

        self.stdout.write(self.style.SUCCESS(f"{fecha.isoformat()}: {temporada.label}"))
        self.stdout.write(descripcion_temporada(temporada))
        self.stdout.write(f"Máximo por empresa: {max_cargas_por_empresa(temporada)}")
        self.stdout.write(f"Total mensual (ambas marcas): {max_cargas_total(temporada)}")
        for tipo in TipoCarga:
            opciones = ", ".join(str(n) for n in opciones_por_carga(temporada, tipo))
            self.stdout.write(f" - {tipo.label}: {opciones}")
