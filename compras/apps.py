"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:   Configuración de la aplicación 'compras' (gas subsidiado y
               entradas de entretenimiento).
--------------------------------------------------------------------------------
"""
from django.apps import AppConfig  # Importa clase base de configuración

class ComprasConfig(AppConfig):
    name = 'compras'  # Nombre de la app
    verbose_name = 'Compras'
