"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:           Clase de configuración de la app 'core'. Agrupa las
                       utilidades de RUT compartidas por todas las apps.
--------------------------------------------------------------------------------
"""

# Importa AppConfig.
from django.apps import AppConfig

class CoreConfig(AppConfig):
    # Nombre de la aplicación.
    name = "core"
    verbose_name = "Núcleo"
