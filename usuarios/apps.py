"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:   Configuración de la aplicación 'usuarios'. Contiene los
               formularios de registro de funcionarios y de ingreso con RUT.
--------------------------------------------------------------------------------
"""
from django.apps import AppConfig  # Importa la clase base para configuración de aplicaciones

class UsuariosConfig(AppConfig):
    name = "usuarios"  # Nombre de la aplicación
