"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:   Configuración de la aplicación 'prestamos' (solicitudes de
               préstamos y fondo solidario).
--------------------------------------------------------------------------------
"""
from django.apps import AppConfig  # Importa clase base de configuración

class PrestamosConfig(AppConfig):
    name = 'prestamos'  # Nombre de la app
    verbose_name = 'Préstamos'
