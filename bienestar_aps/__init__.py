"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:   Paquete del proyecto Django del portal Bienestar APS.
--------------------------------------------------------------------------------
"""
