"""
--------------------------------------------------------------------------------
Integrantes:           Equipo Bienestar APS
Fecha de Modificación: 19/10/2026
Descripción:   Archivo de configuración global de Django. Contiene seguridad,
               aplicaciones instaladas, internacionalización y logging. No se
               configura base de datos: la persistencia, la autenticación y
               el almacenamiento de archivos viven en el backend administrado.
--------------------------------------------------------------------------------
"""

from pathlib import Path
import os
from dotenv import load_dotenv

# -----------------------------------------------------------------------------
# Paths & .env
# -----------------------------------------------------------------------------
# Define el directorio base del proyecto
BASE_DIR = Path(__file__).resolve().parent.parent

# Cargar variables de entorno desde un archivo .env en la raíz del proyecto
load_dotenv(os.path.join(BASE_DIR, '.env'))

# -------------------------------------------------------------------
# Seguridad / Debug
# -------------------------------------------------------------------
# Clave secreta para firma criptográfica (debe venir desde .env en producción)
SECRET_KEY = os.environ.get('SECRET_KEY', default='your secret key')
# Modo Debug (True para desarrollo, False para producción)
DEBUG = os.getenv("DEBUG", "True").lower() == "true"

# Lista de hosts/dominios permitidos para servir la aplicación
ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

# -----------------------------------------------------------------------------
# Apps (Aplicaciones Instaladas)
# -----------------------------------------------------------------------------
INSTALLED_APPS = [
    # Project apps (Módulos desarrollados por el equipo)
    "core.apps.CoreConfig",
    "usuarios.apps.UsuariosConfig",
    "compras.apps.ComprasConfig",
    "prestamos.apps.PrestamosConfig",
]

# Sin base de datos propia (ver descripción del archivo).
DATABASES = {}

# -----------------------------------------------------------------------------
# Internacionalización y Zona Horaria
# -----------------------------------------------------------------------------
LANGUAGE_CODE = "es-cl" # Español de Chile
TIME_ZONE = "America/Santiago" # Hora de Chile, define el "hoy" de la temporada
USE_I18N = True
USE_TZ = True

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{asctime} {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        # Apps del proyecto
        "core": {"level": LOG_LEVEL},
        "usuarios": {"level": LOG_LEVEL},
        "compras": {"level": LOG_LEVEL},
        "prestamos": {"level": LOG_LEVEL},
    },
}
