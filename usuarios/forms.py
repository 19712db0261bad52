# usuarios/forms.py
import logging

from django import forms
from django.core.validators import RegexValidator

from core.validators import RutField

logger = logging.getLogger(__name__)

# Largo mínimo que exige el proveedor de autenticación.
PASSWORD_MIN_LENGTH = 6

# ------------------ Validadores reutilizables ------------------
# ✅ Solo letras (incluye acentos, Ñ) y espacios
NAME_VALIDATOR = RegexValidator(
    regex=r"^[A-Za-zÁÉÍÓÚÑÜáéíóúñü ]*$",
    message="Solo letras y espacios.",
)

# ✅ Dígitos con '+' opcional al inicio. Ej: +56912345678, 912345678
TELEFONO_VALIDATOR = RegexValidator(
    regex=r"^\+?\d{8,12}$",
    message="Ingrese solo números (8 a 12 dígitos).",
)


# ================== REGISTRO DE FUNCIONARIO ==================
class RegistroFuncionarioForm(forms.Form):
    nombre = forms.CharField(label="Nombre completo", max_length=150, validators=[NAME_VALIDATOR])
    # Se entrega limpio ('123456785') porque así se busca en el almacén.
    rut = RutField(limpio=True)
    email = forms.EmailField(label="Correo electrónico")
    telefono = forms.CharField(
        label="Teléfono",
        max_length=13,
        required=False,
        validators=[TELEFONO_VALIDATOR],
        widget=forms.TextInput(attrs={"inputmode": "numeric", "autocomplete": "off"}),
    )
    centro_salud = forms.CharField(label="Centro de salud", max_length=150)
    cargo = forms.CharField(label="Cargo", max_length=150)
    password = forms.CharField(
        label="Contraseña",
        min_length=PASSWORD_MIN_LENGTH,
        widget=forms.PasswordInput,
        error_messages={
            "min_length": f"La contraseña debe tener al menos {PASSWORD_MIN_LENGTH} caracteres",
        },
    )
    password_confirm = forms.CharField(label="Confirmar contraseña", widget=forms.PasswordInput)
    terminos = forms.BooleanField(
        label="Acepto los términos y condiciones",
        error_messages={"required": "Debe aceptar los términos y condiciones"},
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Estética bootstrap
        for name, field in self.fields.items():
            if name != "terminos":
                field.widget.attrs.setdefault("class", "form-control")

    def clean_email(self):
        return self.cleaned_data["email"].strip().lower()

    def clean(self):
        cleaned = super().clean()
        p1 = cleaned.get("password")
        p2 = cleaned.get("password_confirm")
        if p1 and p2 and p1 != p2:
            self.add_error("password_confirm", "Las contraseñas no coinciden")
        if self.errors:
            logger.info("[REGISTRO] Formulario rechazado: campos=%s", sorted(self.errors))
        return cleaned


# ================== LOGIN CON RUT ==================
class LoginRutForm(forms.Form):
    rut = RutField(limpio=True)
    password = forms.CharField(
        label="Contraseña",
        min_length=PASSWORD_MIN_LENGTH,
        strip=False,
        widget=forms.PasswordInput,
        error_messages={
            "min_length": f"La contraseña debe tener al menos {PASSWORD_MIN_LENGTH} caracteres",
        },
    )
