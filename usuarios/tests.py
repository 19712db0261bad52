# usuarios/tests.py

from django.test import SimpleTestCase

from usuarios.forms import LoginRutForm, RegistroFuncionarioForm


class RegistroFuncionarioFormTest(SimpleTestCase):
    """
    Pruebas del formulario de registro de funcionarios.
    Solo se valida la entrada; la cuenta la crea el proveedor de autenticación.
    """

    def datos(self, **extra):
        base = {
            "nombre": "María José Pérez",
            "rut": "12.345.678-5",
            "email": "  MJPerez@Cesfam.cl ",
            "telefono": "+56912345678",
            "centro_salud": "CESFAM Central",
            "cargo": "Técnico en enfermería",
            "password": "secreto123",
            "password_confirm": "secreto123",
            "terminos": "on",
        }
        base.update(extra)
        return base

    def test_registro_valido(self):
        """CP-REG-001: Datos completos y RUT válido."""
        form = RegistroFuncionarioForm(data=self.datos())
        self.assertTrue(form.is_valid(), form.errors)
        # El RUT se entrega limpio para buscarlo en el almacén.
        self.assertEqual(form.cleaned_data["rut"], "123456785")
        self.assertEqual(form.cleaned_data["email"], "mjperez@cesfam.cl")

    def test_rut_invalido(self):
        """CP-REG-002: El mensaje de error del RUT es 'RUT inválido.'."""
        form = RegistroFuncionarioForm(data=self.datos(rut="12.345.678-0"))
        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors["rut"], ["RUT inválido."])

    def test_password_corta(self):
        form = RegistroFuncionarioForm(data=self.datos(password="123", password_confirm="123"))
        self.assertFalse(form.is_valid())
        self.assertIn("La contraseña debe tener al menos 6 caracteres", form.errors["password"])

    def test_passwords_distintas(self):
        form = RegistroFuncionarioForm(data=self.datos(password_confirm="otra-clave"))
        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors["password_confirm"], ["Las contraseñas no coinciden"])

    def test_terminos_obligatorios(self):
        datos = self.datos()
        datos.pop("terminos")
        form = RegistroFuncionarioForm(data=datos)
        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors["terminos"], ["Debe aceptar los términos y condiciones"])

    def test_nombre_con_numeros(self):
        form = RegistroFuncionarioForm(data=self.datos(nombre="Juan 2"))
        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors["nombre"], ["Solo letras y espacios."])

    def test_telefono_opcional(self):
        form = RegistroFuncionarioForm(data=self.datos(telefono=""))
        self.assertTrue(form.is_valid(), form.errors)

    def test_telefono_con_letras(self):
        form = RegistroFuncionarioForm(data=self.datos(telefono="9123abc45"))
        self.assertFalse(form.is_valid())
        self.assertIn("telefono", form.errors)


class LoginRutFormTest(SimpleTestCase):
    def test_login_valido(self):
        form = LoginRutForm(data={"rut": "10000030k", "password": "secreto"})
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data["rut"], "10000030K")

    def test_login_rut_invalido(self):
        form = LoginRutForm(data={"rut": "1234", "password": "secreto"})
        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors["rut"], ["RUT inválido."])

    def test_login_password_corta(self):
        form = LoginRutForm(data={"rut": "12345678-5", "password": "12345"})
        self.assertFalse(form.is_valid())
        self.assertIn("La contraseña debe tener al menos 6 caracteres", form.errors["password"])
