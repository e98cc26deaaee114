"""
Errores del cliente Wompi.

- WompiConfigurationError: credenciales o secretos ausentes (fatal).
- WompiGatewayError: fallas de transporte, respuestas no 2xx o webhooks inválidos.
"""
from django.core.exceptions import ImproperlyConfigured


class WompiError(Exception):
    """Base de todos los errores del cliente Wompi."""


class WompiConfigurationError(WompiError, ImproperlyConfigured):
    """Falta una credencial o secreto requerido. Corregir la configuración antes de reintentar."""


class WompiGatewayError(WompiError):
    """
    Error reportable al llamar a Wompi o al validar lo que Wompi nos envía.

    El error original de transporte (si lo hay) queda en ``__cause__``.
    """

    def __init__(self, message, *, endpoint=None, method=None, status_code=None):
        super().__init__(message)
        self.endpoint = endpoint
        self.method = method
        self.status_code = status_code

    def __str__(self):
        message = super().__str__()
        if self.method and self.endpoint:
            return f"{message} ({self.method} {self.endpoint})"
        return message
