"""
Configuración de Wompi desde los settings de Django.

Los hosts definen en su settings module, normalmente desde variables de entorno:

    WOMPI_AUTH_URL = os.getenv("WOMPI_AUTH_URL", "https://id.wompi.sv")
    WOMPI_API_URL = os.getenv("WOMPI_API_URL", "https://api.wompi.sv/v1")
    WOMPI_CLIENT_ID = os.getenv("WOMPI_CLIENT_ID", "")
    WOMPI_CLIENT_SECRET = os.getenv("WOMPI_CLIENT_SECRET", "")

``get_wompi_client()`` devuelve un cliente único por proceso construido con esos
valores; se descarta automáticamente cuando cambia un setting ``WOMPI_*``.
"""
import threading

from django.conf import settings
from django.core.cache import caches
from django.core.signals import setting_changed
from django.dispatch import receiver


DEFAULTS = {
    "WOMPI_AUTH_URL": "https://id.wompi.sv",
    "WOMPI_API_URL": "https://api.wompi.sv/v1",
    "WOMPI_CLIENT_ID": "",
    "WOMPI_CLIENT_SECRET": "",
    # Vacío: se firma con WOMPI_CLIENT_SECRET, como hace Wompi.
    "WOMPI_WEBHOOK_SECRET": "",
    "WOMPI_CACHE_ALIAS": "default",
    "WOMPI_TOKEN_CACHE_KEY": "wompi:access_token",
    "WOMPI_REQUEST_TIMEOUT": 30,
}

REQUIRED_SETTINGS = (
    "WOMPI_AUTH_URL",
    "WOMPI_API_URL",
    "WOMPI_CLIENT_ID",
    "WOMPI_CLIENT_SECRET",
)

_client = None
_client_lock = threading.Lock()


def wompi_setting(name):
    return getattr(settings, name, DEFAULTS[name])


def missing_settings():
    return [name for name in REQUIRED_SETTINGS if not wompi_setting(name)]


def client_kwargs_from_settings():
    return {
        "auth_url": wompi_setting("WOMPI_AUTH_URL"),
        "api_url": wompi_setting("WOMPI_API_URL"),
        "client_id": wompi_setting("WOMPI_CLIENT_ID"),
        "client_secret": wompi_setting("WOMPI_CLIENT_SECRET"),
        "webhook_secret": wompi_setting("WOMPI_WEBHOOK_SECRET") or None,
        "cache": caches[wompi_setting("WOMPI_CACHE_ALIAS")],
        "cache_key": wompi_setting("WOMPI_TOKEN_CACHE_KEY"),
        "timeout": wompi_setting("WOMPI_REQUEST_TIMEOUT"),
    }


def get_wompi_client():
    """
    Cliente Wompi compartido por el proceso.

    Raises:
        WompiConfigurationError: si falta alguna de las cuatro credenciales.
    """
    global _client
    if _client is None:
        with _client_lock:
            if _client is None:
                from wompi_sv.gateway import WompiClient

                _client = WompiClient.from_settings()
    return _client


def reset_wompi_client():
    global _client
    with _client_lock:
        _client = None


@receiver(setting_changed)
def _reset_on_setting_change(*, setting, **kwargs):
    if setting.startswith("WOMPI_") or setting == "CACHES":
        reset_wompi_client()
