"""
Token de acceso OAuth2 (client credentials) de Wompi.

Contiene:
- AccessTokenManager: obtiene el token y lo guarda en la caché de Django con el TTL reportado
"""
import logging
import time

import requests

from wompi_sv.exceptions import WompiGatewayError
from wompi_sv.metrics import gateway_failures, gateway_latency


logger = logging.getLogger(__name__)

AUTH_AUDIENCE = "wompi_api"


class AccessTokenManager:
    """
    Dueño del token de acceso cacheado.

    La caché es la única fuente de verdad: varios procesos con la misma caché
    comparten un token. No hay lock alrededor de "miss y fetch"; dos llamadas
    concurrentes en frío pueden pedir dos tokens y la última escritura gana.
    """

    DEFAULT_CACHE_KEY = "wompi:access_token"

    def __init__(self, credentials, *, cache, session, cache_key=None, timeout=None):
        self.credentials = credentials
        self.cache = cache
        self.session = session
        self.cache_key = cache_key or self.DEFAULT_CACHE_KEY
        self.timeout = timeout

    def get_token(self) -> str:
        """Devuelve el token cacheado tal cual o pide uno nuevo si no existe."""
        token = self.cache.get(self.cache_key)
        if token:
            return token

        token, expires_in = self.fetch_token()
        self.cache.set(self.cache_key, token, timeout=expires_in)
        return token

    def fetch_token(self) -> tuple[str, int]:
        """
        Intercambio client_credentials contra el auth URL.

        Returns:
            tuple: (access_token, expires_in en segundos)

        Raises:
            WompiGatewayError: error de transporte, respuesta no 2xx o campos faltantes.
        """
        url = self.credentials.auth_url
        payload = {
            "grant_type": "client_credentials",
            "client_id": self.credentials.client_id,
            "client_secret": self.credentials.client_secret,
            "audience": AUTH_AUDIENCE,
        }
        start = time.perf_counter()
        try:
            response = self.session.request("POST", url, data=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            reason = "timeout" if isinstance(exc, requests.Timeout) else "auth"
            gateway_failures.labels(reason=reason, endpoint="auth").inc()
            logger.error("[WOMPI] Error obteniendo access token: %s", exc)
            raise WompiGatewayError(
                "No se pudo autenticar con Wompi", endpoint=url, method="POST"
            ) from exc

        gateway_latency.labels("POST", "auth", response.status_code).observe(time.perf_counter() - start)

        if not 200 <= response.status_code < 300:
            gateway_failures.labels(reason="auth", endpoint="auth").inc()
            logger.error(
                "[WOMPI] Autenticación rechazada (status=%s): %s",
                response.status_code,
                response.text[:500] if response.text else "empty",
            )
            raise WompiGatewayError(
                "No se pudo autenticar con Wompi",
                endpoint=url,
                method="POST",
                status_code=response.status_code,
            )

        try:
            data = response.json()
            access_token = data["access_token"]
            expires_in = int(data["expires_in"])
        except (ValueError, TypeError, KeyError) as exc:
            gateway_failures.labels(reason="invalid_response", endpoint="auth").inc()
            logger.error("[WOMPI] Respuesta de autenticación inválida: %s", exc)
            raise WompiGatewayError(
                "No se pudo autenticar con Wompi",
                endpoint=url,
                method="POST",
                status_code=response.status_code,
            ) from exc

        if not access_token:
            gateway_failures.labels(reason="invalid_response", endpoint="auth").inc()
            raise WompiGatewayError(
                "No se pudo autenticar con Wompi",
                endpoint=url,
                method="POST",
                status_code=response.status_code,
            )

        logger.info("[WOMPI] Nuevo access token obtenido (expira en %ss)", expires_in)
        return access_token, expires_in
