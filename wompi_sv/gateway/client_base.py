"""
Cliente Base de Wompi El Salvador - Funcionalidad core.

Contiene:
- WompiCredentials: las cuatro credenciales del aplicativo
- WompiClientBase: validación de credenciales, token y petición autenticada
"""
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict

import requests
from django.core.cache import caches

from wompi_sv.exceptions import WompiConfigurationError, WompiGatewayError
from wompi_sv.gateway.auth import AccessTokenManager
from wompi_sv.metrics import gateway_failures, gateway_latency


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WompiCredentials:
    auth_url: str
    api_url: str
    client_id: str
    client_secret: str


class WompiClientBase:
    """
    Cliente base para la API de Wompi El Salvador.

    La caché (cualquier backend de Django) y la sesión HTTP (``requests.Session``)
    se inyectan; si no se pasan se usan la caché ``default`` y una sesión nueva.
    No hay reintentos: el llamador decide si reintenta.
    """

    REQUEST_TIMEOUT = 30

    def __init__(
        self,
        auth_url: str | None,
        api_url: str | None,
        client_id: str | None,
        client_secret: str | None,
        *,
        webhook_secret: str | None = None,
        cache=None,
        session: requests.Session | None = None,
        cache_key: str | None = None,
        timeout: float | None = None,
    ):
        if not auth_url or not api_url or not client_id or not client_secret:
            raise WompiConfigurationError("Credenciales de Wompi no configuradas")

        self.credentials = WompiCredentials(auth_url, api_url, client_id, client_secret)
        self.webhook_secret = webhook_secret or client_secret
        self.cache = cache if cache is not None else caches["default"]
        self.session = session or requests.Session()
        self.timeout = timeout or self.REQUEST_TIMEOUT
        self.token_manager = AccessTokenManager(
            self.credentials,
            cache=self.cache,
            session=self.session,
            cache_key=cache_key,
            timeout=self.timeout,
        )

    @classmethod
    def from_settings(cls, **overrides):
        """Construye el cliente desde los settings ``WOMPI_*`` de Django."""
        from wompi_sv.conf import client_kwargs_from_settings

        kwargs = client_kwargs_from_settings()
        kwargs.update(overrides)
        return cls(**kwargs)

    def _build_url(self, endpoint: str) -> str:
        return f"{self.credentials.api_url.rstrip('/')}/{endpoint.lstrip('/')}"

    def _request(self, method: str, endpoint: str, data: Dict[str, Any] | None = None, *, metric_endpoint: str | None = None) -> Dict[str, Any]:
        """
        Petición autenticada con Bearer token contra ``api_url/endpoint``.

        Returns:
            dict: cuerpo JSON decodificado; un cuerpo vacío devuelve ``{}``.

        Raises:
            WompiGatewayError: error de autenticación, de transporte o respuesta no 2xx.
        """
        access_token = self.token_manager.get_token()
        url = self._build_url(endpoint)
        label = metric_endpoint or endpoint
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/json",
        }
        kwargs = {"headers": headers, "timeout": self.timeout}
        if method == "POST":
            kwargs["json"] = data or {}

        logger.debug("[WOMPI] %s %s", method, url)
        start = time.perf_counter()
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            reason = "timeout" if isinstance(exc, requests.Timeout) else "http_error"
            gateway_failures.labels(reason=reason, endpoint=label).inc()
            logger.error("[WOMPI] Falló la petición %s %s: %s (data=%s)", method, endpoint, exc, data)
            raise WompiGatewayError(
                f"Falló la petición a la API: {endpoint}", endpoint=endpoint, method=method
            ) from exc

        gateway_latency.labels(method, label, response.status_code).observe(time.perf_counter() - start)

        if not 200 <= response.status_code < 300:
            gateway_failures.labels(reason="http_error", endpoint=label).inc()
            logger.error(
                "[WOMPI] Falló la petición %s %s (status=%s): %s (data=%s)",
                method,
                endpoint,
                response.status_code,
                response.text[:500] if response.text else "empty",
                data,
            )
            raise WompiGatewayError(
                f"Falló la petición a la API: {endpoint}",
                endpoint=endpoint,
                method=method,
                status_code=response.status_code,
            )

        return self._decode(response, method, endpoint, label)

    @staticmethod
    def _decode(response, method, endpoint, label) -> Dict[str, Any]:
        if not response.content or not response.content.strip():
            return {}
        try:
            body = response.json()
        except ValueError as exc:
            gateway_failures.labels(reason="invalid_response", endpoint=label).inc()
            raise WompiGatewayError(
                f"Respuesta inválida de Wompi: {endpoint}",
                endpoint=endpoint,
                method=method,
                status_code=response.status_code,
            ) from exc
        if body is None:
            return {}
        if not isinstance(body, dict):
            gateway_failures.labels(reason="invalid_response", endpoint=label).inc()
            raise WompiGatewayError(
                f"Respuesta de Wompi no es un objeto JSON: {endpoint}",
                endpoint=endpoint,
                method=method,
                status_code=response.status_code,
            )
        return body
