"""
Mixin de validación de webhooks y redirecciones para WompiClient.

Wompi firma el cuerpo crudo del webhook (header ``wompi_hash``) y los parámetros
de la URL de redirección (parámetro ``hash``) con HMAC-SHA256, usando como llave
el client secret del aplicativo.
"""
import json
import logging
from typing import Any, Dict, Mapping

from wompi_sv.exceptions import WompiConfigurationError, WompiGatewayError
from wompi_sv.gateway.signature import build_redirect_message, verify_signature
from wompi_sv.metrics import webhook_signature_errors


logger = logging.getLogger(__name__)

SUCCESSFUL_RESULT = "ExitosaAprobada"


class WebhooksMixin:
    """Validación de lo que Wompi envía al comercio. No usa el token de acceso."""

    def _signing_secret(self) -> str:
        if not self.webhook_secret:
            raise WompiConfigurationError("Secreto de webhooks de Wompi no configurado")
        return self.webhook_secret

    def validate_webhook_signature(self, body: str | bytes, received_hash: str) -> bool:
        """HMAC del cuerpo crudo contra el hash recibido."""
        return verify_signature(self._signing_secret(), body, received_hash)

    def validate_webhook_request(self, raw_body: str | bytes | None, wompi_hash: str | None) -> Dict[str, Any]:
        """
        Valida y decodifica un webhook de Wompi.

        La firma se calcula sobre los bytes tal como llegaron, antes de decodificar
        el JSON. Orden de los chequeos: header, cuerpo, firma, JSON.

        Raises:
            WompiGatewayError: si cualquiera de los chequeos falla.
        """
        if not wompi_hash:
            logger.warning("[WOMPI-WEBHOOK] Rechazado: falta el header wompi_hash")
            raise WompiGatewayError("Webhook inválido: el header wompi_hash es requerido")

        if not raw_body:
            logger.warning("[WOMPI-WEBHOOK] Rechazado: cuerpo vacío")
            raise WompiGatewayError("Webhook inválido: el cuerpo es requerido")

        if not self.validate_webhook_signature(raw_body, wompi_hash):
            webhook_signature_errors.labels("webhook").inc()
            logger.warning("[WOMPI-WEBHOOK] Rechazado: firma inválida")
            raise WompiGatewayError("Webhook inválido: la firma es inválida")

        try:
            payload = json.loads(raw_body)
        except ValueError as exc:
            logger.warning("[WOMPI-WEBHOOK] Rechazado: JSON inválido")
            raise WompiGatewayError("Webhook inválido: el JSON es inválido") from exc

        if not isinstance(payload, dict):
            logger.warning("[WOMPI-WEBHOOK] Rechazado: el JSON no es un objeto")
            raise WompiGatewayError("Webhook inválido: el JSON es inválido")

        logger.info("[WOMPI-WEBHOOK] Webhook validado (idTransaccion=%s)", payload.get("idTransaccion"))
        return payload

    def validate_redirect_params(self, params: Mapping[str, Any], received_hash: str | None) -> bool:
        """
        Valida el ``hash`` de la URL de redirección.

        Una firma incorrecta devuelve False; solo la falta de secreto lanza error.
        """
        secret = self._signing_secret()
        is_valid = verify_signature(secret, build_redirect_message(params), received_hash)
        if not is_valid:
            webhook_signature_errors.labels("redirect").inc()
            logger.warning(
                "[WOMPI-REDIRECT] Firma inválida (idTransaccion=%s)", params.get("idTransaccion")
            )
        return is_valid

    @staticmethod
    def is_successful_payment(payload: Mapping[str, Any]) -> bool:
        try:
            return payload.get("resultadoTransaccion") == SUCCESSFUL_RESULT
        except AttributeError:
            return False
