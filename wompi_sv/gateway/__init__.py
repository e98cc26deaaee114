"""
Paquete Gateway de Wompi El Salvador.

Exporta:
- WompiClient: cliente completo (combina todos los mixins)
- compute_signature / verify_signature: HMAC-SHA256 en tiempo constante

Módulos internos:
- signature: firmas HMAC y mensaje de redirección
- auth: AccessTokenManager (OAuth2 client credentials + caché)
- client_base: WompiClientBase (credenciales y petición autenticada)
- payments: PaymentsMixin (enlaces de pago, 3DS, aplicativo, pruebas)
- tokenization: TokenizationMixin (tarjetas tokenizadas y cargos recurrentes)
- webhooks: WebhooksMixin (webhooks y URL de redirección)
"""
from wompi_sv.gateway.auth import AccessTokenManager
from wompi_sv.gateway.client_base import WompiClientBase, WompiCredentials
from wompi_sv.gateway.payments import PaymentsMixin
from wompi_sv.gateway.signature import (
    REDIRECT_SIGNED_FIELDS,
    build_redirect_message,
    compute_signature,
    verify_signature,
)
from wompi_sv.gateway.tokenization import TokenizationMixin
from wompi_sv.gateway.webhooks import WebhooksMixin


class WompiClient(
    PaymentsMixin,
    TokenizationMixin,
    WebhooksMixin,
    WompiClientBase,
):
    """
    Cliente para la API de Wompi El Salvador.

    Combina todos los mixins:
    - PaymentsMixin: create_payment_link, create_transaction_3ds,
                     get_aplicativo_data, execute_test_transaction
    - TokenizationMixin: tokenize_card, get_tokenized_card,
                         delete_tokenized_card, create_recurring_charge
    - WebhooksMixin: validate_webhook_signature, validate_webhook_request,
                     validate_redirect_params, is_successful_payment
    - WompiClientBase: credenciales, token de acceso y petición autenticada
    """
    pass


__all__ = [
    "AccessTokenManager",
    "REDIRECT_SIGNED_FIELDS",
    "WompiClient",
    "WompiClientBase",
    "WompiCredentials",
    "build_redirect_message",
    "compute_signature",
    "verify_signature",
]
