"""
Views de Wompi El Salvador.

Endpoints que Wompi llama directamente:
- Webhook de transacciones (POST, cuerpo JSON firmado en el header wompi_hash)
- URL de redirección (GET, parámetros firmados en ``hash``)
"""
import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from wompi_sv.conf import get_wompi_client
from wompi_sv.exceptions import WompiGatewayError
from wompi_sv.signals import redirect_validated, webhook_validated


logger = logging.getLogger(__name__)


class WompiWebhookView(APIView):
    """
    Recibe los webhooks de Wompi.

    POST /webhook/
    Header: Wompi-Hash (wompi_hash) con el HMAC-SHA256 del cuerpo crudo.
    """
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):
        client = get_wompi_client()
        # request.body: la firma se calcula sobre los bytes recibidos, no sobre request.data
        try:
            payload = client.validate_webhook_request(request.body, request.headers.get("Wompi-Hash"))
        except WompiGatewayError as exc:
            logger.warning("[WOMPI-WEBHOOK] Webhook rechazado: %s", exc)
            return Response({"error": "Firma inválida"}, status=status.HTTP_400_BAD_REQUEST)

        successful = client.is_successful_payment(payload)
        webhook_validated.send(sender=self.__class__, payload=payload, successful=successful)
        return Response({"success": True}, status=status.HTTP_200_OK)


class WompiRedirectView(APIView):
    """
    URL de retorno del navegador después del pago.

    GET /redirect/?idTransaccion=...&monto=...&esAprobada=1&...&hash=...
    """
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):
        params = {key: value for key, value in request.query_params.items() if key != "hash"}
        received_hash = request.query_params.get("hash")

        if not get_wompi_client().validate_redirect_params(params, received_hash):
            return Response({"error": "Firma inválida"}, status=status.HTTP_400_BAD_REQUEST)

        approved = params.get("esAprobada") == "1"
        redirect_validated.send(sender=self.__class__, params=params, approved=approved)
        return Response(
            {
                "idTransaccion": params.get("idTransaccion"),
                "monto": params.get("monto"),
                "aprobada": approved,
                "mensaje": params.get("mensaje"),
            },
            status=status.HTTP_200_OK,
        )
