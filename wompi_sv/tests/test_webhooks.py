import json
import hashlib
import hmac

from django.test import SimpleTestCase

from wompi_sv.exceptions import WompiConfigurationError, WompiGatewayError
from wompi_sv.gateway import WompiClient
from wompi_sv.tests.utils import API_URL, AUTH_URL, CLIENT_ID, CLIENT_SECRET, make_session


def _sign(body, secret=CLIENT_SECRET):
    if isinstance(body, str):
        body = body.encode("utf-8")
    return hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()


class WompiWebhookValidationTests(SimpleTestCase):
    def setUp(self):
        self.session = make_session({})
        self.client_wompi = WompiClient(AUTH_URL, API_URL, CLIENT_ID, CLIENT_SECRET, session=self.session)

    def test_validate_webhook_signature(self):
        body = json.dumps({"idTransaccion": "txn_123", "monto": 100.00, "resultadoTransaccion": "ExitosaAprobada"})
        self.assertTrue(self.client_wompi.validate_webhook_signature(body, _sign(body)))
        self.assertFalse(self.client_wompi.validate_webhook_signature(body, "invalid_hash_12345"))

    def test_validate_webhook_request_returns_payload(self):
        body = b'{"idTransaccion":"txn_456"}'

        payload = self.client_wompi.validate_webhook_request(body, _sign(body))

        self.assertEqual(payload, {"idTransaccion": "txn_456"})
        # La validación no toca el token de acceso
        self.session.request.assert_not_called()

    def test_validate_webhook_request_accepts_str_body(self):
        body = json.dumps({"idTransaccion": "txn_456", "monto": 250.50, "codigoAutorizacion": "AUTH123"})

        payload = self.client_wompi.validate_webhook_request(body, _sign(body))

        self.assertEqual(payload["monto"], 250.50)

    def test_signature_is_computed_over_raw_bytes(self):
        raw = b'{ "idTransaccion" : "txn_456" }'
        reserialized = json.dumps(json.loads(raw))

        with self.assertRaisesMessage(WompiGatewayError, "la firma es inválida"):
            self.client_wompi.validate_webhook_request(raw, _sign(reserialized))
        self.assertEqual(self.client_wompi.validate_webhook_request(raw, _sign(raw))["idTransaccion"], "txn_456")

    def test_missing_header_fails_first(self):
        with self.assertRaisesMessage(WompiGatewayError, "el header wompi_hash es requerido"):
            self.client_wompi.validate_webhook_request(b"", None)
        with self.assertRaisesMessage(WompiGatewayError, "el header wompi_hash es requerido"):
            self.client_wompi.validate_webhook_request(b'{"idTransaccion":"txn_789"}', "")

    def test_empty_body_fails_before_signature(self):
        with self.assertRaisesMessage(WompiGatewayError, "el cuerpo es requerido"):
            self.client_wompi.validate_webhook_request(b"", "some_hash")
        with self.assertRaisesMessage(WompiGatewayError, "el cuerpo es requerido"):
            self.client_wompi.validate_webhook_request(None, "some_hash")

    def test_invalid_signature(self):
        with self.assertRaisesMessage(WompiGatewayError, "la firma es inválida"):
            self.client_wompi.validate_webhook_request(b'{"idTransaccion":"txn_999"}', "completely_wrong_hash")

    def test_invalid_json_after_valid_signature(self):
        body = "{invalid json}"
        with self.assertRaisesMessage(WompiGatewayError, "el JSON es inválido") as ctx:
            self.client_wompi.validate_webhook_request(body, _sign(body))
        self.assertIsInstance(ctx.exception.__cause__, ValueError)

    def test_json_that_is_not_an_object(self):
        body = "[1, 2]"
        with self.assertRaisesMessage(WompiGatewayError, "el JSON es inválido"):
            self.client_wompi.validate_webhook_request(body, _sign(body))

    def test_webhook_secret_override_is_used(self):
        client = WompiClient(AUTH_URL, API_URL, CLIENT_ID, CLIENT_SECRET, webhook_secret="whsec")
        body = b'{"idTransaccion":"txn_1"}'

        self.assertEqual(client.validate_webhook_request(body, _sign(body, "whsec"))["idTransaccion"], "txn_1")
        with self.assertRaises(WompiGatewayError):
            client.validate_webhook_request(body, _sign(body))

    def test_missing_secret_is_a_configuration_error(self):
        self.client_wompi.webhook_secret = ""
        with self.assertRaises(WompiConfigurationError):
            self.client_wompi.validate_webhook_signature(b"{}", "abc")


class IsSuccessfulPaymentTests(SimpleTestCase):
    def test_successful_result(self):
        self.assertTrue(WompiClient.is_successful_payment({
            "idTransaccion": "txn_success",
            "resultadoTransaccion": "ExitosaAprobada",
        }))

    def test_other_results_are_not_successful(self):
        for payload in (
            {"resultadoTransaccion": "Rechazada"},
            {"resultadoTransaccion": "exitosaaprobada"},
            {"resultadoTransaccion": "ExitosaAprobada "},
            {"resultadoTransaccion": None},
            {"idTransaccion": "txn_failed"},
            {},
        ):
            with self.subTest(payload=payload):
                self.assertFalse(WompiClient.is_successful_payment(payload))

    def test_never_raises_for_non_mapping(self):
        self.assertFalse(WompiClient.is_successful_payment(None))
        self.assertFalse(WompiClient.is_successful_payment(["ExitosaAprobada"]))
