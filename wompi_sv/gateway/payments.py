"""
Mixin de pagos para WompiClient.

Contiene:
- PaymentsMixin: enlaces de pago, transacciones 3DS, datos del aplicativo y transacciones de prueba
"""
from typing import Any, Dict


class PaymentsMixin:
    """Mixin con los endpoints de cobro para WompiClient."""

    def create_payment_link(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Crea un enlace de pago (Enlace de Pago).

        Example:
            client.create_payment_link({
                "monto": 100.00,
                "nombreProducto": "Compra de producto",
                "configuracion": {"urlRedirect": "https://mitienda.com/pago"},
            })
        """
        return self._request("POST", "EnlacePago", data)

    def create_transaction_3ds(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Crea una transacción de compra con 3DS; la respuesta trae la URL de autenticación."""
        return self._request("POST", "Transaccion", data)

    def get_aplicativo_data(self) -> Dict[str, Any]:
        """Configuración y capacidades del aplicativo."""
        return self._request("GET", "Aplicativo")

    def execute_test_transaction(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "TransaccionPrueba", data)
