"""
Mixin Tokenización para WompiClient.

Contiene:
- TokenizationMixin: tokenizar tarjetas, consultarlas, eliminarlas y cobrar cargos recurrentes
"""
from typing import Any, Dict


class TokenizationMixin:
    """Mixin con métodos de tokenización para WompiClient."""

    def tokenize_card(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Tokeniza una tarjeta para cobros futuros.

        Args:
            data: numeroTarjeta, cvv, mesExpiracion, anioExpiracion, nombreTitular...

        Returns:
            dict: token de la tarjeta (``tokenId``, ``ultimos4Digitos``, ``tipoTarjeta``)
        """
        return self._request("POST", "Tokenizacion", data)

    def get_tokenized_card(self, token_id: str) -> Dict[str, Any]:
        return self._request("GET", f"Tokenizacion/{token_id}", metric_endpoint="Tokenizacion/{id}")

    def delete_tokenized_card(self, token_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"Tokenizacion/{token_id}", metric_endpoint="Tokenizacion/{id}")

    def create_recurring_charge(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Cobra un cargo recurrente con una tarjeta tokenizada.

        Example:
            client.create_recurring_charge({
                "tokenId": "tok_abc123",
                "monto": 29.99,
                "descripcion": "Suscripción mensual",
            })
        """
        return self._request("POST", "CargoRecurrente", data)
