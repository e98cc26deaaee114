"""
Firmas HMAC-SHA256 de Wompi.

Contiene:
- compute_signature / verify_signature: HMAC en hex minúsculas con comparación en tiempo constante
- build_redirect_message: mensaje firmado de los parámetros de la URL de redirección
"""
import hashlib
import hmac


# Orden fijo definido por Wompi para la URL de redirección.
# Los valores se concatenan sin separador: "1" + "23" y "12" + "3" producen el
# mismo mensaje. Se conserva así por compatibilidad con la firma de Wompi.
REDIRECT_SIGNED_FIELDS = (
    "idTransaccion",
    "monto",
    "esReal",
    "formaPago",
    "esAprobada",
    "codigoAutorizacion",
    "mensaje",
)


def _to_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def compute_signature(secret: str | bytes, message: str | bytes) -> str:
    """HMAC-SHA256 de ``message`` con ``secret`` como llave, en hex minúsculas."""
    return hmac.new(_to_bytes(secret), _to_bytes(message), hashlib.sha256).hexdigest()


def verify_signature(secret: str | bytes, message: str | bytes, received: str | bytes | None) -> bool:
    """
    Compara la firma esperada con la recibida usando ``hmac.compare_digest``.

    Nunca lanza por una firma que no coincide (incluida una de otra longitud):
    devuelve False.
    """
    if not received:
        return False
    expected = compute_signature(secret, message)
    return hmac.compare_digest(expected.encode("ascii"), _to_bytes(received))


def build_redirect_message(params) -> str:
    """
    Concatena los campos firmados de la redirección en el orden de Wompi.

    Un campo ausente (o None) cuenta como cadena vacía. El parámetro ``hash`` no
    forma parte del mensaje.
    """
    values = []
    for field in REDIRECT_SIGNED_FIELDS:
        value = params.get(field)
        values.append("" if value is None else str(value))
    return "".join(values)
