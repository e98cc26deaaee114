"""
Filtro de logging que oculta secretos de Wompi.

Las fallas de la API se registran con el payload enviado, que puede traer datos
de tarjeta. Instalar en LOGGING:

    "filters": {
        "sanitize_wompi": {"()": "wompi_sv.logging_filters.SanitizeWompiSecretsFilter"},
    },
"""
import logging
import re


REDACTED = "***REDACTED***"


class SanitizeWompiSecretsFilter(logging.Filter):
    """
    Remueve de los logs tokens de acceso, secretos y datos de tarjeta.

    Patrones detectados:
    - Bearer tokens
    - client_secret, access_token y wompi_hash en formato clave=valor, clave: valor o JSON/dict
    - números de tarjeta (13 a 19 dígitos, con o sin separadores)
    - cvv / cvc
    """

    PATTERNS = [
        (
            re.compile(r"(Bearer\s+)([A-Za-z0-9_.\-]{8,})"),
            r"\1" + REDACTED,
        ),
        (
            re.compile(
                r"""(["']?(?:client_secret|access_token|wompi_hash)["']?\s*[:=]\s*["']?)([^"'\s,&}]{6,})""",
                re.IGNORECASE,
            ),
            r"\1" + REDACTED,
        ),
        (
            re.compile(r"""(["']?(?:cvv|cvc)["']?\s*[:=]\s*["']?)(\d{3,4})""", re.IGNORECASE),
            r"\1" + REDACTED,
        ),
        (
            re.compile(r"(?<!\d)\d(?:[ -]?\d){12,18}(?!\d)"),
            "****-****-****-****",
        ),
    ]

    def sanitize(self, value):
        if not isinstance(value, str):
            if not isinstance(value, (dict, list, tuple)):
                return value
            value = str(value)
        for pattern, replacement in self.PATTERNS:
            value = pattern.sub(replacement, value)
        return value

    def filter(self, record):
        if isinstance(record.msg, str):
            record.msg = self.sanitize(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {key: self.sanitize(value) for key, value in record.args.items()}
            elif isinstance(record.args, (tuple, list)):
                record.args = tuple(self.sanitize(arg) for arg in record.args)

        return True
