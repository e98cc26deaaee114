# Lazy imports to avoid circular dependencies during Django startup
__version__ = "1.0.0"
__all__ = [
    "WompiClient",
    "WompiConfigurationError",
    "WompiGatewayError",
    "get_wompi_client",
]


def __getattr__(name):
    if name == "WompiClient":
        from .gateway import WompiClient
        return WompiClient
    elif name == "get_wompi_client":
        from .conf import get_wompi_client
        return get_wompi_client
    elif name in {"WompiConfigurationError", "WompiGatewayError"}:
        from . import exceptions
        return getattr(exceptions, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
