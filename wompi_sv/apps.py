from django.apps import AppConfig


class WompiSvConfig(AppConfig):
    name = "wompi_sv"
    verbose_name = "Wompi El Salvador"

    def ready(self):
        """
        Valida las credenciales de Wompi en entornos no DEBUG para evitar despliegues incorrectos.
        """
        from django.conf import settings
        from django.core.exceptions import ImproperlyConfigured

        # Registra el receiver de setting_changed
        from wompi_sv import conf

        if getattr(settings, "DEBUG", False):
            return

        missing = conf.missing_settings()
        if missing:
            raise ImproperlyConfigured(f"Faltan variables Wompi: {', '.join(missing)}")
