"""
Señales enviadas por las vistas de Wompi.

- webhook_validated: kwargs ``payload`` (dict) y ``successful`` (bool)
- redirect_validated: kwargs ``params`` (dict sin ``hash``) y ``approved`` (bool)
"""
from django.dispatch import Signal


webhook_validated = Signal()
redirect_validated = Signal()
