"""
Helpers para exponer métricas Prometheus del cliente Wompi.
"""
from typing import Iterable

from prometheus_client import REGISTRY, Counter, Histogram


_counter_cache: dict[tuple[str, tuple[str, ...]], object] = {}
_hist_cache: dict[tuple[str, tuple[str, ...]], object] = {}


def _registered(name: str):
    # La métrica ya existe en el registro (común en tests con recarga de módulos).
    # prometheus_client guarda los counters sin el sufijo _total.
    names = {name, name.removesuffix("_total")}
    for collector in list(REGISTRY._collector_to_names.keys()):
        if getattr(collector, "_name", None) in names:
            return collector
    return None


def get_counter(name: str, doc: str, labelnames: Iterable[str] = ()) -> object:
    key = (name, tuple(labelnames))
    if key in _counter_cache:
        return _counter_cache[key]
    try:
        metric = Counter(name, doc, list(labelnames))
    except ValueError:
        metric = _registered(name)
        if metric is None:
            raise
    _counter_cache[key] = metric
    return metric


def get_histogram(name: str, doc: str, labelnames: Iterable[str] = (), buckets: Iterable[float] | None = None) -> object:
    key = (name, tuple(labelnames))
    if key in _hist_cache:
        return _hist_cache[key]
    try:
        if buckets:
            metric = Histogram(name, doc, list(labelnames), buckets=buckets)
        else:
            metric = Histogram(name, doc, list(labelnames))
    except ValueError:
        metric = _registered(name)
        if metric is None:
            raise
    _hist_cache[key] = metric
    return metric


gateway_latency = get_histogram(
    "wompi_gateway_latency_seconds",
    "Latencia de llamadas a Wompi",
    ["method", "endpoint", "status"],
)
gateway_failures = get_counter(
    "wompi_gateway_failures_total",
    "Errores al llamar a Wompi",
    ["reason", "endpoint"],
)
webhook_signature_errors = get_counter(
    "wompi_webhook_signature_errors_total",
    "Firmas HMAC rechazadas de Wompi",
    ["source"],
)
