"""Prometheus metrics for the backend."""

from prometheus_client import Counter

mask_applications = Counter(
    "mask_applications_total",
    "Máscaras aplicadas por tipo e resultado",
    ["kind", "outcome"],
)

formula_errors = Counter(
    "formula_errors_total",
    "Chamadas de fórmula rejeitadas por argumentos inválidos",
    ["formula"],
)
