"""Mask engine package exposing the public helpers."""

from .engine import apply_mask, format_cnpj, format_cpf, match_regex
from .kinds import MaskKind
from .templates import apply_monetary_template, apply_template, only_digits

__all__ = (
    "apply_mask",
    "apply_monetary_template",
    "apply_template",
    "format_cnpj",
    "format_cpf",
    "match_regex",
    "MaskKind",
    "only_digits",
)
