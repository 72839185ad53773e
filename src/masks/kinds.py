"""Mask kinds accepted by the InputMask formula."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class MaskKind(str, Enum):
    CPF = "cpf"
    CNPJ = "cnpj"
    NUMERO = "numero"
    MONETARIO = "monetario"
    REGEX = "regex"
    AUTO = "auto"
    OTHER = "other"

    @classmethod
    def parse(cls, tipo: Optional[str]) -> "MaskKind":
        """Map the raw ``tipo`` argument to a kind; unknown values become OTHER.

        Matching is exact (case-sensitive), so ``"CPF"`` is not a CPF mask.
        """
        if tipo is None or tipo == cls.OTHER.value:
            return cls.OTHER
        try:
            return cls(tipo)
        except (TypeError, ValueError):
            return cls.OTHER


CPF_LENGTH = 11
CNPJ_LENGTH = 14

AUTO_DOCUMENT_KINDS = {
    CPF_LENGTH: MaskKind.CPF,
    CNPJ_LENGTH: MaskKind.CNPJ,
}
