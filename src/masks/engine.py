"""InputMask engine: applies document, numeric, monetary and regex masks."""

from __future__ import annotations

import logging
import re
from typing import Optional

from src.masks.kinds import AUTO_DOCUMENT_KINDS, CNPJ_LENGTH, CPF_LENGTH, MaskKind
from src.masks.templates import (
    apply_monetary_template,
    apply_template,
    is_monetary_template,
    is_numeric_template,
    only_digits,
)

logger = logging.getLogger(__name__)


def format_cpf(digits: str) -> Optional[str]:
    if len(digits) != CPF_LENGTH:
        return None
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


def format_cnpj(digits: str) -> Optional[str]:
    if len(digits) != CNPJ_LENGTH:
        return None
    return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:]}"


def _anchor_end_of_input(source: str) -> str:
    """Rewrite unescaped ``$`` outside character classes as ``\\Z``.

    Python's ``$`` also matches before a trailing newline; validators must
    only accept at the true end of the value.
    """
    result = []
    in_class = False
    index = 0
    while index < len(source):
        char = source[index]
        if char == "\\":
            result.append(source[index : index + 2])
            index += 2
            continue
        if in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
        elif char == "$":
            char = r"\Z"
        result.append(char)
        index += 1
    return "".join(result)


def match_regex(campo: str, formato: Optional[str], max_length: Optional[int] = None) -> str:
    """Gate ``campo`` through a caller-supplied regular expression.

    A pattern that does not compile (or exceeds ``max_length``) lets the
    value through unchanged; a valid pattern that does not match yields ``""``.
    """
    source = formato or ""
    if max_length is not None and len(source) > max_length:
        logger.warning(
            "Regex com %s caracteres excede o limite de %s; valor mantido",
            len(source),
            max_length,
        )
        return campo
    try:
        compiled = re.compile(_anchor_end_of_input(source), re.ASCII)
    except (re.error, RecursionError, OverflowError) as exc:
        logger.debug("Regex inválida %r: %s", source, exc)
        return campo
    return campo if compiled.search(campo) else ""


def resolve_kind(tipo: Optional[str], digits: str) -> MaskKind:
    kind = MaskKind.parse(tipo)
    if kind is MaskKind.AUTO:
        return AUTO_DOCUMENT_KINDS.get(len(digits), MaskKind.AUTO)
    return kind


def apply_mask(
    tipo: Optional[str],
    campo: Optional[str],
    formato: Optional[str] = None,
    *,
    regex_max_length: Optional[int] = None,
) -> str:
    """Apply the mask selected by ``tipo`` to ``campo``.

    Never raises. Whenever the selected mask cannot be applied (wrong digit
    count, missing or invalid ``formato``, unknown ``tipo``) the original
    ``campo`` is returned.

    >>> apply_mask("cpf", "12345678901")
    '123.456.789-01'
    >>> apply_mask("monetario", "123456", "R$ 9.999,99")
    'R$ 1.234,56'
    """
    campo = "" if campo is None else str(campo)
    if formato is not None:
        formato = str(formato)
    digits = only_digits(campo)
    kind = resolve_kind(tipo, digits)

    if kind is MaskKind.REGEX:
        return match_regex(campo, formato, regex_max_length)

    if kind is MaskKind.CPF:
        return _or_original(format_cpf(digits), campo, kind, digits)

    if kind is MaskKind.CNPJ:
        return _or_original(format_cnpj(digits), campo, kind, digits)

    if kind is MaskKind.NUMERO and formato and is_numeric_template(formato):
        return apply_template(formato, digits)

    if kind is MaskKind.MONETARIO and formato and is_monetary_template(formato):
        return apply_monetary_template(formato, digits)

    logger.debug("Máscara %r não aplicada (%s dígitos, formato=%r)", tipo, len(digits), formato)
    return campo


def _or_original(formatted: Optional[str], campo: str, kind: MaskKind, digits: str) -> str:
    if formatted is None:
        logger.debug("Quantidade de dígitos inválida para %s: %s", kind.value, len(digits))
        return campo
    return formatted
