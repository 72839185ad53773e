"""Registry of host-callable formulas and their documentation metadata."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel

from src.backend import metrics
from src.backend.schemas import InputMaskRequest
from src.common.settings import get_settings
from src.masks import MaskKind, apply_mask

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormulaParameter:
    name: str
    description: str
    optional: bool = False
    type: str = "string"


@dataclass(frozen=True)
class FormulaExample:
    args: Tuple[Optional[str], ...]
    expected: str


@dataclass
class Formula:
    """A named engine entry point plus the metadata a host needs to expose it."""

    name: str
    description: str
    parameters: List[FormulaParameter]
    schema: Type[BaseModel]
    handler: Callable[[Any], str]
    result_type: str = "string"
    examples: List[FormulaExample] = field(default_factory=list)

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "resultType": self.result_type,
            "parameters": [
                {
                    "name": parameter.name,
                    "type": parameter.type,
                    "description": parameter.description,
                    "optional": parameter.optional,
                }
                for parameter in self.parameters
            ],
            "examples": [
                {"args": list(example.args), "result": example.expected}
                for example in self.examples
            ],
        }

    def bind(self, positional: Tuple[Optional[str], ...]) -> Dict[str, Any]:
        """Map positional arguments to parameter names, dropping absent optionals."""
        if len(positional) > len(self.parameters):
            raise ValueError(
                f"{self.name} aceita no máximo {len(self.parameters)} argumentos",
            )
        return {
            parameter.name: value
            for parameter, value in zip(self.parameters, positional)
            if value is not None or not parameter.optional
        }

    def execute(self, args: Mapping[str, Any]) -> str:
        """Validate ``args`` against the formula schema and run the handler.

        Raises ``pydantic.ValidationError`` (a ``ValueError``) for missing,
        unknown or non-string arguments.
        """
        try:
            request = self.schema.model_validate(dict(args))
        except ValueError:
            metrics.formula_errors.labels(formula=self.name).inc()
            raise
        return self.handler(request)

    def run_examples(self) -> List[Dict[str, Any]]:
        report = []
        for example in self.examples:
            actual = self.execute(self.bind(example.args))
            report.append(
                {
                    "args": list(example.args),
                    "expected": example.expected,
                    "actual": actual,
                    "ok": actual == example.expected,
                },
            )
        return report


def _outcome(campo: str, result: str) -> str:
    if result == campo:
        return "unchanged"
    if not result:
        return "rejected"
    return "formatted"


def _input_mask(request: InputMaskRequest) -> str:
    settings = get_settings()
    result = apply_mask(
        request.tipo,
        request.campo,
        request.formato,
        regex_max_length=settings.regex_max_length,
    )
    kind = MaskKind.parse(request.tipo).value
    outcome = _outcome(request.campo, result)
    metrics.mask_applications.labels(kind=kind, outcome=outcome).inc()
    logger.debug("InputMask %s -> %s (%s)", request.tipo, outcome, kind)
    return result


INPUT_MASK = Formula(
    name="InputMask",
    description=(
        "Aplica máscara de CNPJ, CPF, número, monetário, formato customizado ou regex, "
        "conforme o tipo e formato informado."
    ),
    parameters=[
        FormulaParameter(
            name="tipo",
            description="Tipo de máscara: 'cpf', 'cnpj', 'numero', 'monetario', 'regex' ou 'auto'.",
        ),
        FormulaParameter(
            name="campo",
            description="Valor a ser formatado (apenas números ou com pontuação).",
        ),
        FormulaParameter(
            name="formato",
            description=(
                "Formato customizado (ex: '9.999,99', '99/99/9999', 'R$ 9.999,99') "
                "ou expressão regular. Opcional."
            ),
            optional=True,
        ),
    ],
    schema=InputMaskRequest,
    handler=_input_mask,
    examples=[
        FormulaExample(("cpf", "12345678901", None), "123.456.789-01"),
        FormulaExample(("cnpj", "12345678000199", None), "12.345.678/0001-99"),
        FormulaExample(("numero", "1234567", "9.999.999"), "1.234.567"),
        FormulaExample(("monetario", "123456", "R$ 9.999,99"), "R$ 1.234,56"),
        FormulaExample(("regex", "2023-ABC", r"^\d{4}-[A-Z]{3}$"), "2023-ABC"),
    ],
)

FORMULAS: Dict[str, Formula] = {INPUT_MASK.name: INPUT_MASK}


def list_formulas() -> List[Formula]:
    return list(FORMULAS.values())


def get_formula(name: str) -> Formula:
    try:
        return FORMULAS[name]
    except KeyError:
        raise KeyError(f"Fórmula desconhecida: {name}") from None
