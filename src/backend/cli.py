"""Command-line interface for applying InputMask outside the HTTP API."""

from __future__ import annotations

import argparse
import json
from typing import Optional

from src.backend.formulas import INPUT_MASK, get_formula, list_formulas
from src.masks.kinds import MaskKind


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Aplica máscaras de CPF, CNPJ, número, monetário ou regex")
    subparsers = parser.add_subparsers(dest="command", required=True)

    apply_parser = subparsers.add_parser("apply", help="Aplica uma máscara a um valor")
    apply_parser.add_argument(
        "tipo",
        help="Tipo de máscara ({})".format(
            ", ".join(kind.value for kind in MaskKind if kind is not MaskKind.OTHER),
        ),
    )
    apply_parser.add_argument("campo", help="Valor a ser formatado")
    apply_parser.add_argument(
        "--formato",
        help="Formato customizado (ex: '9.999,99', 'R$ 9.999,99') ou expressão regular",
    )

    formulas_parser = subparsers.add_parser("formulas", help="Lista as fórmulas registradas")
    formulas_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Imprime JSON formatado",
    )

    examples_parser = subparsers.add_parser("examples", help="Executa os exemplos documentados")
    examples_parser.add_argument(
        "--formula",
        default=INPUT_MASK.name,
        help=f"Fórmula a verificar (padrão: {INPUT_MASK.name})",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "apply":
        payload = {"tipo": args.tipo, "campo": args.campo}
        if args.formato is not None:
            payload["formato"] = args.formato
        print(INPUT_MASK.execute(payload))
        return 0

    if args.command == "formulas":
        descriptions = [formula.describe() for formula in list_formulas()]
        print(json.dumps(descriptions, indent=2 if args.pretty else None, ensure_ascii=False))
        return 0

    if args.command == "examples":
        try:
            formula = get_formula(args.formula)
        except KeyError as exc:
            print(exc.args[0])
            return 1
        failures = 0
        for item in formula.run_examples():
            status = "ok" if item["ok"] else "FALHOU"
            print(f"[{status}] {formula.name}{tuple(item['args'])} -> {item['actual']!r}")
            if not item["ok"]:
                failures += 1
                print(f"       esperado: {item['expected']!r}")
        return 1 if failures else 0

    parser.error("Comando inválido")
    return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
