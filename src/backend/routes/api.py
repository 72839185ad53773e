from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, abort, jsonify, request
from pydantic import ValidationError

from src.backend.formulas import INPUT_MASK, Formula, get_formula, list_formulas

api_bp = Blueprint("api", __name__)


def _lookup(name: str) -> Formula:
    try:
        return get_formula(name)
    except KeyError:
        abort(404, description=f"Fórmula '{name}' não encontrada.")


def _json_body() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        abort(400, description="Corpo da requisição deve ser um objeto JSON.")
    return payload


def _execute(formula: Formula, payload: Dict[str, Any]):
    try:
        result = formula.execute(payload)
    except ValidationError as exc:
        fields = ", ".join(str(error["loc"][0]) for error in exc.errors() if error["loc"])
        abort(400, description=f"Argumentos inválidos para {formula.name}: {fields}")
    return jsonify({"result": result})


@api_bp.get("/health")
def health_check():
    return jsonify({"status": "ok"})


@api_bp.get("/formulas")
def formulas_index():
    return jsonify([formula.describe() for formula in list_formulas()])


@api_bp.get("/formulas/<name>")
def formula_detail(name: str):
    return jsonify(_lookup(name).describe())


@api_bp.post("/formulas/<name>")
def formula_execute(name: str):
    formula = _lookup(name)
    return _execute(formula, _json_body())


@api_bp.post("/mask")
def mask():
    return _execute(INPUT_MASK, _json_body())
