"""Pydantic models to validate formula arguments before calling the engine."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, StrictStr


class InputMaskRequest(BaseModel):
    tipo: StrictStr
    campo: StrictStr
    formato: Optional[StrictStr] = None

    model_config = {"extra": "forbid"}
