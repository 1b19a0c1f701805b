from typing import Optional
import re

from pydantic import BaseModel, Field, field_validator


_WHITESPACE_RE = re.compile(r"\s+")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F]")


def _clean_text(s: str) -> str:
    # Remove control chars, trim, collapse whitespace.
    s = _CONTROL_RE.sub("", s)
    s = s.strip()
    s = _WHITESPACE_RE.sub(" ", s)
    return s


class BalanceRequest(BaseModel):
    cation: str = Field(..., min_length=1, max_length=8, description="Cation symbol, e.g. 'Ca'")
    anion: str = Field(..., min_length=1, max_length=8, description="Anion symbol, e.g. 'Cl'")

    @field_validator("cation", "anion", mode="before")
    @classmethod
    def _clean_symbol(cls, v):
        if isinstance(v, str):
            return _clean_text(v)
        return v


class MolesRequest(BaseModel):
    substance: str = Field(
        ...,
        min_length=1,
        max_length=80,
        description="Substance formula ('H₂O') or display name",
    )
    # Sign and range checks belong to the engine (InvalidMass), not to parsing.
    mass_grams: float = Field(..., description="Mass in grams")

    @field_validator("substance", mode="before")
    @classmethod
    def _clean_substance(cls, v):
        if isinstance(v, str):
            return _clean_text(v)
        return v

    @field_validator("mass_grams", mode="before")
    @classmethod
    def _parse_mass(cls, v):
        # The lesson page posts raw input box text ("18", " 2.5 ").
        if isinstance(v, str):
            s = _clean_text(v)
            if not s:
                raise ValueError("mass is required")
            return s
        return v


class FormatParticlesRequest(BaseModel):
    n: float = Field(..., ge=0, allow_inf_nan=False, description="Particle count")


class EngineResponse(BaseModel):
    request_id: str
    ok: bool
    engine: str
    elapsed_ms: int
    result: dict = {}
    error: Optional[dict] = None
