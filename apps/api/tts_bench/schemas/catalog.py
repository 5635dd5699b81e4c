"""Pydantic schemas describing the benchmark catalogue."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProviderRead(BaseModel):
    """Public display metadata for a provider."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    name: str
    tagline: str
    price: str
    latency: str
    streaming: str
    url: str
    accent: str
    enabled: bool
    logo: str | None = None
    logo_alt: str | None = Field(default=None, alias="logoAlt")
    logo_width: int | None = Field(default=None, alias="logoWidth")
    logo_height: int | None = Field(default=None, alias="logoHeight")


class PromptRead(BaseModel):
    """A scripted prompt."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    label: str
    text: str


class CatalogResponse(BaseModel):
    """Everything a client needs to render the arena."""

    providers: list[ProviderRead]
    prompts: list[PromptRead]


class MatchupSide(BaseModel):
    """One anonymised side of a matchup."""

    model_config = ConfigDict(populate_by_name=True)

    provider_id: str = Field(..., alias="providerId")
    audio_src: str = Field(..., alias="audioSrc")


class MatchupResponse(BaseModel):
    """Two distinct providers speaking the same prompt."""

    model_config = ConfigDict(populate_by_name=True)

    prompt_id: str = Field(..., alias="promptId")
    left: MatchupSide
    right: MatchupSide
