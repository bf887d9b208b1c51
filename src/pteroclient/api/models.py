"""Pydantic models for Pterodactyl client API responses."""

from __future__ import annotations

import json
from enum import StrEnum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pteroclient.api.exceptions import PanelDecodeError

M = TypeVar("M", bound=BaseModel)


class _PanelModel(BaseModel):
    """Base model that ignores extra fields from the API."""
    model_config = ConfigDict(extra="ignore")


def _none_to_empty(v: str | None) -> str:
    """Coerce None to an empty string for attributes the panel may omit."""
    return v if v is not None else ""


def _none_to_list(v: list | None) -> list:
    return v if v is not None else []


class Attributes(_PanelModel):
    name: str = ""
    identifier: str = ""
    description: str = ""
    current_state: str = ""

    @field_validator("name", "identifier", "description", "current_state", mode="before")
    @classmethod
    def _coerce_strings(cls, v):
        return _none_to_empty(v)


class DataItem(_PanelModel):
    object: str = ""
    attributes: Attributes = Field(default_factory=Attributes)

    @field_validator("object", mode="before")
    @classmethod
    def _coerce_object(cls, v):
        return _none_to_empty(v)

    @field_validator("attributes", mode="before")
    @classmethod
    def _coerce_attributes(cls, v):
        return v if v is not None else {}


class Envelope(_PanelModel):
    """Listing wrapper: ``{"object": "list", "data": [...]}``."""
    object: str = ""
    data: list[DataItem] = Field(default_factory=list)

    @field_validator("object", mode="before")
    @classmethod
    def _coerce_object(cls, v):
        return _none_to_empty(v)

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_data(cls, v):
        return _none_to_list(v)


class Server(_PanelModel):
    """A managed server as handed to callers.

    The identifier is deliberately not carried; listings key by it instead.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = ""
    description: str = ""

    @classmethod
    def from_attributes(cls, attributes: Attributes) -> Server:
        return cls(name=attributes.name, description=attributes.description)


class PowerSignal(StrEnum):
    """Signals the panel understands. Any other string is still sent as-is."""
    START = "start"
    STOP = "stop"
    RESTART = "restart"
    KILL = "kill"


def decode_object(body: bytes) -> dict[str, Any]:
    """Decode a response body that must be a JSON object."""
    try:
        data = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise PanelDecodeError(f"response body is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise PanelDecodeError(
            f"expected a JSON object, got {type(data).__name__}"
        )
    return data


def parse_model(model: type[M], data: dict[str, Any]) -> M:
    """Validate ``data`` against ``model``, reporting failures as decode errors."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise PanelDecodeError(
            f"unexpected {model.__name__} shape: {e.error_count()} error(s)"
        ) from e
