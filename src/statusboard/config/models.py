"""Pydantic models for Statusboard configuration."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

_HOSTNAME_LABEL = re.compile(r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$")


def normalize_subdomain(value: str) -> str:
    """Reduce ``acme``, ``ACME`` or ``https://acme.pagerduty.com/`` to ``acme``.

    Raises ValueError when what remains is not a single hostname label.
    An empty value stays empty.
    """
    value = value.strip().lower()
    value = value.removeprefix("https://").removeprefix("http://").rstrip("/")
    value = value.removesuffix(".pagerduty.com")
    if value and not _HOSTNAME_LABEL.match(value):
        raise ValueError(f"'{value}' is not a valid hostname label")
    return value


class PagerDutyConfig(BaseModel):
    """The PagerDuty account service links point at."""

    subdomain: str = ""

    @field_validator("subdomain")
    @classmethod
    def _check_subdomain(cls, value: str) -> str:
        return normalize_subdomain(value)


class StatusboardIdentity(BaseModel):
    name: str = "Statusboard"
    version: str = "0.1.0"


class AuthConfig(BaseModel):
    api_key: str = ""  # empty = auth disabled


class StatusboardConfig(BaseModel):
    """Root configuration model for .statusboard.yaml."""

    statusboard: StatusboardIdentity = Field(default_factory=StatusboardIdentity)
    pagerduty: PagerDutyConfig = Field(default_factory=PagerDutyConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
