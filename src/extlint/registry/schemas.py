"""Pydantic models for the connector registry and the manifest."""

from pydantic import BaseModel, ConfigDict


class ConnectorEntry(BaseModel):
    """One element of ``connectors.json``.

    Only ``js`` is consulted; site labels, URL matches and the rest
    are kept but ignored.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    js: str


class Manifest(BaseModel):
    """The subset of ``manifest.json`` the unused-file check reads."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    web_accessible_resources: tuple[str, ...] | None = None
