"""Typing helpers for the host runtime capability interface."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

ConfigType = dict[str, Any]

if TYPE_CHECKING:
    from adurosmart.zcl import foundation


class AttributeEntity(Protocol):
    """An endpoint of a device as seen by the catalogue.

    The host runtime implements this on top of its own transport. Each call is
    a single request; delivery, retries and timeouts belong to the host.
    """

    async def read(
        self,
        cluster_id: int,
        attributes: Sequence[int],
        *,
        manufacturer: int | None = None,
    ) -> tuple[dict[int, Any], dict[int, foundation.Status]]:
        """Read attributes, returning ``(success, failure)`` dicts."""

    async def write(
        self,
        cluster_id: int,
        records: Sequence[foundation.Attribute],
        *,
        manufacturer: int | None = None,
    ) -> Any:
        """Write attribute records."""

    async def bind(self, cluster_id: int, target: Any) -> Any:
        """Bind a cluster to the target (usually the coordinator endpoint)."""

    async def configure_reporting(
        self,
        cluster_id: int,
        attribute: int,
        min_interval: int,
        max_interval: int,
        reportable_change: int,
        *,
        manufacturer: int | None = None,
    ) -> Any:
        """Configure attribute reporting for a single attribute."""


class DeviceType(Protocol):
    manufacturer: str | None
    model: str | None

    def get_endpoint(self, endpoint_id: int) -> AttributeEntity:
        """Return the endpoint with the given id."""
