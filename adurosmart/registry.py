"""Device definition registry."""

from __future__ import annotations

from collections.abc import Iterator
import logging
from typing import TYPE_CHECKING

from adurosmart.exceptions import DuplicateDefinitionError

if TYPE_CHECKING:
    from adurosmart.definitions import DeviceDefinition
    from adurosmart.typing import DeviceType

_LOGGER = logging.getLogger(__name__)


class DeviceRegistry:
    """Looks up device definitions by model id or fingerprint."""

    def __init__(self) -> None:
        """Initialize the registry."""
        self._definitions: list[DeviceDefinition] = []
        self._by_model: dict[str, DeviceDefinition] = {}
        self._by_fingerprint: dict[tuple[str, str], DeviceDefinition] = {}

    def add(self, definition: DeviceDefinition) -> None:
        """Add a definition to the registry.

        Every model id and fingerprint may only be claimed once; a second claim
        is a defect in the catalogue and is rejected immediately.
        """
        for zigbee_model in definition.zigbee_models:
            if zigbee_model in self._by_model:
                raise DuplicateDefinitionError(
                    f"Model {zigbee_model!r} of {definition.model} is already"
                    f" registered by {self._by_model[zigbee_model].model}"
                )

        for fingerprint in definition.fingerprints:
            if fingerprint in self._by_fingerprint:
                raise DuplicateDefinitionError(
                    f"Fingerprint {fingerprint!r} of {definition.model} is already"
                    f" registered by {self._by_fingerprint[fingerprint].model}"
                )

        for zigbee_model in definition.zigbee_models:
            self._by_model[zigbee_model] = definition

        for fingerprint in definition.fingerprints:
            self._by_fingerprint[fingerprint] = definition

        self._definitions.append(definition)
        _LOGGER.debug("Registered %s %s", definition.vendor, definition.model)

    def remove(self, definition: DeviceDefinition) -> None:
        """Remove a definition from the registry"""
        self._definitions.remove(definition)

        for zigbee_model in definition.zigbee_models:
            self._by_model.pop(zigbee_model, None)

        for fingerprint in definition.fingerprints:
            self._by_fingerprint.pop(fingerprint, None)

    def get_definition(
        self, model: str | None, manufacturer: str | None = None
    ) -> DeviceDefinition | None:
        """Return the definition for a reported model, or ``None``."""
        if model is None:
            return None

        definition = self._by_fingerprint.get((manufacturer, model))
        if definition is None:
            definition = self._by_model.get(model)

        if definition is None:
            _LOGGER.debug("No definition for %r (%r)", model, manufacturer)

        return definition

    def get_device_definition(self, device: DeviceType) -> DeviceDefinition | None:
        """Return the definition matching a device, or ``None``."""
        return self.get_definition(device.model, device.manufacturer)

    def __contains__(self, definition: DeviceDefinition) -> bool:
        return definition in self._definitions

    def __iter__(self) -> Iterator[DeviceDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)
