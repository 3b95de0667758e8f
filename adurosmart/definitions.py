"""Device definitions and their builder."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
import inspect
import logging
import pathlib
import typing
from typing import TYPE_CHECKING

import attrs

from adurosmart.codec import AttributeCodec
from adurosmart.config import (
    CONF_MANUFACTURER_CODE,
    CONF_PRIME_ATTRIBUTES,
    CONFIG_SCHEMA,
)
from adurosmart.const import (
    DEFAULT_ENDPOINT_ID,
    MSG_ATTRIBUTE_REPORT,
    MSG_READ_RESPONSE,
    VENDOR,
)
from adurosmart.exposes import Expose
from adurosmart.registry import DeviceRegistry

if TYPE_CHECKING:
    from adurosmart.reporting import ConfigureStep
    from adurosmart.typing import AttributeEntity, ConfigType, DeviceType

_LOGGER = logging.getLogger(__name__)

_DEVICE_REGISTRY = DeviceRegistry()

DECODED_MESSAGE_TYPES = (MSG_ATTRIBUTE_REPORT, MSG_READ_RESPONSE)


def _to_fingerprints(
    value: typing.Iterable[tuple[str, str]],
) -> tuple[tuple[str, str], ...]:
    return tuple((manufacturer, model) for manufacturer, model in value)


@attrs.define(frozen=True, kw_only=True, repr=True)
class DeviceDefinition:
    """Everything the host runtime needs to drive one device model."""

    model: str = attrs.field(validator=attrs.validators.instance_of(str))
    vendor: str = attrs.field(default=VENDOR)
    description: str = attrs.field(default="")
    zigbee_models: tuple[str, ...] = attrs.field(factory=tuple, converter=tuple)
    fingerprints: tuple[tuple[str, str], ...] = attrs.field(
        factory=tuple, converter=_to_fingerprints
    )
    codecs: tuple[AttributeCodec, ...] = attrs.field(factory=tuple, converter=tuple)
    exposes: tuple[Expose, ...] = attrs.field(factory=tuple, converter=tuple)
    from_zigbee: tuple[str, ...] = attrs.field(factory=tuple, converter=tuple)
    to_zigbee: tuple[str, ...] = attrs.field(factory=tuple, converter=tuple)
    configure_steps: tuple[ConfigureStep, ...] = attrs.field(
        factory=tuple, converter=tuple, eq=False
    )
    default_endpoint: int = attrs.field(default=DEFAULT_ENDPOINT_ID)
    definition_file: pathlib.Path | None = attrs.field(default=None, eq=False)
    definition_file_line: int | None = attrs.field(default=None, eq=False)

    def __attrs_post_init__(self) -> None:
        if not self.zigbee_models and not self.fingerprints:
            raise ValueError(
                f"{self.model}: at least one model id or fingerprint is required"
            )

    @property
    def all_exposes(self) -> tuple[Expose, ...]:
        """Static exposes followed by those of the attribute codecs."""
        return self.exposes + tuple(codec.expose for codec in self.codecs)

    @property
    def settable_keys(self) -> tuple[str, ...]:
        return tuple(codec.exposed_key for codec in self.codecs)

    def get_codec(self, key: str) -> AttributeCodec:
        for codec in self.codecs:
            if codec.exposed_key == key:
                return codec

        raise KeyError(f"{self.model} has no attribute {key!r}")

    def decode(
        self,
        cluster_id: int,
        data: Mapping[int, typing.Any],
        message_type: str = MSG_ATTRIBUTE_REPORT,
    ) -> dict[str, typing.Any]:
        """Decode every codec attribute carried by one message."""
        if message_type not in DECODED_MESSAGE_TYPES:
            return {}

        state: dict[str, typing.Any] = {}

        for codec in self.codecs:
            if codec.cluster_id != cluster_id:
                continue

            decoded = codec.decode(data)
            if decoded is not None:
                state.update(decoded)

        return state

    async def convert_set(
        self,
        entity: AttributeEntity,
        key: str,
        value: typing.Any,
        config: ConfigType | None = None,
    ) -> dict[str, typing.Any]:
        """Validate a value against its capability and write it."""
        config = CONFIG_SCHEMA(config or {})
        codec = self.get_codec(key)

        value = codec.expose.validate(value)
        return await codec.convert_set(
            entity, value, manufacturer=config[CONF_MANUFACTURER_CODE]
        )

    async def convert_get(
        self,
        entity: AttributeEntity,
        key: str,
        config: ConfigType | None = None,
    ) -> None:
        config = CONFIG_SCHEMA(config or {})
        await self.get_codec(key).convert_get(
            entity, manufacturer=config[CONF_MANUFACTURER_CODE]
        )

    async def configure(
        self,
        device: DeviceType,
        coordinator_endpoint: typing.Any,
        config: ConfigType | None = None,
    ) -> dict[str, bool]:
        """Configure a freshly joined device.

        The static steps run in order and their failures propagate. Priming
        reads then run concurrently; each one only logs its own failure.
        Returns whether each codec attribute was primed.
        """
        config = CONFIG_SCHEMA(config or {})

        for step in self.configure_steps:
            await step(device, coordinator_endpoint)

        if not config[CONF_PRIME_ATTRIBUTES] or not self.codecs:
            return {}

        results = await asyncio.gather(
            *(
                codec.prime(device, manufacturer=config[CONF_MANUFACTURER_CODE])
                for codec in self.codecs
            )
        )

        primed = dict(zip(self.settable_keys, results))
        _LOGGER.debug(
            "Primed %d/%d attributes of %s", sum(results), len(results), self.model
        )
        return primed


class DefinitionBuilder:
    """Fluent builder for a device definition."""

    def __init__(
        self,
        model: str,
        vendor: str = VENDOR,
        description: str = "",
        registry: DeviceRegistry = _DEVICE_REGISTRY,
    ) -> None:
        """Initialize the definition builder."""
        self.registry: DeviceRegistry = registry
        self.model: str = model
        self.vendor: str = vendor
        self.description_text: str = description
        self.zigbee_models: list[str] = []
        self.fingerprints: list[tuple[str, str]] = []
        self.codecs_list: list[AttributeCodec] = []
        self.exposes_list: list[Expose] = []
        self.from_zigbee_converters: list[str] = []
        self.to_zigbee_converters: list[str] = []
        self.configure_steps: list[ConfigureStep] = []
        self.default_endpoint: int = DEFAULT_ENDPOINT_ID

        stack: list[inspect.FrameInfo] = inspect.stack()
        caller: inspect.FrameInfo = stack[1]
        self.definition_file = pathlib.Path(caller.filename)
        self.definition_file_line = caller.lineno

    def zigbee_model(self, *models: str) -> DefinitionBuilder:
        """Match devices reporting any of these model ids and returns self."""
        self.zigbee_models.extend(models)
        return self

    def fingerprint(self, manufacturer: str, model: str) -> DefinitionBuilder:
        """Match devices reporting exactly this manufacturer and model."""
        self.fingerprints.append((manufacturer, model))
        return self

    def description(self, description: str) -> DefinitionBuilder:
        self.description_text = description
        return self

    def from_zigbee(self, *converters: str) -> DefinitionBuilder:
        """Add host side converters for incoming messages and returns self."""
        self.from_zigbee_converters.extend(converters)
        return self

    def to_zigbee(self, *converters: str) -> DefinitionBuilder:
        """Add host side converters for outgoing commands and returns self."""
        self.to_zigbee_converters.extend(converters)
        return self

    def exposes(self, *exposes: Expose) -> DefinitionBuilder:
        self.exposes_list.extend(exposes)
        return self

    def codecs(self, *codecs: AttributeCodec) -> DefinitionBuilder:
        keys = {codec.exposed_key for codec in self.codecs_list}

        for codec in codecs:
            if codec.exposed_key in keys:
                raise ValueError(f"{codec.exposed_key!r} is defined more than once")
            keys.add(codec.exposed_key)

        self.codecs_list.extend(codecs)
        return self

    def configure(self, *steps: ConfigureStep) -> DefinitionBuilder:
        """Add configure steps, run in order at pairing time, and returns self."""
        self.configure_steps.extend(steps)
        return self

    def endpoint(self, default_endpoint: int) -> DefinitionBuilder:
        self.default_endpoint = default_endpoint
        return self

    def build(self) -> DeviceDefinition:
        return DeviceDefinition(
            model=self.model,
            vendor=self.vendor,
            description=self.description_text,
            zigbee_models=tuple(self.zigbee_models),
            fingerprints=tuple(self.fingerprints),
            codecs=tuple(self.codecs_list),
            exposes=tuple(self.exposes_list),
            from_zigbee=tuple(self.from_zigbee_converters),
            to_zigbee=tuple(self.to_zigbee_converters),
            configure_steps=tuple(self.configure_steps),
            default_endpoint=self.default_endpoint,
            definition_file=self.definition_file,
            definition_file_line=self.definition_file_line,
        )

    def add_to_registry(self) -> DeviceDefinition:
        """Build the definition and add it to the registry."""
        definition = self.build()
        self.registry.add(definition)
        return definition


def get_definition(
    model: str | None,
    manufacturer: str | None = None,
    registry: DeviceRegistry = _DEVICE_REGISTRY,
) -> DeviceDefinition | None:
    """Look up a definition in the default registry."""
    return registry.get_definition(model, manufacturer)
