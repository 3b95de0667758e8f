from __future__ import annotations

import typing


class CatalogueException(Exception):
    """Base exception class"""


class InvalidValue(CatalogueException, ValueError):
    """A set request's value could not be resolved for an attribute"""

    def __init__(
        self,
        value: typing.Any,
        key: str,
        accepted: typing.Iterable[str] = (),
        reason: str | None = None,
    ) -> None:
        self.value = value
        self.key = key
        self.accepted = tuple(accepted)

        if reason is None:
            reason = f"Invalid value {value!r} for {key!r}"

            if self.accepted:
                reason += f", expected one of {list(self.accepted)} or an integer"

        super().__init__(reason)


class AttributeReadFailure(CatalogueException):
    """A priming or explicit attribute read did not complete"""

    def __init__(self, key: str, attribute_id: int, reason: str) -> None:
        super().__init__(
            f"Failed to read {key} attribute 0x{attribute_id:04X}: {reason}"
        )
        self.key = key
        self.attribute_id = attribute_id
        self.reason = reason


class DuplicateDefinitionError(CatalogueException):
    """Two definitions claim the same model identifier or fingerprint"""
