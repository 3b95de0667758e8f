from __future__ import annotations

import enum
import typing

import attrs


def _hex_uint16_repr(v: int) -> str:
    return f"0x{v:04X}"


class Status(enum.IntEnum):
    SUCCESS = 0x00  # Operation was successful
    FAILURE = 0x01  # Operation was not successful
    NOT_AUTHORIZED = 0x7E  # Sender is not authorized for the command
    MALFORMED_COMMAND = 0x80  # Command has fields of the wrong length
    UNSUP_MANUF_GENERAL_COMMAND = 0x84  # Unknown manufacturer specific command
    INVALID_FIELD = 0x85  # A command field holds an invalid value
    UNSUPPORTED_ATTRIBUTE = 0x86  # Attribute does not exist on the device
    INVALID_VALUE = 0x87  # Out of range error, or set to a reserved value
    READ_ONLY = 0x88  # Attempt to write a read only attribute
    INVALID_DATA_TYPE = 0x8D  # Data type does not match the attribute's type
    WRITE_ONLY = 0x8F  # Attempt to read a write only attribute
    TIMEOUT = 0x94  # Exchange aborted due to excessive response time
    HARDWARE_FAILURE = 0xC0  # Operation failed due to a hardware failure
    SOFTWARE_FAILURE = 0xC1  # Operation failed due to a software failure
    UNSUPPORTED_CLUSTER = 0xC3  # The cluster is not supported


class DataTypeId(enum.IntEnum):
    unk = 0xFF
    nodata = 0x00
    data8 = 0x08
    data16 = 0x09
    bool_ = 0x10
    map8 = 0x18
    map16 = 0x19
    uint8 = 0x20
    uint16 = 0x21
    uint24 = 0x22
    uint32 = 0x23
    int8 = 0x28
    int16 = 0x29
    int32 = 0x2B
    enum8 = 0x30
    enum16 = 0x31
    octstr = 0x41
    string = 0x42


@attrs.define(frozen=True, repr=False)
class TypeValue:
    type: DataTypeId = attrs.field(converter=DataTypeId)
    value: typing.Any = attrs.field(default=None)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"type={self.type.name}, value={self.value!r}"
            f")"
        )


@attrs.define(frozen=True, repr=False)
class Attribute:
    attrid: int = attrs.field()
    value: TypeValue = attrs.field()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"attrid={_hex_uint16_repr(self.attrid)}, value={self.value!r}"
            f")"
        )
