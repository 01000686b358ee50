"""Snapshot schema definitions and serialization for host metadata."""

import json
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

# Core counting always resolves to a number; this is the value used when
# every counting strategy fails.
CPU_COUNT_FALLBACK = 0

U64_MAX = 2**64 - 1

EMPTY_DOCUMENT = "\n"


class _Snapshot(BaseModel):
    """Immutable value snapshot rendered with PascalCase keys."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_pascal,
        populate_by_name=True,
    )

    def to_ordered_dict(self) -> dict[str, Any]:
        """Return rendered keys in field declaration order, absent values kept."""
        data: dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if isinstance(value, _Snapshot):
                value = value.to_ordered_dict()
            data[field.alias or name] = value
        return data


class Distribution(_Snapshot):
    """Linux distribution identity, as described by os-release.

    See https://www.freedesktop.org/software/systemd/man/os-release.html.
    Every field is present only if the descriptor carried the matching key.
    """

    id: Optional[str] = Field(None, description="ID")
    id_like: Optional[str] = Field(None, description="ID_LIKE")
    name: Optional[str] = Field(None, description="NAME")
    pretty_name: Optional[str] = Field(None, description="PRETTY_NAME")
    version: Optional[str] = Field(None, description="VERSION")
    version_id: Optional[str] = Field(None, description="VERSION_ID")
    version_codename: Optional[str] = Field(None, description="VERSION_CODENAME")
    cpe_name: Optional[str] = Field(None, description="CPE_NAME")
    build_id: Optional[str] = Field(None, description="BUILD_ID")
    variant: Optional[str] = Field(None, description="VARIANT")
    variant_id: Optional[str] = Field(None, description="VARIANT_ID")

    @classmethod
    def from_os_release(cls, info: dict[str, Optional[str]]) -> "Distribution":
        """
        Build a Distribution from a parsed os-release mapping.

        Args:
            info: Mapping of upper-case os-release keys to values

        Returns:
            Distribution with one field per recognised key
        """
        return cls(**{name: info.get(name.upper()) for name in cls.model_fields})


class SystemInfo(_Snapshot):
    """Mostly-static metadata about the host.

    ``cpu_count`` and ``cpu_online_count`` are not optional: core counting
    always has a numeric fallback (``CPU_COUNT_FALLBACK``), whereas every other
    field is absent when its retrieval fails.
    """

    os_type: Optional[str] = Field(None, description="Operating system family")
    os_release: Optional[str] = Field(None, description="Operating system release")
    distribution: Optional[Distribution] = Field(
        None, description="Linux distribution (Linux only)"
    )
    memory_total: Optional[int] = Field(
        None, ge=0, le=U64_MAX, description="Total physical memory in KB"
    )
    swap_total: Optional[int] = Field(
        None, ge=0, le=U64_MAX, description="Total swap in KB"
    )
    hostname: Optional[str] = Field(None, description="Configured hostname")
    cpu_count: int = Field(
        CPU_COUNT_FALLBACK, ge=0, description="Logical CPU count"
    )
    cpu_online_count: int = Field(
        CPU_COUNT_FALLBACK, ge=0, description="Online logical CPU count"
    )
    cpu_speed: Optional[int] = Field(
        None, ge=0, le=U64_MAX, description="Nominal CPU clock speed in MHz"
    )

    def as_yaml(self) -> str:
        """
        Render the snapshot as a YAML key-value document.

        Keys follow field declaration order, one per line, and absent values
        are rendered as ``null``. The result never starts with a ``---`` separator and
        ends with exactly one newline. If the emitter fails, the empty
        document is returned instead of raising.

        Returns:
            YAML string representation
        """
        try:
            output = yaml.safe_dump(
                self.to_ordered_dict(),
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
                # Long values must not wrap onto continuation lines
                width=float("inf"),
            )
        except (yaml.YAMLError, ValueError, TypeError):
            return EMPTY_DOCUMENT
        # Remove top ---
        output = output.removeprefix("---\n")
        return output.rstrip("\n") + "\n"

    render = as_yaml

    def to_json(self, indent: int = 2) -> str:
        """
        Serialize the snapshot to a JSON string.

        Args:
            indent: JSON indentation level

        Returns:
            JSON string with the same keys and ordering as the YAML document
        """
        try:
            output = json.dumps(self.to_ordered_dict(), indent=indent)
        except (ValueError, TypeError):
            return "{}\n"
        return output + "\n"

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "SystemInfo":
        """
        Deserialize a snapshot from a rendered YAML document.

        Args:
            yaml_str: YAML string to parse

        Returns:
            SystemInfo instance
        """
        data = yaml.safe_load(yaml_str)
        return cls.model_validate(data)
