"""Canonical Pydantic models shared across all sftypes modules.

The models fall into two groups:

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`RequestConfig`, :class:`CacheConfig`, :class:`GlobalConfig`,
    and :class:`Profile`.

**Describe models** -- parsed from sObject describe payloads and consumed by
the type generator:
    :class:`FieldDescription`, :class:`ChildRelationshipDescription`,
    :class:`ObjectDescription`, plus :class:`BatchConfig` which lists the
    objects of a batch run.

Describe models are immutable and populated by the camelCase keys the
describe API uses (``referenceTo``, ``childSObject``, ...). Keys the
generator does not need are ignored.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Configuration ---


class RequestConfig(BaseModel):
    """Default HTTP request settings applied to every describe call in a profile."""

    timeout: int = Field(default=30, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    max_retries: int = Field(default=3, description="Max retry attempts")


class CacheConfig(BaseModel):
    """Describe cache settings stored in :class:`GlobalConfig`."""

    enabled: bool = Field(default=True, description="Enable describe caching")
    ttl_seconds: int = Field(default=3600, description="Cache TTL in seconds")


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/sftypes/config.json``.

    Fields here have the lowest precedence and can be overridden by project
    config, environment variables, or CLI flags. See
    :func:`~sftypes.config.resolve_config` for the full precedence chain.
    """

    default_profile: Optional[str] = None
    auto_select_single_profile: bool = True
    output_dir: str = Field(
        default="./src/types", description="Default directory for generated files"
    )
    cache: CacheConfig = Field(default_factory=CacheConfig)


class Profile(BaseModel):
    """Per-org profile stored as JSON under the ``profiles/`` config directory.

    Each profile points at one Salesforce org and says where its access
    token comes from. Profiles are created with ``sftypes init``.

    Extra fields are preserved and accessible via ``model_extra``.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    instance_url: str = Field(description="Org instance URL, e.g. https://x.my.salesforce.com")
    api_version: str = Field(default="59.0", description="REST API version")
    token_source: str = Field(
        default="env:SF_ACCESS_TOKEN",
        description="Access token source: env:VAR, file:/path, prompt",
    )
    request: RequestConfig = Field(default_factory=RequestConfig)


# --- Describe models ---


class FieldDescription(BaseModel):
    """One entry of a describe payload's ``fields`` array.

    ``reference_targets`` is only meaningful when ``primitive_type`` is
    ``"reference"``; it lists the candidate target objects in the order the
    org reports them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    primitive_type: str = Field(alias="type")
    reference_targets: list[str] = Field(default_factory=list, alias="referenceTo")
    relationship_name: Optional[str] = Field(default=None, alias="relationshipName")

    @field_validator("reference_targets", mode="before")
    @classmethod
    def null_targets_to_list(cls, value: Any) -> Any:
        return [] if value is None else value


class ChildRelationshipDescription(BaseModel):
    """One entry of a describe payload's ``childRelationships`` array.

    An unnamed relationship is a many-to-many junction; its
    ``junction_reference_names`` name the properties it expands to.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    child_object_name: str = Field(alias="childSObject")
    relationship_name: Optional[str] = Field(default=None, alias="relationshipName")
    junction_reference_names: list[str] = Field(
        default_factory=list, alias="junctionReferenceTo"
    )

    @field_validator("junction_reference_names", mode="before")
    @classmethod
    def null_junctions_to_list(cls, value: Any) -> Any:
        return [] if value is None else value


class ObjectDescription(BaseModel):
    """Parsed describe result for a single sObject."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    object_name: str = Field(alias="name")
    fields: list[FieldDescription] = Field(default_factory=list)
    child_relationships: list[ChildRelationshipDescription] = Field(
        default_factory=list, alias="childRelationships"
    )

    @field_validator("fields", "child_relationships", mode="before")
    @classmethod
    def null_lists_to_list(cls, value: Any) -> Any:
        return [] if value is None else value


class BatchConfig(BaseModel):
    """Contents of a ``--config`` file: the ordered sObjects of a batch run.

    Example file::

        {"sobjects": ["Account", "Contact", "Opportunity"]}
    """

    sobjects: list[str] = Field(min_length=1)
