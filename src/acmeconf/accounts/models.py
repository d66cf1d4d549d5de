"""
Account data models.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from acmeconf.keys.codec import SigningKey

# Account file keys, in both the snake_case and the Go acme client spelling
KNOWN_KEYS = frozenset({
    "uri", "URI",
    "contact", "Contact",
    "agreed_terms", "AgreedTerms",
    "current_terms", "CurrentTerms",
    "authz", "Authz",
    "authorizations", "Authorizations",
    "certificates", "Certificates",
    "ca",
})


class AccountRecord(BaseModel):
    """
    Persisted ACME account metadata.

    The signing key is stored separately and never serialized here.
    Field order is the on-disk order. Files written by the Go acme client
    (CamelCase keys such as "URI" and "AgreedTerms") are read as well.
    """

    model_config = ConfigDict(extra="ignore", validate_assignment=True, populate_by_name=True)

    uri: str = Field(
        default="",
        validation_alias=AliasChoices("uri", "URI"),
        description="Account registration URI, empty until registered",
    )
    contact: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("contact", "Contact"),
        description="Contact URIs, e.g. mailto: links",
    )
    agreed_terms: str = Field(
        default="",
        validation_alias=AliasChoices("agreed_terms", "AgreedTerms"),
        description="Terms of service version agreed to",
    )
    current_terms: str = Field(
        default="",
        validation_alias=AliasChoices("current_terms", "CurrentTerms"),
        description="Terms of service version the CA currently serves",
    )
    authz: str = Field(
        default="",
        validation_alias=AliasChoices("authz", "Authz"),
        description="CA URL for starting a new authorization",
    )
    authorizations: str = Field(
        default="",
        validation_alias=AliasChoices("authorizations", "Authorizations"),
        description="CA collection URL of account authorizations",
    )
    certificates: str = Field(
        default="",
        validation_alias=AliasChoices("certificates", "Certificates"),
        description="CA collection URL of issued certificates",
    )
    ca: str = Field(default="", description="CA directory (discovery) URL")

    @model_validator(mode="before")
    @classmethod
    def _known_fields(cls, data):
        # A non-empty object sharing no key with an account is some other file
        if isinstance(data, dict) and data and not KNOWN_KEYS.intersection(data):
            raise ValueError(f"no account fields in {sorted(data)}")
        return data

    @field_validator("contact", mode="before")
    @classmethod
    def _null_contact(cls, value):
        # Older files store a missing contact list as null
        return [] if value is None else value

    @property
    def terms_accepted(self) -> bool:
        """Whether the current terms of service have been agreed to."""
        return bool(self.agreed_terms) and self.agreed_terms == self.current_terms


@dataclass
class LocalAccount:
    """An account record together with its signing key, if one could be loaded."""

    record: AccountRecord
    key_path: Path
    key: Optional[SigningKey] = None
    # Set when a key file exists but could not be loaded
    key_error: Optional[Exception] = None

    @property
    def has_key(self) -> bool:
        return self.key is not None


__all__ = ["AccountRecord", "LocalAccount"]
