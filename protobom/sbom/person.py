"""People, organisations and external references attached to nodes."""

from __future__ import annotations

from dataclasses import dataclass, field

from protobom.sbom.enums import ExternalReferenceType

SPDX_ORGANIZATION = "Organization"
SPDX_PERSON = "Person"


@dataclass
class Person:
    """A person or organisation acting as supplier, originator or author."""

    name: str = ""
    is_org: bool = False
    email: str = ""
    url: str = ""
    phone: str = ""
    contacts: list[Person] | None = None

    def to_spdx2_client_string(self) -> str:
        """Return the actor string used by SPDX 2 tooling."""
        if self.email:
            return f"{self.name} ({self.email})"
        return self.name

    def to_spdx2_client_org(self) -> str:
        """Return the SPDX 2 actor kind: organisation or person."""
        return SPDX_ORGANIZATION if self.is_org else SPDX_PERSON

    def flat_string(self) -> str:
        """Return a deterministic string of the person's data for comparison."""
        parts = [f"n({self.name})o({str(self.is_org).lower()})"]
        if self.email:
            parts.append(f"email({self.email})")
        if self.url:
            parts.append(f"url({self.url})")
        if self.phone:
            parts.append(f"p({self.phone})")
        if self.contacts is not None:
            parts.append("c(" + "".join(c.flat_string() for c in self.contacts) + ")")
        return "".join(parts)

    def copy(self) -> Person:
        """Return a duplicate of the person, copying contacts recursively."""
        return Person(
            name=self.name,
            is_org=self.is_org,
            email=self.email,
            url=self.url,
            phone=self.phone,
            contacts=[contact.copy() for contact in self.contacts or []],
        )


@dataclass
class ExternalReference:
    """A link from a node to an external resource."""

    url: str = ""
    type: ExternalReferenceType = ExternalReferenceType.UNKNOWN
    comment: str = ""
    authority: str = ""
    hashes: dict[int, str] = field(default_factory=dict)

    def flat_string(self) -> str:
        """Return a deterministic string of the reference for indexing."""
        result = f"(t){int(self.type)}"
        if self.url:
            result += f"(u){self.url}"
        if self.comment:
            result += f"(c){self.comment}"
        if self.authority:
            result += f"(a){self.authority}"
        return result

    def copy(self) -> ExternalReference:
        """Return an exact duplicate of the external reference."""
        return ExternalReference(
            url=self.url,
            type=self.type,
            comment=self.comment,
            authority=self.authority,
            hashes=dict(self.hashes),
        )