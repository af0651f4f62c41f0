"""Enumerations of the SBOM data model and their format mappings."""

from __future__ import annotations

from enum import IntEnum

SPDX_EXT_REF_TYPE_PURL = "purl"
SPDX_EXT_REF_TYPE_CPE22 = "cpe22Type"
SPDX_EXT_REF_TYPE_CPE23 = "cpe23Type"
SPDX_EXT_REF_TYPE_GITOID = "gitoid"

SPDX_CATEGORY_SECURITY = "SECURITY"
SPDX_CATEGORY_PACKAGE_MANAGER = "PACKAGE-MANAGER"
SPDX_CATEGORY_PERSISTENT_ID = "PERSISTENT-ID"
SPDX_CATEGORY_OTHER = "OTHER"


class HashAlgorithm(IntEnum):
    """Hash algorithms that may describe a node's contents."""

    UNKNOWN = 0
    MD5 = 1
    SHA1 = 2
    SHA256 = 3
    SHA384 = 4
    SHA512 = 5
    SHA3_256 = 6
    SHA3_384 = 7
    SHA3_512 = 8
    BLAKE2B_256 = 9
    BLAKE2B_384 = 10
    BLAKE2B_512 = 11
    BLAKE3 = 12
    MD2 = 13
    ADLER32 = 14
    MD4 = 15
    MD6 = 16
    SHA224 = 17

    def to_spdx(self) -> str:
        """Return the SPDX 2 checksum algorithm label, or an empty string."""
        return _HASH_TO_SPDX.get(self, "")

    def to_spdx3(self) -> str:
        """Return the SPDX 3 hash algorithm vocabulary entry, or an empty string."""
        return _HASH_TO_SPDX3.get(self, "")


_HASH_TO_SPDX: dict[HashAlgorithm, str] = {
    HashAlgorithm.ADLER32: "ADLER32",
    HashAlgorithm.MD4: "MD4",
    HashAlgorithm.MD5: "MD5",
    HashAlgorithm.MD6: "MD6",
    HashAlgorithm.SHA1: "SHA1",
    HashAlgorithm.SHA224: "SHA224",
    HashAlgorithm.SHA256: "SHA256",
    HashAlgorithm.SHA384: "SHA384",
    HashAlgorithm.SHA512: "SHA512",
    HashAlgorithm.SHA3_256: "SHA3-256",
    HashAlgorithm.SHA3_384: "SHA3-384",
    HashAlgorithm.SHA3_512: "SHA3-512",
    HashAlgorithm.BLAKE2B_256: "BLAKE2b-256",
    HashAlgorithm.BLAKE2B_384: "BLAKE2b-384",
    HashAlgorithm.BLAKE2B_512: "BLAKE2b-512",
    HashAlgorithm.BLAKE3: "BLAKE3",
}

_SPDX_TO_HASH: dict[str, HashAlgorithm] = {label: algo for algo, label in _HASH_TO_SPDX.items()}

_HASH_TO_SPDX3: dict[HashAlgorithm, str] = {
    HashAlgorithm.MD4: "md4",
    HashAlgorithm.MD5: "md5",
    HashAlgorithm.MD6: "md6",
    HashAlgorithm.SHA1: "sha1",
    HashAlgorithm.SHA224: "sha224",
    HashAlgorithm.SHA256: "sha256",
    HashAlgorithm.SHA384: "sha384",
    HashAlgorithm.SHA512: "sha512",
    HashAlgorithm.SHA3_256: "sha3_256",
    HashAlgorithm.SHA3_384: "sha3_384",
    HashAlgorithm.SHA3_512: "sha3_512",
    HashAlgorithm.BLAKE2B_256: "blake2b256",
    HashAlgorithm.BLAKE2B_384: "blake2b384",
    HashAlgorithm.BLAKE2B_512: "blake2b512",
    HashAlgorithm.BLAKE3: "blake3",
}

_CDX_TO_HASH: dict[str, HashAlgorithm] = {
    "MD5": HashAlgorithm.MD5,
    "SHA-1": HashAlgorithm.SHA1,
    "SHA-256": HashAlgorithm.SHA256,
    "SHA-384": HashAlgorithm.SHA384,
    "SHA-512": HashAlgorithm.SHA512,
    "SHA3-256": HashAlgorithm.SHA3_256,
    "SHA3-384": HashAlgorithm.SHA3_384,
    "SHA3-512": HashAlgorithm.SHA3_512,
    "BLAKE2b-256": HashAlgorithm.BLAKE2B_256,
    "BLAKE2b-384": HashAlgorithm.BLAKE2B_384,
    "BLAKE2b-512": HashAlgorithm.BLAKE2B_512,
    "BLAKE3": HashAlgorithm.BLAKE3,
}


def hash_algorithm_from_spdx(spdx_algo: str) -> HashAlgorithm:
    """Resolve an SPDX 2 checksum algorithm label to a hash algorithm."""
    return _SPDX_TO_HASH.get(spdx_algo, HashAlgorithm.UNKNOWN)


def hash_algorithm_from_cdx(cdx_algorithm: str) -> HashAlgorithm:
    """Resolve a CycloneDX hash algorithm label to a hash algorithm."""
    return _CDX_TO_HASH.get(cdx_algorithm, HashAlgorithm.UNKNOWN)


class SoftwareIdentifierType(IntEnum):
    """Kinds of software identifiers a node may carry."""

    UNKNOWN_IDENTIFIER_TYPE = 0
    PURL = 1
    CPE22 = 2
    CPE23 = 3
    GITOID = 4

    def to_spdx2_type(self) -> str:
        """Return the SPDX 2 external reference type, or an empty string."""
        return _IDENTIFIER_TO_SPDX2.get(self, "")

    def to_spdx2_category(self) -> str:
        """Return the SPDX 2 external reference category."""
        ref_type = self.to_spdx2_type()
        if ref_type in (SPDX_EXT_REF_TYPE_CPE22, SPDX_EXT_REF_TYPE_CPE23, "advisory", "fix", "url", "swid"):
            return SPDX_CATEGORY_SECURITY
        if ref_type in ("maven-central", "npm", "nuget", "bower", SPDX_EXT_REF_TYPE_PURL):
            return SPDX_CATEGORY_PACKAGE_MANAGER
        if ref_type in ("swh", SPDX_EXT_REF_TYPE_GITOID):
            return SPDX_CATEGORY_PERSISTENT_ID
        return SPDX_CATEGORY_OTHER


_IDENTIFIER_TO_SPDX2: dict[SoftwareIdentifierType, str] = {
    SoftwareIdentifierType.PURL: SPDX_EXT_REF_TYPE_PURL,
    SoftwareIdentifierType.CPE22: SPDX_EXT_REF_TYPE_CPE22,
    SoftwareIdentifierType.CPE23: SPDX_EXT_REF_TYPE_CPE23,
    SoftwareIdentifierType.GITOID: SPDX_EXT_REF_TYPE_GITOID,
}

_SPDX2_TO_IDENTIFIER: dict[str, SoftwareIdentifierType] = {
    label: ident for ident, label in _IDENTIFIER_TO_SPDX2.items()
}


def software_identifier_type_from_spdx_ext_ref_type(spdx_type: str) -> SoftwareIdentifierType:
    """Resolve an SPDX 2 external reference type to an identifier type."""
    return _SPDX2_TO_IDENTIFIER.get(spdx_type, SoftwareIdentifierType.UNKNOWN_IDENTIFIER_TYPE)


def software_identifier_type_from_string(query_string: str) -> SoftwareIdentifierType:
    """Resolve a free-form string into one of the built-in identifier types."""
    resolved = software_identifier_type_from_spdx_ext_ref_type(query_string)
    if resolved is not SoftwareIdentifierType.UNKNOWN_IDENTIFIER_TYPE:
        return resolved
    normalized = query_string.lower().strip()
    if normalized in ("cpe22", "cpe2.2"):
        return SoftwareIdentifierType.CPE22
    if normalized in ("cpe23", "cpe2.3"):
        return SoftwareIdentifierType.CPE23
    return SoftwareIdentifierType.UNKNOWN_IDENTIFIER_TYPE


class Purpose(IntEnum):
    """Primary purpose of the software a node describes."""

    UNKNOWN_PURPOSE = 0
    APPLICATION = 1
    ARCHIVE = 2
    BOM = 3
    CONFIGURATION = 4
    CONTAINER = 5
    DATA = 6
    DEVICE = 7
    DEVICE_DRIVER = 8
    DOCUMENTATION = 9
    EVIDENCE = 10
    EXECUTABLE = 11
    FILE = 12
    FIRMWARE = 13
    FRAMEWORK = 14
    INSTALL = 15
    LIBRARY = 16
    MACHINE_LEARNING_MODEL = 17
    MANIFEST = 18
    MODEL = 19
    MODULE = 20
    OPERATING_SYSTEM = 21
    OTHER = 22
    PATCH = 23
    PLATFORM = 24
    REQUIREMENT = 25
    SOURCE = 26
    SPECIFICATION = 27
    TEST = 28


class NodeType(IntEnum):
    """Whether a node describes a package or a file."""

    PACKAGE = 0
    FILE = 1


class ExternalReferenceType(IntEnum):
    """Kinds of external references attached to a node."""

    UNKNOWN = 0
    ATTESTATION = 1
    BINARY = 2
    BOM = 3
    BOWER = 4
    BUILD_META = 5
    BUILD_SYSTEM = 6
    CERTIFICATION_REPORT = 7
    CHAT = 8
    CODIFIED_INFRASTRUCTURE = 9
    COMPONENT_ANALYSIS_REPORT = 10
    CONFIGURATION = 11
    DISTRIBUTION_INTAKE = 12
    DOCUMENTATION = 13
    DOWNLOAD = 14
    DYNAMIC_ANALYSIS_REPORT = 15
    EOL_NOTICE = 16
    EVIDENCE = 17
    EXPORT_CONTROL_ASSESSMENT = 18
    FORMULATION = 19
    FUNDING = 20
    ISSUE_TRACKER = 21
    LICENSE = 22
    LOG = 23
    MAILING_LIST = 24
    MATURITY_REPORT = 25
    MAVEN_CENTRAL = 26
    METRICS = 27
    MODEL_CARD = 28
    NPM = 29
    NUGET = 30
    OTHER = 31
    POAM = 32
    PRIVACY_ASSESSMENT = 33
    PRODUCT_METADATA = 34
    PURCHASE_ORDER = 35
    QUALITY_ASSESSMENT_REPORT = 36
    QUALITY_METRICS = 37
    RELEASE_HISTORY = 38
    RELEASE_NOTES = 39
    RISK_ASSESSMENT = 40
    RUNTIME_ANALYSIS_REPORT = 41
    SECURE_SOFTWARE_ATTESTATION = 42
    SECURITY_ADVERSARY_MODEL = 43
    SECURITY_ADVISORY = 44
    SECURITY_CONTACT = 45
    SECURITY_FIX = 46
    SECURITY_OTHER = 47
    SECURITY_PENTEST_REPORT = 48
    SECURITY_POLICY = 49
    SECURITY_SWID = 50
    SECURITY_THREAT_MODEL = 51
    SOCIAL = 52
    SOURCE_ARTIFACT = 53
    STATIC_ANALYSIS_REPORT = 54
    SUPPORT = 55
    VCS = 56
    VULNERABILITY_ASSERTION = 57
    VULNERABILITY_DISCLOSURE_REPORT = 58
    VULNERABILITY_EXPLOITABILITY_ASSESSMENT = 59
    WEBSITE = 60