from protobom.sbom.enums import ExternalReferenceType, HashAlgorithm
from protobom.sbom.person import ExternalReference, Person


def test_person_flat_string_format():
    person = Person(
        name="ACME, Inc",
        is_org=True,
        email="acme@example.com",
        url="http://acme-fixtures.com",
    )
    assert person.flat_string() == (
        "n(ACME, Inc)o(true)email(acme@example.com)url(http://acme-fixtures.com)"
    )


def test_person_flat_string_without_contacts_has_no_contact_section():
    person = Person(name="Jane Doe", email="jane@example.com")
    assert "c(" not in person.flat_string()


def test_person_flat_string_includes_contacts():
    contact = Person(name="Inky", email="inky@example.com")
    base = Person(name="Corp", is_org=True)
    with_contacts = Person(name="Corp", is_org=True, contacts=[contact])
    assert with_contacts.flat_string() == base.flat_string() + "c(" + contact.flat_string() + ")"


def test_person_flat_string_empty_contacts():
    base = Person(name="Corp")
    empty = Person(name="Corp", contacts=[])
    assert empty.flat_string() == base.flat_string() + "c()"


def test_person_flat_string_differs_on_org_flag():
    assert Person(name="X", is_org=True).flat_string() != Person(name="X").flat_string()


def test_client_string_with_email():
    person = Person(name="Jane Doe", email="jane@example.com")
    result = person.to_spdx2_client_string()
    assert result.startswith("Jane Doe")
    assert result.endswith("(jane@example.com)")


def test_client_string_without_email():
    assert Person(name="Jane Doe").to_spdx2_client_string() == "Jane Doe"


def test_client_org():
    assert Person(name="Corp", is_org=True).to_spdx2_client_org() == "Organization"
    assert Person(name="Jane").to_spdx2_client_org() == "Person"


def test_person_copy_does_not_touch_original_contacts():
    original = Person(name="Corp", contacts=[Person(name="Inky")])
    original.copy()
    assert len(original.contacts) == 1
    assert original.contacts[0].contacts is None


def test_external_reference_flat_string():
    ref = ExternalReference(
        url="http://github.com/external",
        type=ExternalReferenceType.VCS,
        comment="GitHub Link",
    )
    assert ref.flat_string() == "(t)56(u)http://github.com/external(c)GitHub Link"


def test_external_reference_flat_string_ignores_hashes():
    plain = ExternalReference(url="https://example.com/", type=ExternalReferenceType.VCS)
    hashed = ExternalReference(
        url="https://example.com/",
        type=ExternalReferenceType.VCS,
        hashes={int(HashAlgorithm.SHA1): "abc"},
    )
    assert plain.flat_string() == hashed.flat_string()


def test_external_reference_authority_changes_flat_string():
    plain = ExternalReference(url="https://example.com/")
    with_authority = ExternalReference(url="https://example.com/", authority="example")
    assert with_authority.flat_string().startswith(plain.flat_string())
    assert with_authority.flat_string() != plain.flat_string()


def test_external_reference_copy():
    original = ExternalReference(
        url="https://example.com/",
        type=ExternalReferenceType.WEBSITE,
        comment="site",
        authority="example",
        hashes={int(HashAlgorithm.SHA256): "abc"},
    )
    copied = original.copy()
    assert copied == original
    copied.hashes[int(HashAlgorithm.SHA256)] = "changed"
    assert original.hashes[int(HashAlgorithm.SHA256)] == "abc"