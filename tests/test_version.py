from almondkit import version


def test_engine_version_string():
    assert version.get_engine_version() == "0.1.4"


def test_version_string_matches_parts():
    expected = f"{version.get_major()}.{version.get_minor()}.{version.get_revision()}"
    assert version.get_engine_version() == expected


def test_parts_match_constants():
    assert (version.get_major(), version.get_minor(), version.get_revision()) == (
        version.MAJOR,
        version.MINOR,
        version.REVISION,
    )