from xtoolkit.version import VersionCmp


def test_numeric_components_compare_numerically():
    v = VersionCmp("1.2.10")
    assert v.gt("1.2.9")
    assert v.gte("1.2.9")
    assert not v.lt("1.2.9")
    assert v.lt("1.10.0")


def test_equality():
    v = VersionCmp("3.0.1")
    assert v.eq("3.0.1")
    assert v.eq("003.0.01")
    assert not v.ne("3.0.1")
    assert v.ne("3.0.2")
    assert v.lte("3.0.1") and v.gte("3.0.1")


def test_format_version_pads_each_component():
    formatted = VersionCmp("1.2").format_version()
    assert len(formatted) % 20 == 0
    assert formatted.endswith("2")
    assert formatted.lstrip("0").startswith("1")


def test_min_and_max_bounds():
    v = VersionCmp("5")
    assert v.min_version() == "0" * 20
    assert v.max_version() == "9" * 20
    assert v.min_version() < v.format_version() < v.max_version()