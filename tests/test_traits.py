from drillkit.lessons.traits import OtherSoftware, SomeSoftware, append_bar


def test_is_foo_bar():
    assert append_bar("Foo") == "FooBar"


def test_is_bar_bar():
    assert append_bar(append_bar("")) == "BarBar"


def test_is_licensing_info_the_same():
    licensing_info = "Some information"
    some_software = SomeSoftware(version_number=1)
    other_software = OtherSoftware(version_number="v2.0.0")
    assert some_software.licensing_info() == licensing_info
    assert other_software.licensing_info() == licensing_info


def test_versions_are_kept():
    assert SomeSoftware(3).version_number == 3
    assert OtherSoftware("v1").version_number == "v1"