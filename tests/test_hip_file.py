"""
HipFile record tests
"""

import pytest

from HipPipe.core.hip_file import HipFile, compare_hip_files, increment_version


class TestHipFile:
    """HipFile construction and rendering"""

    def test_full_name_pads_version(self):
        hip = HipFile("shot01", "hip", 7)
        assert hip.get_full_name() == "shot01_007.hip"
        assert str(hip) == "shot01_007.hip"

    def test_default_version_is_one(self):
        assert HipFile("shot01", "hipnc").version == 1

    def test_large_version_is_not_truncated(self):
        assert HipFile("fx", "hip", 1234).get_full_name() == "fx_1234.hip"

    def test_negative_version_rejected(self):
        with pytest.raises(ValueError):
            HipFile("shot01", "hip", -1)

    @pytest.mark.parametrize("version", ["3", 2.0, True])
    def test_non_integer_version_rejected(self, version):
        with pytest.raises(ValueError):
            HipFile("shot01", "hip", version)

    @pytest.mark.parametrize("base,ext", [
        ("a,b", "hip"),
        (" shot", "hip"),
        ("shot ", "hip"),
        ("shot", " hip"),
        ("shot", "hip,nc"),
        ("shot", "hip.bak"),
        ("shot", ""),
    ])
    def test_unparsable_name_rejected(self, base, ext):
        with pytest.raises(ValueError):
            HipFile(base, ext, 3)

    def test_print_name(self, capsys):
        HipFile("shot01", "hip", 3).print_name()
        assert capsys.readouterr().out == "this file has name: shot01_003.hip\n"

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(HipFile("shot01", "hip"))


class TestVersioning:
    """Version increment"""

    def test_inc_version_returns_new_version(self):
        hip = HipFile("x", "hip", 1)
        assert hip.inc_version() == 2
        assert hip.version == 2

    def test_increment_version(self):
        hip = HipFile("x", "hip", 1)
        updated, version = increment_version(hip)

        assert updated is hip
        assert version == 2
        assert updated.get_full_name() == "x_002.hip"


class TestComparison:
    """Equality is based on the full name"""

    def test_same_fields_are_equal(self):
        assert compare_hip_files(HipFile("a", "hip", 2), HipFile("a", "hip", 2))
        assert HipFile("a", "hip", 2) == HipFile("a", "hip", 2)

    def test_different_version(self):
        assert not compare_hip_files(HipFile("a", "hip", 2), HipFile("a", "hip", 3))
        assert HipFile("a", "hip", 2) != HipFile("a", "hip", 3)

    def test_extension_case_matters(self):
        assert not compare_hip_files(HipFile("a", "hip"), HipFile("a", "HIP"))

    def test_matches_full_name_comparison(self):
        files = [
            HipFile("a_001", "hip", 2),
            HipFile("a", "hip", 1),
            HipFile("a", "hipnc", 1),
            HipFile("", "hip", 0),
        ]
        for p in files:
            for q in files:
                assert compare_hip_files(p, q) == (p.get_full_name() == q.get_full_name())

    def test_comparison_with_other_types(self):
        assert HipFile("a", "hip") != "a_001.hip"
