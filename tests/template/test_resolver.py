"""
Tests for substitution sources.
"""

from types import MappingProxyType

import pytest

from cfmt.template.resolver import ABSENT, CallbackSource, MappingSource, SubstitutionSource, as_source


class TestMappingSource:

    def test_present_key(self):
        assert MappingSource({"a": 1}).resolve("a", None) == 1

    def test_absent_key(self):
        assert MappingSource({"a": 1}).resolve("b", None) is ABSENT

    def test_none_value_is_not_absent(self):
        assert MappingSource({"a": None}).resolve("a", None) is None

    def test_attribute_names(self):
        source = MappingSource({})
        for key in ("keys", "__class__", "toString", "__len__"):
            assert source.resolve(key, None) is ABSENT

    def test_format_is_ignored(self):
        assert MappingSource({"a": 1}).resolve("a", "d4") == 1

    def test_strict_format(self):
        assert MappingSource({}).strict_format is True


class TestCallbackSource:

    def test_passes_key_and_format(self):
        calls = []

        def fn(key, spec):
            calls.append((key, spec))
            return "v"

        assert CallbackSource(fn).resolve("k", "x2") == "v"
        assert calls == [("k", "x2")]

    def test_none_is_absent(self):
        assert CallbackSource(lambda key, spec: None).resolve("k", None) is ABSENT

    def test_falsy_values_are_present(self):
        for value in (0, "", False, 0.0, []):
            assert CallbackSource(lambda key, spec, v=value: v).resolve("k", None) == value

    def test_strict_format(self):
        assert CallbackSource(lambda key, spec: 1).strict_format is False


class TestAsSource:

    def test_mapping(self):
        assert isinstance(as_source({"a": 1}), MappingSource)
        assert isinstance(as_source(MappingProxyType({"a": 1})), MappingSource)

    def test_callable(self):
        assert isinstance(as_source(lambda key, spec: key), CallbackSource)

    def test_existing_source(self):
        source = MappingSource({})
        assert as_source(source) is source

    def test_custom_source(self):
        class Upper:
            strict_format = True

            def resolve(self, key, format):
                return key.upper()

        source = Upper()
        assert isinstance(source, SubstitutionSource)
        assert as_source(source) is source

    @pytest.mark.parametrize("bad", [42, "text", [("a", 1)]])
    def test_rejects_other_types(self, bad):
        with pytest.raises(TypeError):
            as_source(bad)

    def test_absent_marker(self):
        assert repr(ABSENT) == "ABSENT"
        assert not ABSENT
