import pytest

import country_names
from country_names import (
    AGGREGATE_CODES,
    COUNTRY_NAMES,
    CodeResolver,
    Entry,
    UnknownCode,
    get_country_name,
    resolver,
)


def test_every_stored_code_resolves_to_its_name():
    for code, name in COUNTRY_NAMES.items():
        assert resolver.has(code)
        assert resolver.resolve(code) == name


@pytest.mark.parametrize("code, name", [
    ("US", "United States"),
    ("JP", "Japan"),
    ("GB", "United Kingdom"),
    ("CI", "Cote d'Ivoire"),
    ("HK", "Hong Kong SAR, China"),
    ("Z4", "East Asia & Pacific (all income levels)"),
    ("1W", "World"),
])
def test_resolve_known_codes(code, name):
    assert resolver.resolve(code) == name


@pytest.mark.parametrize("code", ["ZZ", "XX", "", "usa", "   ", None, 42])
def test_unknown_codes(code):
    assert resolver.has(code) is False
    with pytest.raises(UnknownCode) as exc_info:
        resolver.resolve(code)
    assert exc_info.value.code == code


def test_unknown_code_is_a_key_error():
    with pytest.raises(KeyError):
        resolver.resolve("ZZ")
    assert "ZZ" in str(UnknownCode("ZZ"))


def test_resolve_is_idempotent():
    first = resolver.resolve("DE")
    for _ in range(5):
        assert resolver.resolve("DE") == first


def test_no_empty_names():
    assert all(name for _, name in resolver.entries())


def test_entries_cardinality_and_order():
    entries = resolver.entries()
    assert len(entries) == len(COUNTRY_NAMES) == len(resolver) == 246
    assert len({entry.code for entry in entries}) == len(entries)
    assert entries[0] == Entry("BD", "Bangladesh")
    assert entries[-1] == Entry("MZ", "Mozambique")
    assert [entry.code for entry in entries] == list(resolver)


def test_entries_is_restartable_and_consistent():
    assert resolver.entries() == resolver.entries()
    for code, name in resolver.entries():
        assert resolver.resolve(code) == name


def test_names_are_unique():
    names = [entry.name for entry in resolver.entries()]
    assert len(set(names)) == len(names)


def test_aggregate_codes_split_the_table():
    assert len(AGGREGATE_CODES) == 32
    assert AGGREGATE_CODES <= set(COUNTRY_NAMES)
    assert len(resolver.aggregates()) == 32
    assert len(resolver.countries()) == 246 - 32
    assert resolver.is_aggregate("XD")
    assert resolver.is_aggregate("EU")
    assert not resolver.is_aggregate("US")
    assert not resolver.is_aggregate("ZZ")
    assert all(not resolver.is_aggregate(entry.code) for entry in resolver.countries())


def test_case_normalization():
    normalizing = CodeResolver({"GB": "United Kingdom"}, normalize_case=True)
    assert normalizing.resolve("gb") == "United Kingdom"
    assert normalizing.resolve(" Gb ") == "United Kingdom"
    assert "gb" in normalizing

    strict = CodeResolver({"GB": "United Kingdom"}, normalize_case=False)
    assert strict.resolve("GB") == "United Kingdom"
    assert not strict.has("gb")
    with pytest.raises(UnknownCode):
        strict.resolve("gb")


def test_resolver_copies_source_mapping():
    source = {"US": "United States", "JP": "Japan", "GB": "United Kingdom"}
    subset = CodeResolver(source, normalize_case=False)
    source["XX"] = "Nowhere"
    source["GB"] = "Changed"

    assert subset.resolve("GB") == "United Kingdom"
    with pytest.raises(UnknownCode):
        subset.resolve("XX")
    assert len(subset) == 3


def test_table_view_is_read_only():
    with pytest.raises(TypeError):
        resolver._names["ZZ"] = "Nowhere"


def test_rejects_empty_names():
    with pytest.raises(ValueError, match="Empty display name"):
        CodeResolver({"US": "United States", "ZZ": ""})


def test_rejects_aggregates_missing_from_table():
    with pytest.raises(ValueError, match="Aggregate codes not in table"):
        CodeResolver({"US": "United States"}, aggregate_codes={"XD"})


def test_get_country_name_falls_back_to_raw_code():
    assert get_country_name("GB") == "United Kingdom"
    assert get_country_name("ZZ") == "ZZ"
    assert get_country_name("") == ""
    assert get_country_name(None) == ""


def test_module_singleton_is_shared():
    import country_names as again
    assert again.resolver is country_names.resolver


def test_get_country_name_fallback_is_always_a_string():
    assert get_country_name(42) == "42"
    assert get_country_name(" zz ") == " zz "
