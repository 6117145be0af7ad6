"""
Unit tests for the regional term dictionary.
"""

import tempfile
from pathlib import Path

import pytest
import yaml

from banky_edu.exceptions import TermDictionaryError, UnknownTermError
from banky_edu.localization import RegionCode, TermKey, TermMap, localized_term
from banky_edu.localization.terms import DEFAULT_TERMS_PATH


def _complete_regions() -> dict:
    with open(DEFAULT_TERMS_PATH, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)["regions"]


@pytest.fixture
def write_yaml():
    """Write a YAML document to a temp file and clean it up afterwards."""
    paths: list[Path] = []

    def _write(data: dict) -> Path:
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False, encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True)
            path = Path(f.name)
        paths.append(path)
        return path

    yield _write

    for path in paths:
        path.unlink()


class TestRegionCode:
    """Test region coercion."""

    @pytest.mark.parametrize("code", ["US", "IN", "UK", "EU", "Global"])
    def test_known_codes(self, code: str) -> None:
        assert RegionCode.coerce(code).value == code

    def test_enum_passthrough(self) -> None:
        assert RegionCode.coerce(RegionCode.IN) is RegionCode.IN

    @pytest.mark.parametrize("value", [None, "", "FR", "us", "global", 42])
    def test_unknown_falls_back_to_global(self, value: object) -> None:
        assert RegionCode.coerce(value) is RegionCode.GLOBAL


class TestTermMap:
    """Test TermMap lookup and loading."""

    def test_dictionary_is_complete(self, term_map: TermMap) -> None:
        """Every region has a non-empty string for every term-key."""
        for region in RegionCode:
            for key in TermKey:
                value = term_map.localized_term(region, key)
                assert isinstance(value, str)
                assert value

    def test_known_values(self, term_map: TermMap) -> None:
        assert term_map.localized_term(RegionCode.IN, TermKey.RETIREMENT_ACC) == "EPF/NPS"
        assert term_map.localized_term(RegionCode.IN, TermKey.CURRENCY_SYMBOL) == "₹"
        assert term_map.localized_term(RegionCode.UK, TermKey.TAX_AGENCY) == "HMRC"
        assert term_map.localized_term(RegionCode.EU, TermKey.CURRENCY_SYMBOL) == "€"
        assert term_map.localized_term(RegionCode.US, TermKey.CURRENCY_SYMBOL) == "$"
        assert term_map.localized_term(RegionCode.GLOBAL, TermKey.CENTRAL_BANK) == "Central Bank"

    def test_string_arguments(self, term_map: TermMap) -> None:
        assert term_map.localized_term("UK", "ID_NUM") == "NI Number"

    def test_unknown_region_uses_global(self, term_map: TermMap) -> None:
        for key in TermKey:
            assert term_map.localized_term("Atlantis", key) == term_map.localized_term(RegionCode.GLOBAL, key)
            assert term_map.localized_term(None, key) == term_map.localized_term(RegionCode.GLOBAL, key)

    def test_unknown_term_key_fails_fast(self, term_map: TermMap) -> None:
        with pytest.raises(UnknownTermError) as exc_info:
            term_map.localized_term(RegionCode.US, "PENSION_PLAN")
        assert exc_info.value.term_key == "PENSION_PLAN"

    def test_terms_for_is_read_only(self, term_map: TermMap) -> None:
        terms = term_map.terms_for(RegionCode.IN)
        with pytest.raises(TypeError):
            terms[TermKey.CREDIT_SCORE] = "Hacked"  # type: ignore[index]
        assert term_map.localized_term(RegionCode.IN, TermKey.CREDIT_SCORE) == "CIBIL"

    def test_default_is_shared(self) -> None:
        assert TermMap.default() is TermMap.default()

    def test_module_level_lookup(self) -> None:
        assert localized_term("IN", TermKey.CREDIT_SCORE) == "CIBIL"

    def test_load_yaml(self, write_yaml) -> None:
        regions = _complete_regions()
        regions["UK"]["CREDIT_SCORE"] = "Experian Score"
        term_map = TermMap.load_yaml(write_yaml({"version": 1, "regions": regions}))

        assert term_map.localized_term("UK", TermKey.CREDIT_SCORE) == "Experian Score"
        assert set(term_map.regions) == set(RegionCode)

    def test_load_yaml_missing_file(self) -> None:
        with pytest.raises(FileNotFoundError):
            TermMap.load_yaml(Path("/nonexistent/terms.yaml"))

    def test_load_yaml_without_regions_key(self, write_yaml) -> None:
        with pytest.raises(TermDictionaryError, match="must contain a 'regions' key"):
            TermMap.load_yaml(write_yaml({"invalid": "data"}))

    def test_missing_region_rejected(self) -> None:
        regions = _complete_regions()
        del regions["EU"]
        with pytest.raises(TermDictionaryError):
            TermMap.from_dict({"regions": regions})

    def test_missing_term_rejected(self) -> None:
        """Regions may not lean on Global by leaving a key out."""
        regions = _complete_regions()
        del regions["UK"]["ESTATE_LAW"]
        with pytest.raises(TermDictionaryError) as exc_info:
            TermMap.from_dict({"regions": regions})
        assert "ESTATE_LAW" in str(exc_info.value.details["errors"])

    def test_empty_term_rejected(self) -> None:
        regions = _complete_regions()
        regions["IN"]["TAX_AGENCY"] = ""
        with pytest.raises(TermDictionaryError):
            TermMap.from_dict({"regions": regions})

    def test_unknown_term_key_in_file_rejected(self) -> None:
        regions = _complete_regions()
        regions["US"]["PENSION_PLAN"] = "401k"
        with pytest.raises(TermDictionaryError):
            TermMap.from_dict({"regions": regions})

    def test_unknown_region_in_file_rejected(self) -> None:
        regions = _complete_regions()
        regions["FR"] = dict(regions["EU"])
        with pytest.raises(TermDictionaryError):
            TermMap.from_dict({"regions": regions})
