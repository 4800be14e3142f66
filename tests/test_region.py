"""Tests for region lookups."""

import pytest

from cn_idcard.region.lookup import (
    PROVINCE_CODES,
    MappingRegionLookup,
    ProvinceRegionLookup,
    RegionInfo,
    RegionLookup,
)


@pytest.fixture
def region_names():
    return {
        "110000": "北京市",
        "110100": "市辖区",
        "110105": "朝阳区",
        "440000": "广东省",
        "440300": "深圳市",
        "440304": "福田区",
    }


class TestRegionInfo:
    """Tests for RegionInfo."""

    def test_full_name(self) -> None:
        info = RegionInfo(code="440304", province="广东省", city="深圳市", district="福田区")
        assert info.full_name == "广东省深圳市福田区"

    def test_full_name_skips_missing(self) -> None:
        assert RegionInfo(code="110105", province="北京市").full_name == "北京市"


class TestProvinceRegionLookup:
    """Tests for ProvinceRegionLookup."""

    def test_is_region_lookup(self) -> None:
        assert isinstance(ProvinceRegionLookup(), RegionLookup)

    def test_known_province(self) -> None:
        info = ProvinceRegionLookup().lookup("440304")
        assert info == RegionInfo(code="440304", province="广东省")

    def test_unknown_province(self) -> None:
        assert ProvinceRegionLookup().lookup("990101") is None

    @pytest.mark.parametrize("prefix", ["", "11010", "1101051", "11A105", None])
    def test_malformed_prefix(self, prefix) -> None:
        assert ProvinceRegionLookup().lookup(prefix) is None

    def test_table_covers_provincial_divisions(self) -> None:
        assert len(PROVINCE_CODES) == 34
        assert PROVINCE_CODES["81"] == "香港特别行政区"


class TestMappingRegionLookup:
    """Tests for MappingRegionLookup."""

    def test_district(self, region_names) -> None:
        info = MappingRegionLookup(region_names).lookup("440304")
        assert info.province == "广东省"
        assert info.city == "深圳市"
        assert info.district == "福田区"

    def test_municipality_placeholder_city_skipped(self, region_names) -> None:
        info = MappingRegionLookup(region_names).lookup("110105")
        assert info.city is None
        assert info.full_name == "北京市朝阳区"

    def test_city_level_code(self, region_names) -> None:
        info = MappingRegionLookup(region_names).lookup("440300")
        assert info.city == "深圳市"
        assert info.district is None

    def test_province_level_code(self, region_names) -> None:
        info = MappingRegionLookup(region_names).lookup("440000")
        assert info == RegionInfo(code="440000", province="广东省")

    def test_unknown_district_in_known_province(self, region_names) -> None:
        info = MappingRegionLookup(region_names).lookup("440399")
        assert info.province == "广东省"
        assert info.city == "深圳市"
        assert info.district is None

    def test_unknown_province(self, region_names) -> None:
        assert MappingRegionLookup(region_names).lookup("310101") is None

    def test_province_from_builtin_table(self) -> None:
        info = MappingRegionLookup({"310101": "黄浦区"}).lookup("310101")
        assert info.province == "上海市"
        assert info.district == "黄浦区"

    def test_malformed_prefix(self, region_names) -> None:
        assert MappingRegionLookup(region_names).lookup("4403") is None

    def test_len(self, region_names) -> None:
        assert len(MappingRegionLookup(region_names)) == 6
