"""
行政区划查询

身份证号前 6 位为行政区划代码。校验逻辑本身不依赖区划数据，
区划查询以 RegionLookup 接口的形式注入。

- ProvinceRegionLookup: 内置省级行政区划表，只能解析到省
- MappingRegionLookup: 基于 6 位代码 -> 名称 的映射表，可解析到区县
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, Optional

from cn_idcard.core.checksum import is_digits


# 省级行政区划代码（前6位中的前2位）
PROVINCE_CODES = {
    "11": "北京市", "12": "天津市", "13": "河北省", "14": "山西省", "15": "内蒙古自治区",
    "21": "辽宁省", "22": "吉林省", "23": "黑龙江省",
    "31": "上海市", "32": "江苏省", "33": "浙江省", "34": "安徽省", "35": "福建省", "36": "江西省", "37": "山东省",
    "41": "河南省", "42": "湖北省", "43": "湖南省", "44": "广东省", "45": "广西壮族自治区", "46": "海南省",
    "50": "重庆市", "51": "四川省", "52": "贵州省", "53": "云南省", "54": "西藏自治区",
    "61": "陕西省", "62": "甘肃省", "63": "青海省", "64": "宁夏回族自治区", "65": "新疆维吾尔自治区",
    "71": "台湾省", "81": "香港特别行政区", "82": "澳门特别行政区",
}

# 直辖市等的市级占位名称，不作为城市名
_CITY_PLACEHOLDERS = frozenset({"市辖区", "县", "省直辖县级行政区划", "自治区直辖县级行政区划"})


@dataclass(frozen=True)
class RegionInfo:
    """Administrative region decoded from a 6-digit region code."""

    code: str
    province: str
    city: Optional[str] = None
    district: Optional[str] = None

    @property
    def full_name(self) -> str:
        """Province, city and district names joined, skipping missing parts."""
        return "".join(part for part in (self.province, self.city, self.district) if part)


def _is_region_code(prefix: str) -> bool:
    return isinstance(prefix, str) and len(prefix) == 6 and is_digits(prefix)


class RegionLookup(ABC):
    """Resolves a 6-digit region code to region metadata."""

    @abstractmethod
    def lookup(self, prefix: str) -> Optional[RegionInfo]:
        """Look up a region code.

        Args:
            prefix: The first six characters of an ID card number.

        Returns:
            RegionInfo, or None if the code is malformed or unknown.
        """


class ProvinceRegionLookup(RegionLookup):
    """Province-level lookup backed by the built-in province table."""

    def lookup(self, prefix: str) -> Optional[RegionInfo]:
        if not _is_region_code(prefix):
            return None
        province = PROVINCE_CODES.get(prefix[:2])
        if province is None:
            return None
        return RegionInfo(code=prefix, province=province)


class MappingRegionLookup(RegionLookup):
    """Lookup backed by a full region-code table.

    Example:
        >>> lookup = MappingRegionLookup({
        ...     "110000": "北京市",
        ...     "110100": "市辖区",
        ...     "110105": "朝阳区",
        ... })
        >>> lookup.lookup("110105").full_name
        '北京市朝阳区'
    """

    def __init__(self, names: Mapping[str, str]):
        self._names = dict(names)

    def __len__(self) -> int:
        return len(self._names)

    def lookup(self, prefix: str) -> Optional[RegionInfo]:
        if not _is_region_code(prefix):
            return None

        province_code = prefix[:2] + "0000"
        city_code = prefix[:4] + "00"

        province = self._names.get(province_code)
        if province is None:
            # Fall back to the built-in table when the mapping lacks the province row
            province = PROVINCE_CODES.get(prefix[:2])
        if prefix not in self._names and province_code not in self._names:
            return None
        if province is None:
            return None

        city = None
        if prefix != province_code:
            city = self._names.get(city_code)
            if city in _CITY_PLACEHOLDERS:
                city = None

        district = None
        if prefix not in (province_code, city_code):
            district = self._names.get(prefix)

        return RegionInfo(code=prefix, province=province, city=city, district=district)
