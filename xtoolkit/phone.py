"""Phone number parsing, formatting and per-region validation."""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_AREA = "86"


@dataclass(frozen=True)
class PhoneRegExp:
    area_number: str
    regexp_all: str
    region: str
    region_code: str


@dataclass
class PhoneVerifyRequest:
    phone: str
    region_code: str = ""


@dataclass
class PhoneVerifyResult:
    ok: bool = False
    regular_phone: str = ""
    area_number: str = ""
    region: str = ""
    region_code: str = ""


PHONE_REGEXP_MAP: dict[str, PhoneRegExp] = {
    "CN": PhoneRegExp("86", r"^((00|\+){0,1}86-){0,1}((13[0-9])|(14[579])|(15[0-9])|(16[567])|(18[0-9])|(17[0-8])|(19[13589]))\d{8}$", "中国大陆", "CN"),
    "TEST": PhoneRegExp("86", r"^((00|\+)?86-)?721\d{8}$", "中国大陆", "CN"),
    "HK": PhoneRegExp("852", r"^((00|\+){0,1}852-)(5|6|8|9)\d{7}$", "中国香港", "HK"),
    "MO": PhoneRegExp("853", r"^((00|\+){0,1}853-6)\d{7}$", "中国澳门", "MO"),
    "TW": PhoneRegExp("886", r"^((00|\+){0,1}886-09)\d{8}$", "中国台湾", "TW"),
    "UAE": PhoneRegExp("971", r"^(00|\+){0,1}971-0?5(0|2|5|6)\d{7}$", "阿联酋", "UAE"),
    "AU": PhoneRegExp("61", r"^(00|\+){0,1}61-0?[45]\d{8}$", "澳大利亚", "AU"),
    "TL": PhoneRegExp("670", r"^(00|\+){0,1}670-7\d{7}$", "东帝汶", "TL"),
    "PH": PhoneRegExp("63", r"^(00|\+){0,1}63-0?9\d{9}$", "菲律宾", "PH"),
    "KR": PhoneRegExp("82", r"^(00|\+){0,1}82-0?1\d{9}$", "韩国", "KR"),
    "CA": PhoneRegExp("1", r"^(00|\+){0,1}1-[1-9]\d{9}$", "加拿大", "CA"),
    "KH": PhoneRegExp("855", r"^(00|\+){0,1}855-0?85\d{6}$", "柬埔寨", "KH"),
    "LA": PhoneRegExp("856", r"^(00|\+){0,1}856-0?20\d{7,8}$", "老挝", "LA"),
    "MY": PhoneRegExp("60", r"^(00|\+){0,1}60-0?1(([02346789]\d{7})|(1\d{8}))$", "马来西亚", "MY"),
    "US": PhoneRegExp("1", r"^(00|\+){0,1}1-[1-9]\d{9}$", "美国", "US"),
    "MM": PhoneRegExp("95", r"^(00|\+){0,1}95-0?[1-9]\d{9}$", "缅甸", "MM"),
    "JP": PhoneRegExp("81", r"^(00|\+){0,1}81-0?[1-9]\d{9}$", "日本", "JP"),
    "TH": PhoneRegExp("66", r"^(00|\+){0,1}66-0?[1-9]\d{8}$", "泰国", "TH"),
    "BN": PhoneRegExp("673", r"^(00|\+){0,1}673-((22[89])|(71\d)|(72[0-3])|(8[1236789]\d))\d{4}$", "文莱", "BN"),
    "ES": PhoneRegExp("34", r"^(00|\+){0,1}34-[6-7]\d{8}$", "西班牙", "ES"),
    "SG": PhoneRegExp("65", r"^(00|\+){0,1}65-[89]\d{7}$", "新加坡", "SG"),
    "NZ": PhoneRegExp("64", r"^(00|\+){0,1}64-0?2[012579]\d{7,8}$", "新西兰", "NZ"),
    "ID": PhoneRegExp("62", r"^(00|\+){0,1}62-0?8\d{8,10}$", "印度尼西亚", "ID"),
    "UK": PhoneRegExp("44", r"^(00|\+){0,1}44-0?7\d{9}$", "英国", "UK"),
    "VN": PhoneRegExp("84", r"^(00|\+){0,1}84-0?[1-9]\d{9}$", "越南", "VN"),
}

_COMPILED = {code: re.compile(entry.regexp_all, re.ASCII) for code, entry in PHONE_REGEXP_MAP.items()}


def parse_phone(phone: str) -> tuple[str, str]:
    """Split "area-number"; without a dash the area defaults to 86."""
    area, sep, number = phone.partition("-")
    if not sep:
        return DEFAULT_AREA, phone
    return area, number


def world_phone(area: str, number: str) -> str:
    """Join area code and number, defaulting the area to 86."""
    return f"{area or DEFAULT_AREA}-{number}"


def world_phone_fmt(phone: str) -> str:
    """Normalise a phone number so that it always carries an area code."""
    return world_phone(*parse_phone(phone))


def standard_phone(phone: str, star: bool) -> str:
    """Normalised phone number, optionally with four digits masked."""
    if not phone:
        return phone
    phone = world_phone_fmt(phone)
    if star and len(phone) > 8:
        phone = phone[:-8] + "****" + phone[-4:]
    return phone


def _matches(code: str, phone: str) -> bool:
    return _COMPILED[code].fullmatch(phone) is not None


def regexp_phone_verify(request: PhoneVerifyRequest) -> PhoneVerifyResult:
    """Validate a phone number against one region, or against every region."""
    result = PhoneVerifyResult()
    if not request.phone:
        return result
    if request.region_code:
        entry = PHONE_REGEXP_MAP.get(request.region_code)
        if entry is None:
            return result
        result.area_number = entry.area_number
        result.region = entry.region
        result.region_code = entry.region_code
        result.ok = _matches(request.region_code, request.phone)
        if result.ok:
            result.regular_phone = regular_phone(request.phone)
        return result
    for code, entry in PHONE_REGEXP_MAP.items():
        if _matches(code, request.phone):
            return PhoneVerifyResult(
                ok=True,
                regular_phone=regular_phone(request.phone),
                area_number=entry.area_number,
                region=entry.region,
                region_code=entry.region_code,
            )
    return result


def regular_phone(phone: str) -> str:
    """Normalise an already validated number to "area-number" form."""
    if "-" not in phone:
        return "86-" + phone
    parts = phone.split("-")
    area = parts[0].replace("+", "", 1).replace("00", "", 1)
    return f"{area}-{parts[1]}"