"""Static reference tables for canal objects, countries and segments."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Rated maximum discharge per object code, m³/s.
CANAL_CAPACITIES: Mapping[str, float] = MappingProxyType(
    {
        "LNK": 32.0,
        "BNK": 61.9,
        "BFK": 150.0,
        "KDP": 330.0,
        "SFK": 110.0,
        "Zardara": 70.0,
        "YuGK": 330.0,
        "NDK": 75.0,
        "VDK": 43.0,
        "Dustlik": 230.0,
        "Mekhnat": 6.0,
        "Zafarabad": 6.0,
    }
)

ALL_COUNTRIES = "all"

COUNTRY_TRANSLATIONS: Mapping[str, str] = MappingProxyType(
    {
        ALL_COUNTRIES: "Все страны",
        "Uzbekistan": "Узбекистан",
        "Kazakhstan": "Казахстан",
        "Tajikistan": "Таджикистан",
        "Kyrgyzstan": "Кыргызстан",
        "Turkmenistan": "Туркменистан",
    }
)

SEGMENT_TRANSLATIONS: Mapping[str, str] = MappingProxyType(
    {
        "Toktogul–Shardara": "Токтогул - Шардара",
        "Toktogul–BahriTojik": "Токтогул - Бахри Точик",
        "BahriTojik–Shardara": "Бахри Точик - Шардара",
        "Farkhad": "Фархадская плотина",
        "Upper": "Верхний",
        "Middle": "Средний",
        "Lower": "Нижний",
        "Head": "Головной",
        "Tail": "Хвостовой",
    }
)

# Month names as they appear in source filenames, in calendar order.
MONTH_NAMES: Mapping[str, int] = MappingProxyType(
    {
        "январь": 1,
        "февраль": 2,
        "март": 3,
        "апрель": 4,
        "май": 5,
        "июнь": 6,
        "июль": 7,
        "август": 8,
        "сентябрь": 9,
        "октябрь": 10,
        "ноябрь": 11,
        "декабрь": 12,
    }
)


def country_label(code: str) -> str:
    return COUNTRY_TRANSLATIONS.get(code, code)


def segment_label(code: str) -> str:
    return SEGMENT_TRANSLATIONS.get(code, code)
