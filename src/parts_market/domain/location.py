"""Iraqi provinces/cities and the location priority used to rank search results."""

from __future__ import annotations

from dataclasses import dataclass


SAME_CITY_SCORE = 100
SAME_PROVINCE_SCORE = 50
DIFFERENT_PROVINCE_SCORE = 10

IRAQ_PROVINCES: tuple[str, ...] = (
    "Baghdad",
    "Basra",
    "Nineveh",
    "Erbil",
    "Sulaymaniyah",
    "Dohuk",
    "Kirkuk",
    "Anbar",
    "Karbala",
    "Najaf",
    "Babil",
    "Wasit",
    "Diyala",
    "Maysan",
    "Muthanna",
    "Qadisiyyah",
    "Dhi Qar",
)

IRAQ_CITIES_BY_PROVINCE: dict[str, tuple[str, ...]] = {
    "Baghdad": (
        "Baghdad",
        "Al-Karkh",
        "Al-Rusafa",
        "Al-Mansour",
        "Al-Karrada",
        "Al-Jadriya",
        "Al-Adhamiya",
        "Al-Kadhimiya",
        "Al-Sadr City",
    ),
    "Basra": ("Basra", "Al-Zubair", "Al-Faw", "Abu Al-Khasib", "Al-Qurna", "Shatt Al-Arab"),
    "Nineveh": ("Mosul", "Tal Afar", "Sinjar", "Al-Hamdaniya", "Al-Shikhan", "Al-Ba'aj"),
    "Erbil": ("Erbil", "Soran", "Koisanjaq", "Mergasur", "Choman", "Rawanduz"),
    "Sulaymaniyah": ("Sulaymaniyah", "Halabja", "Ranya", "Darbandikhan", "Kalar", "Dukan"),
    "Dohuk": ("Dohuk", "Zakho", "Amedi", "Sumel", "Bardarash", "Al-Shikhan"),
    "Kirkuk": ("Kirkuk", "Al-Hawija", "Dibis", "Al-Rashad", "Al-Daquq", "Al-Zab"),
    "Anbar": ("Ramadi", "Fallujah", "Al-Qaim", "Hit", "Haditha", "Rutba"),
    "Karbala": ("Karbala", "Al-Hindiya", "Ain Al-Tamr", "Al-Mahawil"),
    "Najaf": ("Najaf", "Al-Kufa", "Al-Manathera", "Al-Mishkhab", "Al-Qadisiyyah"),
    "Babil": ("Hillah", "Al-Mahawil", "Al-Musayyib", "Al-Hashimiya", "Al-Qasim"),
    "Wasit": ("Kut", "Al-Suwaira", "Al-Aziziyah", "Al-Nu'maniya", "Al-Badra"),
    "Diyala": ("Baqubah", "Al-Khalis", "Al-Muqdadiya", "Khanaqin", "Al-Saadiya"),
    "Maysan": ("Amarah", "Al-Kahla", "Al-Maimouna", "Al-Majar Al-Kabir", "Al-Salam"),
    "Muthanna": ("Samawah", "Al-Rumaitha", "Al-Salman", "Al-Khidhir", "Al-Samawa"),
    "Qadisiyyah": ("Diwaniyah", "Al-Shamiya", "Al-Hamza", "Al-Diwaniyah", "Al-Afaq"),
    "Dhi Qar": ("Nasiriyah", "Al-Rifai", "Al-Shatra", "Al-Nasir", "Al-Chibayish"),
}


@dataclass(frozen=True, slots=True)
class LocationScore:
    score: int
    reason: str


def calculate_location_score(
    customer_province: str,
    customer_city: str,
    dealer_province: str,
    dealer_city: str,
) -> LocationScore:
    """
    Priority of a dealer's location relative to the customer's.

    Exact string comparison, no normalization: "baghdad" and "Baghdad" are
    different provinces here.
    """
    if customer_province == dealer_province and customer_city == dealer_city:
        return LocationScore(score=SAME_CITY_SCORE, reason="Same city")

    if customer_province == dealer_province:
        return LocationScore(score=SAME_PROVINCE_SCORE, reason="Same province")

    return LocationScore(score=DIFFERENT_PROVINCE_SCORE, reason="Different province")


def get_all_provinces() -> list[str]:
    return list(IRAQ_PROVINCES)


def get_cities_by_province(province: str) -> list[str]:
    """Cities of a province, or an empty list for an unknown province."""
    return list(IRAQ_CITIES_BY_PROVINCE.get(province, ()))


def is_valid_city_for_province(city: str, province: str) -> bool:
    return city in IRAQ_CITIES_BY_PROVINCE.get(province, ())
