"""
TLD Registry - bundled, versioned dataset of known top-level domains.

This module contains the TLDs offered in the search form, grouped as:
- Generic TLDs (gTLDs): .com, .net, .org, .info, etc.
- New gTLDs: .app, .dev, .xyz, .shop, etc.
- Country Code TLDs (ccTLDs): .de, .uk, .fr, .jp, etc.

A JSON file of the same shape can replace the bundled dataset at startup.
"""

import json
from pathlib import Path

from .enums import ConfigurationErrorCode, TldType
from .exceptions import ConfigurationError
from .models import TldDataset, TldEntry


DATASET_VERSION = "2024.11"
LAST_UPDATED = "2024-11-04T00:00:00Z"


def _entries(names: list[str], tld_type: TldType) -> list[TldEntry]:
    return [TldEntry(name=f".{name}", type=tld_type) for name in names]


# ============================================================================
# GENERIC TLDs (gTLDs)
# ============================================================================
GENERIC_TLDS = _entries([
    "com", "net", "org", "info", "biz", "name", "mobi", "pro",
], TldType.GENERIC)


# ============================================================================
# NEW gTLDs - Tech & Startup
# ============================================================================
TECH_TLDS = _entries([
    "app", "dev", "tech", "cloud", "digital", "software", "systems", "network",
    "solutions", "agency", "studio", "design", "media", "codes", "computer",
    "host", "hosting", "website", "page", "foo", "how", "new", "soy",
], TldType.GENERIC)


# ============================================================================
# NEW gTLDs - Popular & Generic
# ============================================================================
POPULAR_NEW_TLDS = _entries([
    "xyz", "online", "site", "store", "shop", "shopping", "club", "live",
    "life", "world", "today", "space", "fun", "top", "vip", "one", "blog",
    "news", "email", "link", "click", "zone", "plus", "global",
], TldType.GENERIC)


# ============================================================================
# BUSINESS & PROFESSIONAL
# ============================================================================
BUSINESS_TLDS = _entries([
    "company", "business", "consulting", "services", "group", "team", "work",
    "jobs", "careers", "finance", "money", "capital", "ventures", "holdings",
    "partners", "legal", "law", "tax", "accountant", "insurance", "llc",
    "ltd", "inc", "market", "marketing", "sale", "deals",
], TldType.GENERIC)


# ============================================================================
# LIFESTYLE & ENTERTAINMENT
# ============================================================================
LIFESTYLE_TLDS = _entries([
    "art", "music", "video", "photo", "photography", "gallery", "fashion",
    "style", "fitness", "health", "yoga", "travel", "holiday", "restaurant",
    "cafe", "bar", "beer", "wine", "pizza", "game", "games", "casino", "bet",
    "dog", "pet", "garden", "kitchen",
], TldType.GENERIC)


# ============================================================================
# REAL ESTATE, EDUCATION & COMMUNITY
# ============================================================================
COMMUNITY_TLDS = _entries([
    "house", "homes", "property", "properties", "land", "estate", "apartments",
    "rent", "academy", "school", "university", "college", "training", "courses",
    "community", "social", "chat", "forum", "berlin", "hamburg", "koeln",
    "bayern", "london", "nyc", "paris",
], TldType.GENERIC)


# ============================================================================
# COUNTRY CODE TLDs (ccTLDs)
# ============================================================================
EUROPE_TLDS = _entries([
    "de", "eu", "at", "ch", "li", "nl", "be", "lu", "fr", "it", "es", "pt",
    "pl", "cz", "sk", "hu", "ro", "bg", "hr", "si", "rs", "gr", "tr", "se",
    "dk", "no", "fi", "is", "uk", "ie", "ee", "lv", "lt", "mt", "cy",
], TldType.COUNTRY_CODE)

AMERICAS_TLDS = _entries([
    "us", "ca", "mx", "br", "ar", "cl", "co", "pe", "uy", "ec", "ve",
], TldType.COUNTRY_CODE)

ASIA_PACIFIC_TLDS = _entries([
    "au", "nz", "jp", "cn", "hk", "tw", "kr", "in", "sg", "my", "th", "id",
    "ph", "vn", "pk",
], TldType.COUNTRY_CODE)

MEA_TLDS = _entries([
    "ae", "sa", "il", "za", "ng", "ke", "eg", "ma", "qa",
], TldType.COUNTRY_CODE)

CIS_TLDS = _entries([
    "ru", "ua", "by", "kz", "uz", "ge", "am", "md",
], TldType.COUNTRY_CODE)

# ccTLDs commonly sold as generic alternatives
SPECIAL_TLDS = _entries([
    "io", "ai", "me", "tv", "cc", "ws", "fm", "gg", "to", "la", "ly", "vc",
    "gl", "im", "sh", "ac", "so", "gs", "tk", "nu",
], TldType.COUNTRY_CODE)


# ============================================================================
# COMBINE ALL TLDs
# ============================================================================
DEFAULT_ENTRIES = (
    GENERIC_TLDS +
    TECH_TLDS +
    POPULAR_NEW_TLDS +
    BUSINESS_TLDS +
    LIFESTYLE_TLDS +
    COMMUNITY_TLDS +
    EUROPE_TLDS +
    AMERICAS_TLDS +
    ASIA_PACIFIC_TLDS +
    MEA_TLDS +
    CIS_TLDS +
    SPECIAL_TLDS
)

DEFAULT_DATASET = TldDataset(
    version=DATASET_VERSION,
    last_updated=LAST_UPDATED,
    total=len(DEFAULT_ENTRIES),
    entries=DEFAULT_ENTRIES,
)


def _invalid_dataset(message: str, **details) -> ConfigurationError:
    return ConfigurationError(
        code=ConfigurationErrorCode.INVALID_DATASET.value,
        message=message,
        details=details,
    )


def dataset_from_dict(data: dict) -> TldDataset:
    """
    Build a dataset from its JSON form.

    Expected shape::

        {"version": "...", "lastUpdated": "...", "total": 2,
         "tlds": [{"name": ".com", "type": "GENERIC"}, ...]}

    Raises:
        ConfigurationError: If the shape is wrong, a type is unknown or the
            total does not match the number of entries
    """
    if not isinstance(data, dict) or not isinstance(data.get("tlds"), list):
        raise _invalid_dataset("TLD dataset must be an object with a 'tlds' list")

    entries = []
    for item in data["tlds"]:
        if not isinstance(item, dict) or not isinstance(item.get("name"), str):
            raise _invalid_dataset("TLD dataset entry has no name", entry=item)
        tld_type = TldType.parse(item.get("type"))
        if tld_type is None:
            raise _invalid_dataset(
                "TLD dataset entry has an unknown type",
                name=item["name"],
                type=item.get("type"),
            )
        entries.append(TldEntry(name=item["name"], type=tld_type))

    total = data.get("total", len(entries))
    if total != len(entries):
        raise _invalid_dataset(
            "TLD dataset total does not match its entries",
            total=total,
            entries=len(entries),
        )

    return TldDataset(
        version=str(data.get("version", "unversioned")),
        last_updated=str(data.get("lastUpdated", "")),
        total=total,
        entries=entries,
    )


def load_dataset(path: Path) -> TldDataset:
    """
    Load a dataset file, replacing the bundled one.

    Raises:
        ConfigurationError: If the file cannot be read or is malformed
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise _invalid_dataset(f"Could not read TLD dataset: {path}", cause=str(e)) from e

    return dataset_from_dict(data)
