# utils/date_parser.py
from __future__ import annotations
import re
import unicodedata
from typing import Optional, Sequence

import dateparser

PREFERRED_LANGS = ["pt"]

MONTHS_PT = [
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
]

# Southern-hemisphere seasons (the app prices in BRL).
SEASON_MONTHS = {
    "verao": (12, 1, 2),
    "outono": (3, 4, 5),
    "inverno": (6, 7, 8),
    "primavera": (9, 10, 11),
}
SEASON_LABELS = {
    "verao": "Verão",
    "outono": "Outono",
    "inverno": "Inverno",
    "primavera": "Primavera",
    "qualquer": "Qualquer época",
}


def _fold(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", (text or "").lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


_MONTH_TO_NUM = {_fold(name): i for i, name in enumerate(MONTHS_PT, start=1)}
_MONTH_PATTERN = re.compile(rf"\b({'|'.join(_MONTH_TO_NUM)})\b")
# day/month with an optional year; bare numbers ("3000 reais", "10 dias") are not dates
_NUMERIC_DATE = re.compile(r"\b\d{1,2}/\d{1,2}(?:/\d{2,4})?\b")


def month_number(name: str) -> Optional[int]:
    return _MONTH_TO_NUM.get(_fold(name).strip())


def extract_month(text: str) -> Optional[int]:
    """
    Finds the travel month mentioned in a chat message.
    Month names are matched directly; numeric dates ("15/07") go through dateparser.
    """
    if not text:
        return None

    match = _MONTH_PATTERN.search(_fold(text))
    if match:
        return _MONTH_TO_NUM[match.group(1)]

    for candidate in _NUMERIC_DATE.findall(text):
        dt = dateparser.parse(
            candidate,
            languages=PREFERRED_LANGS,
            settings={"DATE_ORDER": "DMY", "PREFER_DATES_FROM": "future"},
        )
        # impossible dates ("31/02") come back as None
        if dt:
            return dt.month
    return None


def season_for_month(month: int) -> str:
    for season, months in SEASON_MONTHS.items():
        if month in months:
            return season
    raise ValueError(f"invalid month: {month}")


def best_season_text(months: Sequence[str]) -> str:
    if not months:
        return "Ano todo"
    names = [m[:1].upper() + m[1:] for m in months]
    if len(names) > 3:
        return f"{names[0]} - {names[-1]}"
    return ", ".join(names)


def is_good_season(months: Sequence[str], season: Optional[str]) -> bool:
    """True when the destination's best months overlap the chosen season."""
    if not months or not season or season == "qualquer":
        return True
    wanted = SEASON_MONTHS.get(season)
    if not wanted:
        return True
    return any(month_number(m) in wanted for m in months)
