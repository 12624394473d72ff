# utils/money.py
from __future__ import annotations

def clamp_non_negative(x: float) -> float:
    return max(0.0, float(x))

def safe_div(a: float, b: float) -> float:
    if b == 0:
        return 0.0
    return a / b

def format_brl(value: float) -> str:
    # pt-BR groups thousands with "." (R$ 12.500)
    whole = int(round(float(value)))
    grouped = f"{abs(whole):,}".replace(",", ".")
    sign = "-" if whole < 0 else ""
    return f"R$ {sign}{grouped}"
