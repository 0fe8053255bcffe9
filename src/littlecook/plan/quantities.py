"""Accumulated shopping quantities: a number, or text when numbers cannot be added."""

from dataclasses import dataclass

from littlecook.normalize.units import match_numeric_quantity


@dataclass(frozen=True)
class Numeric:
    value: float

    def render(self) -> str:
        return format_number(self.value)

    def to_json(self) -> float:
        return self.value


@dataclass(frozen=True)
class Textual:
    text: str

    def render(self) -> str:
        return self.text

    def to_json(self) -> str:
        return self.text


Quantity = Numeric | Textual


def format_number(value: float) -> str:
    """Compact, unrounded-looking rendering of a number ("3.0" -> "3", "0.3333..." -> "0.3333")."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.4f}".rstrip("0").rstrip(".")


def scale_quantity(raw: float | int | str, multiplier: float) -> Quantity:
    """
    Scale a recipe line quantity for one occurrence.

    Numbers are multiplied. Text is scaled through its leading number
    ("1,5 kg" -> 1.5 * multiplier); text without one ("une pincée") is kept
    as-is, unscaled.
    """
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise TypeError(f"quantity must be a number or text, got {type(raw).__name__}")

    if isinstance(raw, (int, float)):
        return Numeric(float(raw) * multiplier)

    match = match_numeric_quantity(raw)
    if match is None:
        return Textual(raw.strip())
    return Numeric(match.value * multiplier)


def merge(existing: Quantity, new: Quantity) -> Quantity:
    """
    Add a contribution to an accumulated quantity.

    Two numbers are summed. Any other combination is concatenated as
    "<existing> + <new>" so no contribution is ever dropped.
    """
    if isinstance(existing, Numeric) and isinstance(new, Numeric):
        return Numeric(existing.value + new.value)
    return Textual(f"{existing.render()} + {new.render()}")
