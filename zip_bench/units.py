import math
from dataclasses import dataclass
from typing import Literal, Sequence, Union

TimeUnit = Literal["s", "ms", "us"]


@dataclass(slots=True, frozen=True)
class TimeProperty:
    unit: TimeUnit
    scale: int
    precision: int

    def format_time(self, seconds: float) -> str:
        scaled = seconds * self.scale
        return f"{scaled:.{self.precision}f}{self.unit}"


def _pick_unit(
    seconds: float,
    time_unit: Literal["auto", "s", "ms", "us"]
) -> TimeUnit:
    if time_unit in ("s", "ms", "us"):
        return time_unit

    if seconds >= 1.0:
        return "s"
    if seconds >= 0.001:
        return "ms"
    return "us"


def _unit_scale(time_unit: TimeUnit) -> int:
    match time_unit:
        case "s":
            return 1
        case "ms":
            return 1_000
        case "us":
            return 1_000_000


def _integer_digits(value: float) -> int:
    whole = int(abs(value))
    if whole == 0:
        return 0
    return int(math.log10(whole)) + 1


def _pick_precision(
    scaled: float,
    time_unit: TimeUnit,
    precision: Union[int, Literal["auto"]]
) -> int:
    if isinstance(precision, int):
        return precision
    if time_unit == "us":
        return 1

    # six significant digits in total, never more than six decimals
    significant = 6
    digits = _integer_digits(scaled)
    if digits == 0:
        return significant
    return max(significant - digits, 0)


def infer_time_property(
    samples: Union[float, Sequence[float]],
    unit: Literal["auto", "s", "ms", "us"] = "auto",
    precision: Union[int, Literal["auto"]] = "auto"
) -> TimeProperty:
    """Chooses a display unit and precision for a set of durations.

    The largest duration decides, so every value in a report shares the
    same unit.

    Args:
        samples (float or sequence of float): Durations in seconds.
        unit (str, optional): Force 's', 'ms' or 'us'. Defaults to 'auto'.
        precision (int or str, optional): Decimal places, or 'auto'.

    Returns:
        TimeProperty: The unit, scale and precision to format with.
    """
    if isinstance(samples, (int, float)):
        worst = float(samples)
    else:
        worst = max(samples, default=0.)

    time_unit = _pick_unit(worst, unit)
    scale = _unit_scale(time_unit)
    return TimeProperty(
        unit=time_unit,
        scale=scale,
        precision=_pick_precision(worst * scale, time_unit, precision)
    )
