from dataclasses import dataclass
from typing import Sequence


@dataclass(slots=True, frozen=True)
class IterationStats:
    total: float
    min_: float
    max_: float
    avg: float
    var_: float

    @classmethod
    def from_samples(cls, samples: Sequence[float]) -> "IterationStats":
        n = len(samples)
        if n == 0:
            return cls(total=0., min_=0., max_=0., avg=0., var_=0.)

        total = sum(samples)
        avg = total / n
        if n < 2:
            var_ = 0.
        else:
            var_ = sum((s - avg) ** 2 for s in samples) / n
        return cls(
            total=total,
            min_=min(samples),
            max_=max(samples),
            avg=avg,
            var_=var_
        )
