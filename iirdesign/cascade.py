"""A chain of biquad sections realising a higher order filter."""

from __future__ import annotations

import math
from collections.abc import Iterator

from iirdesign.biquad import Biquad, BiquadPoleState, pole_state


class Cascade:
    """A series of biquads with room for up to ``max_stages`` sections.

    A layout passed to :meth:`set_layout` must provide ``num_poles``,
    ``normal_w``, ``normal_gain`` and indexing that yields one
    :class:`~iirdesign.biquad.PoleZeroPair` per stage.
    """

    def __init__(self, max_stages: int) -> None:
        if max_stages < 0:
            raise ValueError("max_stages must not be negative")
        self.max_stages = max_stages
        self._stages = [Biquad() for _ in range(max_stages)]
        self._num_stages = 0

    def __len__(self) -> int:
        return self._num_stages

    def __getitem__(self, index: int) -> Biquad:
        return self._stages[: self._num_stages][index]

    def __iter__(self) -> Iterator[Biquad]:
        return iter(self._stages[: self._num_stages])

    def response(self, normalized_frequency: float) -> complex:
        """Complex response at a frequency given as a fraction of the sample rate."""
        numerator = 1 + 0j
        denominator = 1 + 0j
        for stage in self:
            top, bottom = stage._transfer_terms(normalized_frequency)
            numerator *= top
            denominator *= bottom
        return numerator / denominator

    def pole_zeros(self) -> list[BiquadPoleState]:
        return [pole_state(stage) for stage in self]

    def apply_scale(self, scale: float) -> None:
        if self._num_stages == 0:
            raise ValueError("cascade has no stages to scale")
        self._stages[0].apply_scale(scale)

    def set_layout(self, layout) -> None:
        num_stages = (layout.num_poles + 1) // 2
        if num_stages > self.max_stages:
            raise ValueError(
                f"layout needs {num_stages} stages but only {self.max_stages} are available"
            )
        self._num_stages = num_stages
        for index, stage in enumerate(self):
            stage.set_pole_zero_pair(layout[index])

        self.apply_scale(
            layout.normal_gain
            / abs(self.response(layout.normal_w / (2 * math.pi)))
        )