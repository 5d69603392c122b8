"""A filter described by a list of parameters, with introspection."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from iirdesign.params import ParamId, ParamInfo


class Filter:
    """Holds parameter values for a filter design and reports changes.

    ``on_change`` is called with a copy of the parameter values whenever
    they change, so the owner can redesign the filter.
    """

    def __init__(
        self,
        param_infos: Iterable[ParamInfo],
        on_change: Callable[[list[float]], None] | None = None,
    ) -> None:
        self.param_infos: tuple[ParamInfo, ...] = tuple(param_infos)
        self._on_change = on_change
        self._params = self.default_params()

    def __len__(self) -> int:
        return len(self.param_infos)

    @property
    def params(self) -> list[float]:
        return list(self._params)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(list(self._params))

    def default_params(self) -> list[float]:
        return [info.default_value for info in self.param_infos]

    def param(self, index: int) -> float:
        return self._params[index]

    def set_param(self, index: int, native_value: float) -> None:
        self._params[index] = native_value
        self._changed()

    def find_param_id(self, param_id: ParamId) -> int | None:
        """Index of the last parameter with this id, or None if there is none."""
        for index in range(len(self.param_infos) - 1, -1, -1):
            if self.param_infos[index].id == param_id:
                return index
        return None

    def set_param_by_id(self, param_id: ParamId, native_value: float) -> None:
        index = self.find_param_id(param_id)
        if index is None:
            raise KeyError(f"filter has no parameter {param_id!r}")
        self.set_param(index, native_value)

    def set_params(self, params: Sequence[float]) -> None:
        values = list(params)
        if len(values) != len(self.param_infos):
            raise ValueError(
                f"expected {len(self.param_infos)} parameters, got {len(values)}"
            )
        self._params = values
        self._changed()

    def copy_params_from(self, other: Filter | None) -> None:
        """Take matching parameters from ``other``, clamped; others get defaults."""
        params = self.default_params()
        if other is not None:
            for index, info in enumerate(self.param_infos):
                for other_index, other_info in enumerate(other.param_infos):
                    if info.id == other_info.id:
                        params[index] = info.clamp(other.param(other_index))
                        break
        self._params = params
        self._changed()