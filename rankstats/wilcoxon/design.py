"""
RankSumDesign: validated inputs for the rank-sum test.

Built with RankSumDesign.from_samples(). Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from rankstats.core.capabilities import (
    CAPABILITY_MATERIALIZED,
    CAPABILITY_REPEATABLE,
)
from rankstats.core.hypothesis import AltHyp
from rankstats.core.validation import (
    check_1d,
    check_alpha,
    check_array,
    check_finite,
)


def _to_sample(values: ArrayLike, name: str, presorted: bool) -> NDArray[np.floating[Any]]:
    """Convert to a finite 1D float64 array, sorted unless presorted."""
    arr = check_array(values, name)
    check_1d(arr, name)
    check_finite(arr, name)
    arr = arr.astype(np.float64, copy=False)
    if not presorted:
        arr = np.sort(arr, kind='stable')
    return arr


@dataclass(frozen=True)
class RankSumDesign:
    """
    Design for the two-sample Wilcoxon rank-sum test.

    Do not construct directly; use from_samples().
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _alternative: AltHyp = AltHyp.NE
    _alpha: float = 0.05
    _presorted: bool = False
    _data_name: str = field(default="x and y")

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._y

    @property
    def alternative(self) -> AltHyp:
        return self._alternative

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def presorted(self) -> bool:
        return self._presorted

    @property
    def data_name(self) -> str:
        return self._data_name

    # --- DataSource protocol ---

    @property
    def n_observations(self) -> int:
        return int(self._x.shape[0] + self._y.shape[0])

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'n_x': int(self._x.shape[0]),
            'n_y': int(self._y.shape[0]),
            'presorted': self._presorted,
        }

    def supports(self, capability: str) -> bool:
        return capability in (CAPABILITY_MATERIALIZED, CAPABILITY_REPEATABLE)

    # --- Factory ---

    @classmethod
    def from_samples(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alternative: AltHyp | str = "two.sided",
        alpha: float = 0.05,
        presorted: bool = False,
        x_name: str = "x",
        y_name: str = "y",
    ) -> RankSumDesign:
        """
        Validate two samples for the rank-sum test.

        Parameters
        ----------
        x, y : array-like
            1D numeric samples. NaN and Inf are rejected.
        alternative : AltHyp or str
            "two.sided" (default), "less" or "greater".
        alpha : float
            Significance level in (0, 1). Default 0.05.
        presorted : bool
            If True, samples are used as given and must already be in
            non-decreasing order (the merge raises OrderingError
            otherwise). If False (default), they are sorted here.
        x_name, y_name : str
            Labels used in data_name.

        Raises:
            ValidationError: On non-numeric or non-finite data, bad
                alternative, or alpha outside (0, 1)
            DimensionError: If a sample is not 1D
        """
        alt_hyp = AltHyp.from_alternative(alternative)
        alpha = check_alpha(alpha)
        return cls(
            _x=_to_sample(x, x_name, presorted),
            _y=_to_sample(y, y_name, presorted),
            _alternative=alt_hyp,
            _alpha=alpha,
            _presorted=presorted,
            _data_name=f"{x_name} and {y_name}",
        )
