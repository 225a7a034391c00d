"""
Rank-sum test solution type.

RankSumSolution wraps Result[RankSumParams] and provides an R
print.htest-style summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from rankstats.core.hypothesis import AltHyp, Hyp, HypTestResult
from rankstats.core.result import Result
from rankstats.wilcoxon._common import RankSumParams

if TYPE_CHECKING:
    from rankstats.wilcoxon.design import RankSumDesign


_ALTERNATIVE_TEXT = {
    AltHyp.NE: "is not equal to",
    AltHyp.LT: "is less than",
    AltHyp.GT: "is greater than",
}


@dataclass
class RankSumSolution:
    """
    User-facing rank-sum test results.

    Wraps Result[RankSumParams]. All payload fields are available as
    properties; summary() formats them like R's print.htest.
    """
    _result: Result[RankSumParams]
    _design: 'RankSumDesign | None'

    # --- Rank statistics ---

    @property
    def n_x(self) -> int:
        return self._result.params.n_x

    @property
    def n_y(self) -> int:
        return self._result.params.n_y

    @property
    def w(self) -> float:
        """Rank sum of y (Hollander-Wolfe W)."""
        return self._result.params.w

    @property
    def statistic(self) -> float:
        """W as reported by R's wilcox.test()."""
        return self._result.params.r_w

    @property
    def statistic_name(self) -> str:
        return "W"

    @property
    def u_x(self) -> float:
        return self._result.params.u_x

    @property
    def u_y(self) -> float:
        return self._result.params.u_y

    @property
    def u(self) -> float:
        return self._result.params.u

    @property
    def ties_sum_prod(self) -> int:
        return self._result.params.ties_sum_prod

    # --- Test outcome ---

    @property
    def z(self) -> float:
        return self._result.params.z

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def alternative(self) -> AltHyp:
        return self._result.params.alternative

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def test(self) -> HypTestResult:
        return self._result.params.test

    @property
    def accepted(self) -> Hyp:
        return self._result.params.test.accepted

    @property
    def reject_null(self) -> bool:
        return not self._result.params.test.accepted.is_null

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format as R's print.htest output.

        Produces output like:

                Wilcoxon rank sum test (normal approximation)

            data:  x and y
            W = 35, z = 1.2247, p-value = 0.2207
            alternative hypothesis: true location shift is not equal to 0
            decision at alpha = 0.05: do not reject null hypothesis
        """
        p = self._result.params
        lines = [f"\t{p.method}", "", f"data:  {p.data_name}"]
        lines.append(
            f"W = {p.r_w:.5g}, z = {p.z:.5g}, "
            f"p-value = {_format_pvalue(p.p_value)}"
        )
        lines.append(
            "alternative hypothesis: true location shift "
            f"{_ALTERNATIVE_TEXT[p.alternative]} 0"
        )
        decision = "do not reject" if p.test.accepted.is_null else "reject"
        lines.append(f"decision at alpha = {p.alpha:g}: {decision} null hypothesis")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"RankSumSolution(W={p.r_w:.4g}, z={p.z:.4g}, "
            f"p_value={p.p_value:.4g}, alternative={p.alternative.value!r})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
