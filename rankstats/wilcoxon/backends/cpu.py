"""
CPU reference backend for the Wilcoxon rank-sum test.

Runs the one-pass rank-sum merge and the tie-corrected large-sample
normal approximation (no continuity correction).
"""

from __future__ import annotations

from rankstats.core.compute.timing import Timer
from rankstats.core.result import Result
from rankstats.wilcoxon._common import RankSumParams
from rankstats.wilcoxon._rank_sum import RankSum
from rankstats.wilcoxon.design import RankSumDesign

METHOD = "Wilcoxon rank sum test (normal approximation)"


class CPURankSumBackend:
    """CPU reference backend for the rank-sum test."""

    @property
    def name(self) -> str:
        return 'cpu_rank_sum'

    def solve(self, design: RankSumDesign) -> Result[RankSumParams]:
        """
        Merge, rank and test the design's samples.

        Raises:
            OrderingError: If a presorted sample is out of order
            EmptySampleError: If either sample is empty
            ExcessiveTiesError: If the tie-corrected variance is not positive
        """
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        with timer.section('merge'):
            rank_sum = RankSum.from_iters(design.x.tolist(), design.y.tolist())

        has_ties = rank_sum.ties_sum_prod > 0
        if has_ties:
            warnings_list.append("ties present; variance uses tie correction")

        with timer.section('normal_approximation'):
            z = rank_sum.z()
            test = rank_sum.test(design.alternative, design.alpha)

        timer.stop()

        params = RankSumParams(
            n_x=rank_sum.n_x,
            n_y=rank_sum.n_y,
            w=rank_sum.w,
            r_w=rank_sum.r_w(),
            u_x=rank_sum.mann_whitney_u_x(),
            u_y=rank_sum.mann_whitney_u_y(),
            u=rank_sum.mann_whitney_u(),
            ties_sum_prod=rank_sum.ties_sum_prod,
            z=z,
            p_value=test.p,
            alternative=design.alternative,
            alpha=design.alpha,
            test=test,
            method=METHOD,
            data_name=design.data_name,
        )

        return Result(
            params=params,
            info={'test_type': 'wilcox_rank_sum', 'has_ties': has_ties},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
