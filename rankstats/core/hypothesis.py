"""
Shared vocabulary for hypothesis tests.

Defines the alternative-hypothesis tag (AltHyp), the accepted hypothesis
(Hyp), the test verdict (HypTestResult) and confidence intervals (Ci).
These are plain immutable values; tests populate them, callers read them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from rankstats.core.exceptions import ValidationError


VALID_ALTERNATIVES = ("two.sided", "less", "greater")


class AltHyp(Enum):
    """
    Alternative to the null hypothesis of equality.

    Values are R's `alternative` strings so either spelling can be used
    at the API boundary.
    """
    LT = "less"
    GT = "greater"
    NE = "two.sided"

    @classmethod
    def from_alternative(cls, alternative: AltHyp | str) -> AltHyp:
        """Accept an AltHyp member or one of VALID_ALTERNATIVES."""
        if isinstance(alternative, cls):
            return alternative
        try:
            return cls(alternative)
        except ValueError:
            raise ValidationError(
                f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
            ) from None


@dataclass(frozen=True)
class Hyp:
    """
    Hypothesis accepted by a test: the null, or a specific alternative.

    Construct with Hyp.null() or Hyp.alt(alt_hyp).
    """
    alternative: AltHyp | None = None

    @classmethod
    def null(cls) -> Hyp:
        return cls(None)

    @classmethod
    def alt(cls, alt_hyp: AltHyp) -> Hyp:
        return cls(alt_hyp)

    @property
    def is_null(self) -> bool:
        return self.alternative is None

    def alt_hyp(self) -> AltHyp:
        """The alternative carried by this hypothesis; NE for the null."""
        if self.alternative is None:
            return AltHyp.NE
        return self.alternative

    def __repr__(self) -> str:
        if self.alternative is None:
            return "Hyp.null()"
        return f"Hyp.alt(AltHyp.{self.alternative.name})"


@dataclass(frozen=True)
class HypTestResult:
    """
    Result of a hypothesis test against the null hypothesis of equality.

    Attributes
    ----------
    p : float
        p-value of the test.
    alpha : float
        Significance level; the confidence level is 1 - alpha.
    alt_hyp : AltHyp
        Alternative hypothesis the test was run against.
    accepted : Hyp
        Derived at construction: Hyp.alt(alt_hyp) if p < alpha, else
        Hyp.null(). A NaN p-value therefore accepts the null.
    """
    p: float
    alpha: float
    alt_hyp: AltHyp
    accepted: Hyp = field(init=False)

    def __post_init__(self):
        if self.p < self.alpha:
            accepted = Hyp.alt(self.alt_hyp)
        else:
            accepted = Hyp.null()
        object.__setattr__(self, 'accepted', accepted)


class PositionWrtCi(Enum):
    """Position of a value with respect to a confidence interval."""
    BELOW = "below"
    IN = "in"
    ABOVE = "above"


class Ci(NamedTuple):
    """Confidence interval (lo, hi)."""
    lo: float
    hi: float

    def position_of(self, value: float) -> PositionWrtCi:
        if value <= self.lo:
            return PositionWrtCi.BELOW
        if value < self.hi:
            return PositionWrtCi.IN
        return PositionWrtCi.ABOVE
