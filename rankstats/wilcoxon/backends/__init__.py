"""Backends for the Wilcoxon rank-sum test."""

from rankstats.wilcoxon.backends.cpu import CPURankSumBackend

__all__ = ["CPURankSumBackend"]
