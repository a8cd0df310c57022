"""
Datasets package public API.

Re-export the dataset generator so callers can write:
    from classicsort.datasets import make_dataset, SUPPORTED_DISTS
"""

from .generators import DIST_VALUE_KIND, SUPPORTED_DISTS, make_dataset

__all__ = ["make_dataset", "SUPPORTED_DISTS", "DIST_VALUE_KIND"]
