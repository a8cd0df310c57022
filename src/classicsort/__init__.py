"""
classicsort: classical sorting algorithms over in-memory lists, with the
validation helpers, dataset generators and benchmark runner used to check
and time them.

Subpackages:
    classicsort.algorithms   one module per algorithm (in place + `sort` adapter)
    classicsort.validate     oracle and property checks
    classicsort.datasets     seeded dataset generators
    classicsort.bench        timing harness and YAML-driven experiment runner
"""

__version__ = "0.1.0"
