"""
Core domain models, numeric primitives and contracts.

Building blocks independent of any rate provider: units and quantities,
currency registry, exchange market, numeric promotion rules, JSON contracts.
"""
