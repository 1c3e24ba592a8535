"""Performance benchmarks for Zero Conduit.

This package contains microbenchmarks for the iteration loop, comparing the
cost of recording iterates against the null tracker.
"""
