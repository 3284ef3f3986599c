"""Performance benchmarks for graphclassics.

Microbenchmarks for the hot paths of the library, such as incremental
all-pairs updates versus full Floyd-Warshall recomputation.
"""
