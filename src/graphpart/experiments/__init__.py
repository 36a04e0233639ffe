"""
Benchmark driver comparing the partitioning algorithms on graph files.
"""
