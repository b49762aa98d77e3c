"""
Integration tests for vecdist.

These tests drive the kernels and the batch dispatcher the way a
nearest-neighbor pipeline does and compare against scipy.
"""
