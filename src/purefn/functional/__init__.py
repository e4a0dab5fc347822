"""Functional primitives for purefn.

This package collects small functional programming utilities: pure building
blocks, deliberately impure counter-examples, higher-order wrappers, currying
and composition. The pure utilities are stateless and side-effect-free so they
can be memoized, parallelized and composed into pipelines.
"""
