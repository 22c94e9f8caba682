"""
Engine layer: ranking primitives, configuration and the generational algorithm.

Submodules are imported explicitly (moge.engine.algorithm, moge.engine.ranking,
moge.engine.config) to keep operator imports free of cycles.
"""
