"""Runtime layer: the Model, the pure reducer and the host that drives it.

The reducer depends only on the domain layer. The host adds the clock and
zone detection from infrastructure.
"""
