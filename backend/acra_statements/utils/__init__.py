"""
utils — generic helpers shared by the validator, projector and mapping adapter.
"""
