"""
acra_statements — ACRA/XBRL financial statement validation and projection backend.

Provides the statement schema, the validator, the multi-framework projector,
the ratio calculator and the industry classifier, plus a thin FastAPI surface.
"""
