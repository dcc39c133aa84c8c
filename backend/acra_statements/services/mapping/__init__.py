"""
mapping — adapter between the mapping service's snake_case payload and the
filing document shape.
"""

from acra_statements.services.mapping.acra_mapping import denormalize_acra_data, normalize_acra_data

__all__ = ["denormalize_acra_data", "normalize_acra_data"]
