"""
services — metrics, industry classification, framework projection and the
mapping-service adapter built on top of the statement schema.
"""
