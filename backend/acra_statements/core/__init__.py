"""
core — configuration, logging and presentation constants shared by every package.
"""
