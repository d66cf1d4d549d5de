"""
Command-line interface for local ACME account material.
"""
