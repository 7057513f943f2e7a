"""
Utilities Module for formcheck

Provides the form-level validation system built on the core field validators:
rule sets, rule set schema validation and result reporting.
"""
