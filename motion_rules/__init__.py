"""
motion_rules - rule enforcement and template selection for generated motion graphics.

Checks animation specs against professional layout/motion rules, learns new
rules from user corrections, and ranks animation templates for a request.
"""

__version__ = "1.0.0"
