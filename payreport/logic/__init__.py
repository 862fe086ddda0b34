"""Logic package for the employee report.

Holds the formatting helpers, the Decimal salary metrics and the report
builders. No runtime logic lives in this file.
"""
