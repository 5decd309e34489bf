"""SEBI CSCRF Cyber Capability Index (CCI) calculator.

Scores the 23 weighted CSCRF measures, rolls them up into framework
categories and domains, and classifies the composite index into a
cybersecurity maturity level.
"""

__version__ = "0.1.0"
