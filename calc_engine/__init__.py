"""
calc-engine — unit conversion and compound-interest projection engine.

Pure, stateless calculators consumed by simple web forms.
"""

__version__ = "0.1.0"
