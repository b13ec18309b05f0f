"""
BeautyAI booking core: booking wizard, payment intake and review aggregation.
"""

__version__ = "1.0.0"
