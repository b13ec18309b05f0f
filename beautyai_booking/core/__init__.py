"""
Core domain types for the BeautyAI booking system.
"""
