"""
Core domain models, numerical guards, and contracts.

This module contains the foundational building blocks that are independent
of the conversion algorithm itself (configuration, float guards, schemas).
"""
