"""
Core engine: pure numeric transforms, domain value objects and contracts.
"""
