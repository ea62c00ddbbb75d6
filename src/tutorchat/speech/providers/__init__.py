"""Concrete speech engines.

Each engine is imported lazily by the factory so the speech libraries stay optional.
"""
