"""Pytest configuration for unit service tests.

Service tests run against the in-memory blob store and the fixed clock
provided by the root conftest; nothing here touches the API layer.
"""
