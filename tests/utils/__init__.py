"""
Test Utilities

Explicit utilities for the functional suite.

Utilities are organized as:
- service_test_manager.py: Service health and readiness utilities
"""
