# cryptolab Test Suite
"""
Test suite including:
- Unit tests (core arithmetic, sampling, config)
- Integration tests (demo driver, cross-module workflows)
- Security tests (invalid inputs, overflow, primality weaknesses)

Run with: pytest
"""
