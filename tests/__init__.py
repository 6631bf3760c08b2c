"""Test suite for the admissions review engine.

Test structure follows the test pyramid:
- unit/: Unit tests - domain, application and adapter logic in isolation
- integration/: Integration tests - intake → review hand-off over real
  in-process adapters

Redis is never contacted: the Redis adapter is tested with a mocked client.
"""
