"""
Tests package - test suite for the Keycloak admin DTO layer.

Contains:
- unit/: Unit tests for individual components
- fixtures/: Sample Keycloak API payloads
"""
