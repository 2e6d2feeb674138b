"""
Test suite for the journy.io SDK.

Tests are organized into:
- test_identity.py - User and account identities
- test_properties.py - Property and metadata formatting
- test_event.py - Event values
- test_payloads.py - Request bodies
- test_responses.py - Response interpretation
- test_client.py - Client operations and configuration
- test_exceptions.py - Exception hierarchy
- test_integration.py - Multi-step workflows
- conftest.py - Pytest fixtures and configuration

Run tests with:
    pytest journy_sdk/tests/
    pytest journy_sdk/tests/ --cov=journy_sdk
"""
