"""Integration tests for Questrade client.

These tests run against the Questrade practice environment and require a
practice refresh token.

Setup:
    1. Generate a refresh token for a practice account in the API hub and set
       it (via .env.integration or otherwise):
       - QUESTRADE_PRACTICE_REFRESH_TOKEN

    2. Run integration tests:
       pytest tests/integration -m integration

Refresh tokens are single use. After the first run the replacement token is
kept in tests/integration/.refresh_token and preferred over the variable.
"""
