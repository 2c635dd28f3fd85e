"""Test suite for the bot relay.

Test structure:
- unit/: Unit tests - fetcher, upstream client, store, handlers, config
- api/: API endpoint tests - HTTP request/response cycle via TestClient
"""
