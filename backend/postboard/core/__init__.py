# postboard/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Storage initialization and seed data on startup
- db: Database configuration and connection management
- security: Password hashing and access tokens
"""
