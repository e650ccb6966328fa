"""
Infrastructure Package
======================

Provides abstraction layers for external dependencies following the Dependency Inversion Principle.

Modules:
    - auth: Hosted authentication (sessions, sign-in, sign-up, OAuth)
    - data: Row storage (services, orders, reviews, profiles, messages)
    - storage: Object storage for service images
    - chat: AI chat completion

This package enables:
    - Easy testing with mock implementations
    - Switching between providers without code changes
    - Loose coupling between business logic and infrastructure
"""
