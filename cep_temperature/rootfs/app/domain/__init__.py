"""Domain layer for the CEP temperature services.

This package contains the core business logic for resolving a postal
code to a temperature reading, following Domain-Driven Design (DDD)
principles.

The domain layer is pure Python with no external dependencies on
Flask, requests, or any infrastructure concerns.
"""
