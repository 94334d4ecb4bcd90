"""Infrastructure layer for the CEP temperature services.

This package contains implementations of domain interfaces
that interact with external systems (ViaCEP, WeatherAPI, HTTP API).
"""
