"""Configuration package for the catch pattern engine.

- config.py: configuration dataclasses and the layered loader
  (defaults, JSON file, environment, CLI)
- service.py: facade for flat access to configuration values
"""
