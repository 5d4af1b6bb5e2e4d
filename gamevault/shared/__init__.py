"""
Shared code used by both the API and the worker: configuration-driven
infrastructure (db, adapters), models, repositories, schemas and services.
"""
