"""
GameVault - game collection tracker API.

Packages:
=========
    config/   Environment-driven settings
    shared/   Models, repositories, services, adapters
    api/      FastAPI application
    worker/   Background task consumer
"""

__version__ = "1.0.0"
