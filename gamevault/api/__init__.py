"""
GameVault HTTP API (FastAPI).
"""
