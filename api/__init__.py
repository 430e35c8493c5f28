"""
Techo REST API (FastAPI)
"""
