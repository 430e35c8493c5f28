"""
리소스별 APIRouter
"""
