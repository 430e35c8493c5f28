"""
Techo API 클라이언트
"""

from client.techo_client import TechoClient, TechoAPIError

__all__ = ["TechoClient", "TechoAPIError"]
