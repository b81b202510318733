"""게이트웨이 백엔드 서버 (FastAPI)"""
