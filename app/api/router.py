"""
Router principal da API.
Agrupa os endpoints de autenticacao, cultos e agenda.
"""
from fastapi import APIRouter

from app.api.endpoints import agenda, auth, cultos


api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(cultos.router)
api_router.include_router(agenda.router)
