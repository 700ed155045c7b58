"""Rotas de validação sob demanda."""

from api.routes.validation.router import router

__all__ = ["router"]
