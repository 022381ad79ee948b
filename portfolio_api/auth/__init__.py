"""
portfolio_api.auth

    from portfolio_api.auth import create_router
    app.include_router(create_router(store))
"""

from .auth_routes import create_router

__all__ = ["create_router"]
