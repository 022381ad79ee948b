"""
portfolio_api package

Run the server with the console script:

    portfolio-api

or through uvicorn's factory mode:

    uvicorn portfolio_api.main:build_app --factory

Do NOT put runtime logic here.
"""

__version__ = "0.1.0"
