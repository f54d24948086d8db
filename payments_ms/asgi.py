"""
ASGI entrypoint: expose `app` for process managers / deployments.

- En production, un process manager (ex: gunicorn/uvicorn-workers) importe `payments_ms.asgi:app`.
- Toute la configuration FastAPI (routes, middlewares, exceptions, service Stripe) est centralisée
  dans payments_ms.app_setup.factory, ce fichier ne fait qu'exposer l'instance `app`.
"""

from payments_ms.app import app

if __name__ == "__main__":
    import uvicorn
    from payments_ms.config import PORT

    uvicorn.run(
        "payments_ms.asgi:app",
        host="0.0.0.0",
        port=PORT,
        reload=True,
    )
