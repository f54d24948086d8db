"""
Point d'entrée principal du service de paiements.

Usage:
    python -m payments_ms

Ce mode lance uvicorn directement et lit quelques variables d'environnement:
- PORT: port d'écoute (par défaut 3000)
- UVICORN_RELOAD: active le reload auto en dev ("1"/"true"/"yes")
- LOG_LEVEL: niveau de logs (ex: "info", "debug")
"""
import os
import uvicorn

from payments_ms.config import PORT, LOG_LEVEL

if __name__ == "__main__":
    reload_flag = os.environ.get("UVICORN_RELOAD", "").lower() in ("1", "true", "yes")
    uvicorn.run(
        "payments_ms.asgi:app",
        host="0.0.0.0",
        port=PORT,
        reload=reload_flag,
        log_level=LOG_LEVEL.lower(),
    )
