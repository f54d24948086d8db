# payments_ms.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"

def load_env(path: Path = ENV_PATH) -> None:
    # Les variables déjà présentes dans le process restent prioritaires sur le .env
    load_dotenv(dotenv_path=path, override=False)

load_env()

"""
Configuration centrale du service de paiements.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise et expose les secrets Stripe et les URLs de redirection du checkout
- Valeurs lues une seule fois au démarrage du process, immuables ensuite
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

# Stripe: clé secrète (obligatoire) et secret de signature du webhook
# - STRIPE_SECRET_KEY / STRIPE_WEBHOOK_SECRET restent acceptés comme alias
STRIPE_SECRET = _clean_env(os.getenv("STRIPE_SECRET") or os.getenv("STRIPE_SECRET_KEY") or "")
STRIPE_ENDPOINT_SECRET = _clean_env(os.getenv("STRIPE_ENDPOINT_SECRET") or os.getenv("STRIPE_WEBHOOK_SECRET") or "")

# Pages de succès/annulation du checkout (URLs absolues transmises à Stripe)
STRIPE_SUCCESS_URL = _clean_env(os.getenv("STRIPE_SUCCESS_URL") or "http://localhost:3000/payments/success")
STRIPE_CANCEL_URL = _clean_env(os.getenv("STRIPE_CANCEL_URL") or "http://localhost:3000/payments/cancel")

# CORS / hôtes autorisés
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if h.strip()]

# En-tête HSTS (à activer derrière HTTPS)
FORCE_HSTS = (os.getenv("FORCE_HSTS", "false").lower() == "true")

# Serveur / logs
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "info")
