# fixmanufacture.config
from datetime import timedelta
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH)

"""
Configuration centrale du backend.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise et expose les secrets/URLs (Supabase, Stripe, JWT), CORS
- Expose la politique de suppression des commandes (ORDER_DELETE_POLICY)
- Expose les réglages du serveur uvicorn (HOST, PORT, LOG_LEVEL, UVICORN_RELOAD)
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

# JWT: secret de signature et durée de vie fixe (1 jour)
ACCESS_TOKEN_SECRET = _clean_env(os.getenv("ACCESS_TOKEN_SECRET") or "")
TOKEN_TTL = timedelta(days=1)

# Supabase: URL et clé (service prioritaire, sinon anon)
SUPABASE_URL = _clean_env(os.getenv("SUPABASE_URL") or "")
SUPABASE_KEY = _clean_env(os.getenv("SUPABASE_SERVICE_KEY") or os.getenv("SUPABASE_KEY") or os.getenv("SUPABASE_ANON_KEY") or "")

if SUPABASE_URL and not SUPABASE_URL.startswith("http"):
    SUPABASE_URL = "https://" + SUPABASE_URL
if SUPABASE_URL.endswith("/"):
    SUPABASE_URL = SUPABASE_URL.rstrip("/")

# Stripe: clé privée et devise des PaymentIntent
STRIPE_SECRET_KEY = _clean_env(os.getenv("STRIPE_SECRET_KEY") or "")
PAYMENT_CURRENCY = _clean_env(os.getenv("PAYMENT_CURRENCY") or "usd").lower()

# CORS
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Suppression des commandes: "allow" (historique) ou "block-paid"
ORDER_DELETE_POLICY = _clean_env(os.getenv("ORDER_DELETE_POLICY") or "allow").lower()

# Serveur (python -m fixmanufacture)
HOST = _clean_env(os.getenv("HOST") or "0.0.0.0")
PORT = int(_clean_env(os.getenv("PORT") or "4000"))
LOG_LEVEL = _clean_env(os.getenv("LOG_LEVEL") or "info").lower()
UVICORN_RELOAD = _clean_env(os.getenv("UVICORN_RELOAD")).lower() in ("1", "true", "yes")
