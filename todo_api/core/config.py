"""
➡️ But : Centraliser tous les paramètres configurables (nom d'app, port, logs, seed...).

Utilise pydantic-settings pour charger automatiquement les variables d'environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from todo_api.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Todo API"
    ENV: str = "dev"  # dev | prod | test

    # -----------------------------
    # Serveur
    # -----------------------------
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # CORS : tout le monde par défaut
    CORS_ORIGINS: list[str] = ["*"]

    # -----------------------------
    # Données
    # -----------------------------
    SEED_EXAMPLE_TASKS: bool = True  # 3 tâches d'exemple au démarrage

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


# Instance globale importable partout
settings = Settings()
