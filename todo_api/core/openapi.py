"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter une description détaillée (conventions de l'API),

centraliser la personnalisation du Swagger.

🔹 Avantages :

La doc est toujours complète et cohérente.
"""

from fastapi.openapi.utils import get_openapi

from todo_api.domain.models import TaskStatus

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de gestion de tâches (stockage en mémoire).\n\n"
            "### Conventions\n"
            "- Les dates sont en heure locale, format `YYYY-MM-DD HH:MM:SS`.\n"
            f"- Statuts valides : {', '.join(f'`{s}`' for s in TaskStatus.values())}.\n"
            "- Les erreurs sont renvoyées sous la forme `{\"error\": \"...\"}`.\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
