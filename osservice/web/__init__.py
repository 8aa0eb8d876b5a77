"""
Interface web d'OsService (API JSON FastAPI).

- app.py : fabrique de l'application et cycle de vie
- errors.py : traduction ErrorKind -> code HTTP
- schemas.py : schemas Pydantic d'entree/sortie
- routes/ : routes clients et ordres de service
"""
