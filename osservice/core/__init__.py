"""
Couche domaine (core).

Contient les entités métier, les ports (interfaces abstraites), la politique
d'acceptation des pièces jointes et la hiérarchie d'erreurs.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, BDD).

Sous-modules :
- entities/ : Entités métier (Customer, ServiceOrder, Attachment)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- attachment_policy.py : Validation des fichiers envoyés
- errors.py : Taxonomie des erreurs métier
"""
