"""
Couche domaine (core).

Contient les ports (interfaces abstraites) et la taxonomie d'erreurs du catalogue.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- errors : Erreurs classées par origine (store, fournisseur, requête locale)
"""
