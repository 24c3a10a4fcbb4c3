"""
Couche adaptateurs (infrastructure).

Les adaptateurs implementent les ports definis dans core/ports/ et fournissent
les implementations concretes pour les systemes externes.

Sous-packages :
- api/ : Client OMDb et transport httpx
- cli/ : Interface ligne de commande (Typer + Rich)

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""
