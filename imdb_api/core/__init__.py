"""
Couche domaine (core).

Contient les enregistrements metier, les objets valeur, les erreurs et les ports.
Cette couche n'a AUCUNE dependance vers l'infrastructure (httpx, loguru, CLI).

Sous-packages :
- entities/ : Enregistrements (Movie, Episode, TVShow, Game, SearchResult)
- value_objects/ : Objets valeur immutables (MovieOptions, MovieRequest, SearchRequest)
- ports/ : Interfaces abstraites (ITransport)
"""
