"""Backend de gestion de commandes (pièces, avis, commandes, utilisateurs, paiements)."""
