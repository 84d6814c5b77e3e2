from typing import Any, Dict, List
from fixmanufacture.infra.store import DocumentStore

REVIEWS_TABLE = "reviews"


class ReviewsRepository:
    # Avis clients: lecture et ajout uniquement
    def __init__(self, store: DocumentStore):
        self.store = store

    def list(self) -> List[Dict[str, Any]]:
        return self.store.find(REVIEWS_TABLE)

    def add(self, review: Dict[str, Any]) -> Dict[str, Any]:
        return self.store.insert(REVIEWS_TABLE, review)
