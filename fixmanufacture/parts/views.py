# module fixmanufacture.parts.views

"""Endpoints du catalogue de pièces.
- GET /parts, GET /parts/{id}: lecture publique.
- PUT /parts/{id}: écrase available_quantity (upsert, pas de décrément).
- POST /parts: création réservée aux admins (require_admin).
"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends

from fixmanufacture.auth.dependencies import require_admin
from fixmanufacture.auth.tokens import TokenClaims
from fixmanufacture.dependencies import get_parts
from fixmanufacture.parts.models import PartIn, QuantityUpdate
from fixmanufacture.parts.repository import PartsRepository

router = APIRouter(prefix="/parts", tags=["Parts"])


@router.get("")
def list_parts(parts: PartsRepository = Depends(get_parts)) -> List[Dict[str, Any]]:
    return parts.list()


@router.get("/{part_id}")
def get_part(part_id: str, parts: PartsRepository = Depends(get_parts)) -> Optional[Dict[str, Any]]:
    # Pièce absente: corps null (pas de 404)
    return parts.get(part_id)


@router.put("/{part_id}")
def update_quantity(part_id: str, body: QuantityUpdate, parts: PartsRepository = Depends(get_parts)) -> Dict[str, Any]:
    return parts.set_quantity(part_id, body.quantity)


@router.post("")
def create_part(
    body: PartIn,
    admin: TokenClaims = Depends(require_admin),
    parts: PartsRepository = Depends(get_parts),
) -> Dict[str, Any]:
    return parts.create(body.model_dump(exclude_none=True))
