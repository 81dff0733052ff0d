# app/routers/resources.py
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.resource import Resource

router = APIRouter()


@router.get("")
def list_resources(category: Optional[str] = None, db: Session = Depends(get_db)):
    q = db.query(Resource)
    if category:
        q = q.filter(Resource.category == category)
    resources = q.order_by(Resource.created_at.desc(), Resource.id.asc()).all()
    return {
        "success": True,
        "count": len(resources),
        "resources": [r.to_dict() for r in resources],
    }
