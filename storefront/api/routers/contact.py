# storefront/api/routers/contact.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, get_current_user
from storefront.data.models.user import UserModel
from storefront.domain.schemas import ContactListOut, ContactRespond, ContactSubmit, IdOut, SuccessOut
from storefront.services.contact_service import ContactService

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("", response_model=IdOut, status_code=201)
def submit(payload: ContactSubmit, db: Session = Depends(get_db)):
    return {"id": ContactService(db).submit(payload)}


@router.get("", response_model=ContactListOut)
def list_submissions(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return ContactService(db).list_submissions(user, limit, offset)


@router.post("/{submission_id}/respond", response_model=SuccessOut)
def respond(
    submission_id: str,
    payload: ContactRespond,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    ContactService(db).respond(user, submission_id, payload.response)
    return {"success": True}
