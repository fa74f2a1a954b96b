# storefront/services/contact_service.py
from sqlalchemy.orm import Session

from storefront.data.database import transaction
from storefront.data.models._common import utcnow
from storefront.data.models.contact_submission import ContactSubmissionModel
from storefront.data.models.user import UserModel
from storefront.domain.errors import NotFoundError
from storefront.domain.ids import new_id
from storefront.domain.schemas import ContactSubmit
from storefront.repos.contact_repo import ContactRepo
from storefront.services.access import ensure_role, ADMIN
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class ContactService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ContactRepo(db)

    def submit(self, payload: ContactSubmit) -> str:
        submission = ContactSubmissionModel(id=new_id("contact"), **payload.model_dump())
        with transaction(self.db):
            self.repo.add_submission(submission)

        logger.info(f"Contact submission {submission.id}: {payload.subject!r}")
        return submission.id

    def list_submissions(self, user: UserModel, limit: int = 20, offset: int = 0) -> dict:
        ensure_role(user, ADMIN)
        return {
            "submissions": self.repo.list_submissions(limit, offset),
            "total": self.repo.count_submissions(),
        }

    def respond(self, user: UserModel, submission_id: str, response: str) -> None:
        ensure_role(user, ADMIN)
        with transaction(self.db):
            submission = self.repo.get_submission(submission_id)
            if not submission:
                raise NotFoundError("Submission not found")

            submission.response = response
            submission.status = "responded"
            submission.responded_by = user.id
            submission.responded_at = utcnow()
