# storefront/repos/contact_repo.py
from sqlalchemy import select, func
from sqlalchemy.orm import Session

from storefront.data.database import soft_read
from storefront.data.models.contact_submission import ContactSubmissionModel


class ContactRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_submission(self, submission: ContactSubmissionModel) -> ContactSubmissionModel:
        self.db.add(submission)
        self.db.flush()
        return submission

    def get_submission(self, submission_id: str) -> ContactSubmissionModel | None:
        return self.db.get(ContactSubmissionModel, submission_id)

    @soft_read(list)
    def list_submissions(self, limit: int = 20, offset: int = 0) -> list[ContactSubmissionModel]:
        stmt = (
            select(ContactSubmissionModel)
            .order_by(ContactSubmissionModel.created_at.desc(), ContactSubmissionModel.id)
            .limit(limit)
            .offset(offset)
        )
        return list(self.db.execute(stmt).scalars().all())

    @soft_read(lambda: 0)
    def count_submissions(self) -> int:
        return self.db.execute(select(func.count()).select_from(ContactSubmissionModel)).scalar_one()
