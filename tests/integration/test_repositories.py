"""Integration tests for the eligibility submission repository"""

from dataclasses import replace
from sqlalchemy.orm import Session
from finserv_calculators.domain.eligibility import compute_eligibility
from finserv_calculators.domain.models import EligibilityInput
from finserv_calculators.infrastructure.database.repositories import SubmissionRepository


def test_create_submission_with_plain_string_employment(db: Session, salaried_applicant: EligibilityInput):
    """Engine accepts employment type as a plain string; the store must too"""
    data = replace(salaried_applicant, employment_type="self-employed")
    result = compute_eligibility(data)

    repo = SubmissionRepository(db)
    submission = repo.create_submission(
        name="Ravi Kumar",
        phone="9123456780",
        email="ravi@example.com",
        data=data,
        result=result,
    )
    db.commit()

    assert submission.employment_type == "self-employed"
    assert submission.status == "pending"
    assert submission.affordable_emi == 25_000


def test_list_submissions_newest_first(db: Session, salaried_applicant: EligibilityInput):
    repo = SubmissionRepository(db)
    result = compute_eligibility(salaried_applicant)

    for name in ("Asha Verma", "Bina Rao", "Chitra Iyer"):
        repo.create_submission(name=name, phone="9876543210", email="lead@example.com", data=salaried_applicant, result=result)
        db.commit()

    assert [s.name for s in repo.list_submissions()] == ["Chitra Iyer", "Bina Rao", "Asha Verma"]
